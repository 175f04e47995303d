"""Transformation of raw documentation entries into module records.

Filters out type aliases and non-public or undocumented members,
flattens comment text for table cells, and resolves which package
README each module belongs to.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from tsdoc_readme.parsers.structure import (
    DocComment,
    DocumentationEntry,
    EntryKind,
    EventDoc,
    MemberFlags,
    MethodDoc,
    ModuleRecord,
    PropertyDoc,
)
from tsdoc_readme.utils.config import ReadmeConfig

logger = logging.getLogger(__name__)

_EVENTS_TAG = "events"


def clean_comment(comment: str) -> str:
    """Replace every newline in a comment with a single space."""
    return comment.replace("\n", " ")


def is_documented(doc: Optional[DocComment]) -> bool:
    return doc is not None and bool(doc.contents_raw.strip())


def should_include_member(flags: MemberFlags, doc: Optional[DocComment]) -> bool:
    """Decide whether a member belongs in the public API table.

    Args:
        flags: The member's modifiers.
        doc: The member's doc comment, if any.

    Returns:
        True if the member is documented and neither protected nor static.
    """
    return not flags.is_protected and not flags.is_static and is_documented(doc)


def _parent_path(path: str) -> str:
    index = path.rfind("/")
    return path[:index] if index >= 0 else ""


class ModuleTransformer:
    """Turns DocumentationEntry objects into ModuleRecord objects.

    The target directory of a module is the closest directory, walking
    up from its source file, that holds a README under the packages
    root.
    """

    def __init__(
        self,
        root: Union[str, Path] = ".",
        config: Optional[ReadmeConfig] = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            root: Project root containing the packages directory.
            config: README settings. Uses defaults if not given.
        """
        self.config = config or ReadmeConfig()
        self.packages_path = Path(root) / self.config.packages_dir

    def transform(
        self, module_name: str, entry: DocumentationEntry
    ) -> Optional[ModuleRecord]:
        """Build the record for one module.

        Args:
            module_name: Name the module is documented under.
            entry: The module's raw documentation.

        Returns:
            The module record, or None for type aliases.
        """
        if entry.kind == EntryKind.TYPE_ALIAS:
            # ignore types
            return None

        target_directory = self.resolve_target_directory(entry.file_name)
        if not target_directory:
            logger.warning(
                "No %s found for %s (%s)",
                self.config.file_name,
                module_name,
                entry.file_name,
            )

        return ModuleRecord(
            module_name=module_name,
            methods=tuple(self.get_methods(entry)),
            properties=tuple(self.get_properties(entry)),
            events=tuple(self.get_events(entry)),
            target_directory=target_directory,
        )

    def resolve_target_directory(self, file_path: str) -> str:
        """Find the closest directory with a README for a source file.

        The search starts at the first path segment beginning with the
        component prefix (e.g. ``mdc-textfield/helper-text``) and moves
        up one segment at a time.

        Args:
            file_path: Source file path of the module.

        Returns:
            Directory path relative to the packages root, or an empty
            string if no README was found.
        """
        file_path = file_path.replace("\\", "/")
        start = file_path.find("/" + self.config.component_prefix) + 1
        directory = _parent_path(file_path[start:])

        for _ in range(directory.count("/") + 1):
            if not directory:
                break
            if (self.packages_path / directory / self.config.file_name).exists():
                return directory
            directory = _parent_path(directory)
        return ""

    def get_methods(self, entry: DocumentationEntry) -> list[MethodDoc]:
        """Collect public, documented methods of a module.

        Args:
            entry: The module's raw documentation.

        Returns:
            Method rows using each method's first signature.
        """
        methods = []
        for method in entry.methods:
            if not method.signatures:
                continue
            signature = method.signatures[0]
            if not should_include_member(method.flags, signature.documentation):
                continue
            methods.append(
                MethodDoc(
                    signature=f"{method.name}{signature.type}",
                    documentation=clean_comment(
                        signature.documentation.contents_raw
                    ),
                )
            )
        return methods

    def get_properties(self, entry: DocumentationEntry) -> list[PropertyDoc]:
        """Collect public, documented properties of a module.

        Args:
            entry: The module's raw documentation.

        Returns:
            Property rows.
        """
        return [
            PropertyDoc(
                name=prop.name,
                type=prop.type,
                documentation=clean_comment(prop.documentation.contents_raw),
            )
            for prop in entry.properties
            if should_include_member(prop.flags, prop.documentation)
        ]

    def get_events(self, entry: DocumentationEntry) -> list[EventDoc]:
        """Collect ``@events`` tags from a module's own doc comment.

        Args:
            entry: The module's raw documentation.

        Returns:
            Event lines, or an empty list if the module is undocumented.
        """
        if not entry.documentation:
            return []
        return [
            EventDoc(documentation=tag.value)
            for tag in entry.documentation.tags
            if tag.tag == _EVENTS_TAG
        ]
