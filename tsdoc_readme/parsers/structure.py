"""Data models for extracted TypeScript documentation.

Defines dataclasses for the raw documentation tree produced by the
TypeScript parser (entries, members, signatures, doc comments) and
for the per-module records that feed the README tables. These models
form the shared vocabulary between the extractor, the transformer and
the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class EntryKind(str, Enum):
    """Kinds of top-level declarations reported by the parser."""

    CLASS = "class"
    INTERFACE = "interface"
    TYPE_ALIAS = "type alias"
    ENUM = "enum"


@dataclass
class DocTag:
    """A single ``@tag value`` line from a doc comment.

    Attributes:
        tag: Tag name without the leading ``@``.
        value: Remainder of the line after the tag name.
    """

    tag: str
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this tag.
        """
        return {"tag": self.tag, "value": self.value}


@dataclass
class DocComment:
    """A parsed ``/** ... */`` documentation comment.

    Attributes:
        contents_raw: Comment text with delimiters and leading asterisks
            removed, lines joined with newlines.
        contents: Ordered text blocks and tags making up the comment.
    """

    contents_raw: str
    contents: list[Union[str, DocTag]] = field(default_factory=list)

    @property
    def tags(self) -> list[DocTag]:
        """All tags in the comment, in source order."""
        return [c for c in self.contents if isinstance(c, DocTag)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this comment.
        """
        return {
            "contents_raw": self.contents_raw,
            "contents": [
                c.to_dict() if isinstance(c, DocTag) else c for c in self.contents
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocComment:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with comment fields.

        Returns:
            A new DocComment instance.
        """
        contents: list[Union[str, DocTag]] = []
        for item in data.get("contents", []):
            if isinstance(item, dict):
                contents.append(DocTag(tag=item["tag"], value=item.get("value", "")))
            else:
                contents.append(item)
        return cls(contents_raw=data.get("contents_raw", ""), contents=contents)


def _doc_from_dict(data: Optional[dict[str, Any]]) -> Optional[DocComment]:
    return DocComment.from_dict(data) if data is not None else None


@dataclass
class MemberFlags:
    """Modifiers attached to a class or interface member."""

    is_protected: bool = False
    is_private: bool = False
    is_static: bool = False
    is_optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of these flags.
        """
        return {
            "is_protected": self.is_protected,
            "is_private": self.is_private,
            "is_static": self.is_static,
            "is_optional": self.is_optional,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemberFlags:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with flag fields.

        Returns:
            A new MemberFlags instance.
        """
        return cls(
            is_protected=data.get("is_protected", False),
            is_private=data.get("is_private", False),
            is_static=data.get("is_static", False),
            is_optional=data.get("is_optional", False),
        )


@dataclass
class SignatureDoc:
    """One call signature of a method.

    Attributes:
        type: Call type formatted as ``(<params>) => <return type>``.
        documentation: Doc comment attached to this signature, if any.
    """

    type: str
    documentation: Optional[DocComment] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this signature.
        """
        return {
            "type": self.type,
            "documentation": (
                self.documentation.to_dict() if self.documentation else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SignatureDoc:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with signature fields.

        Returns:
            A new SignatureDoc instance.
        """
        return cls(
            type=data["type"],
            documentation=_doc_from_dict(data.get("documentation")),
        )


@dataclass
class MethodEntry:
    """A method of a class or interface.

    Attributes:
        name: Method name.
        signatures: Call signatures in source order; overloads append.
        flags: Modifiers from the first declaration.
    """

    name: str
    signatures: list[SignatureDoc] = field(default_factory=list)
    flags: MemberFlags = field(default_factory=MemberFlags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this method.
        """
        return {
            "name": self.name,
            "signatures": [s.to_dict() for s in self.signatures],
            "flags": self.flags.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MethodEntry:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with method fields.

        Returns:
            A new MethodEntry instance.
        """
        return cls(
            name=data["name"],
            signatures=[SignatureDoc.from_dict(s) for s in data.get("signatures", [])],
            flags=MemberFlags.from_dict(data.get("flags", {})),
        )


@dataclass
class PropertyEntry:
    """A property of a class or interface.

    Attributes:
        name: Property name.
        type: Declared type, or ``any`` when unannotated.
        flags: Member modifiers.
        documentation: Doc comment attached to the property, if any.
    """

    name: str
    type: str = "any"
    flags: MemberFlags = field(default_factory=MemberFlags)
    documentation: Optional[DocComment] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this property.
        """
        return {
            "name": self.name,
            "type": self.type,
            "flags": self.flags.to_dict(),
            "documentation": (
                self.documentation.to_dict() if self.documentation else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PropertyEntry:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with property fields.

        Returns:
            A new PropertyEntry instance.
        """
        return cls(
            name=data["name"],
            type=data.get("type", "any"),
            flags=MemberFlags.from_dict(data.get("flags", {})),
            documentation=_doc_from_dict(data.get("documentation")),
        )


@dataclass
class DocumentationEntry:
    """Raw documentation for one top-level declaration.

    Attributes:
        name: Declared name (e.g. ``MDCDrawerFoundation``).
        kind: Declaration kind.
        file_name: Source path relative to the project root, POSIX form.
        documentation: Doc comment on the declaration, if any.
        methods: Methods declared on the class or interface.
        properties: Properties declared on the class or interface.
    """

    name: str
    kind: EntryKind
    file_name: str
    documentation: Optional[DocComment] = None
    methods: list[MethodEntry] = field(default_factory=list)
    properties: list[PropertyEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this entry.
        """
        return {
            "name": self.name,
            "kind": self.kind.value,
            "file_name": self.file_name,
            "documentation": (
                self.documentation.to_dict() if self.documentation else None
            ),
            "methods": [m.to_dict() for m in self.methods],
            "properties": [p.to_dict() for p in self.properties],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentationEntry:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with entry fields.

        Returns:
            A new DocumentationEntry instance.
        """
        return cls(
            name=data["name"],
            kind=EntryKind(data["kind"]),
            file_name=data["file_name"],
            documentation=_doc_from_dict(data.get("documentation")),
            methods=[MethodEntry.from_dict(m) for m in data.get("methods", [])],
            properties=[PropertyEntry.from_dict(p) for p in data.get("properties", [])],
        )


@dataclass(frozen=True)
class MethodDoc:
    """A method row of the API table."""

    signature: str
    documentation: str


@dataclass(frozen=True)
class PropertyDoc:
    """A property row of the API table."""

    name: str
    type: str
    documentation: str


@dataclass(frozen=True)
class EventDoc:
    """An event line of the API table."""

    documentation: str


@dataclass(frozen=True)
class ModuleRecord:
    """Public, documented members of one module, ready for rendering.

    Attributes:
        module_name: Name of the documented module.
        methods: Public documented methods.
        properties: Public documented properties.
        events: Events declared with ``@events`` tags.
        target_directory: Directory under the packages root whose README
            receives this module's table. Empty when none was found.
    """

    module_name: str
    methods: tuple[MethodDoc, ...] = ()
    properties: tuple[PropertyDoc, ...] = ()
    events: tuple[EventDoc, ...] = ()
    target_directory: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether the module has nothing to render."""
        return not (self.methods or self.properties or self.events)


@dataclass
class DirectoryGroup:
    """Module records grouped by the README directory they render into.

    Attributes:
        records: Mapping of target directory to records in insertion order.
    """

    records: dict[str, list[ModuleRecord]] = field(default_factory=dict)

    def add(self, record: ModuleRecord) -> None:
        """Append a record to the list for its target directory.

        Args:
            record: The ModuleRecord to add.
        """
        self.records.setdefault(record.target_directory, []).append(record)

    def directories(self) -> list[str]:
        """List every target directory seen so far."""
        return list(self.records)

    def get(self, directory: str) -> list[ModuleRecord]:
        """Get the records collected for a directory.

        Args:
            directory: Target directory to query.

        Returns:
            Records in insertion order, or an empty list.
        """
        return list(self.records.get(directory, []))
