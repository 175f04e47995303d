"""TypeScript documentation parser using tree-sitter.

Extracts classes, interfaces, type aliases and enums together with
their methods, properties and TSDoc comments from TypeScript source
files into the shared documentation models.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

import tree_sitter
import tree_sitter_typescript as tsts

from tsdoc_readme.parsers.structure import (
    DocComment,
    DocTag,
    DocumentationEntry,
    EntryKind,
    MemberFlags,
    MethodEntry,
    PropertyEntry,
    SignatureDoc,
)

logger = logging.getLogger(__name__)

_TS_LANGUAGE = tree_sitter.Language(tsts.language_typescript())
_TSX_LANGUAGE = tree_sitter.Language(tsts.language_tsx())

# Top-level declaration node types and the kind they document as
_DECLARATION_KINDS = {
    "class_declaration": EntryKind.CLASS,
    "abstract_class_declaration": EntryKind.CLASS,
    "interface_declaration": EntryKind.INTERFACE,
    "type_alias_declaration": EntryKind.TYPE_ALIAS,
    "enum_declaration": EntryKind.ENUM,
}
# Wrappers whose children may hold a declaration
_WRAPPER_TYPES = {
    "export_statement",
    "ambient_declaration",
}
_METHOD_TYPES = {
    "method_definition",
    "method_signature",
    "abstract_method_signature",
}
_PROPERTY_TYPES = {
    "public_field_definition",
    "property_signature",
}
_PARAM_TYPES = {
    "required_parameter",
    "optional_parameter",
    "identifier",
}

_TAG_LINE = re.compile(r"^@(\S+)\s*(.*)$")


def parse_doc_comment(raw: str) -> DocComment:
    """Parse a raw ``/** ... */`` comment into a DocComment.

    Lines of the form ``@tag value`` become DocTag items; runs of other
    non-blank lines become text blocks.

    Args:
        raw: Raw comment string including delimiters.

    Returns:
        The parsed comment.
    """
    text = raw.strip()
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]

    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line)
    contents_raw = "\n".join(lines).strip()

    contents: list[Union[str, DocTag]] = []
    block: list[str] = []
    for line in contents_raw.split("\n"):
        match = _TAG_LINE.match(line)
        if match or not line:
            if block:
                contents.append("\n".join(block))
                block = []
        if match:
            contents.append(DocTag(tag=match.group(1), value=match.group(2).strip()))
        elif line:
            block.append(line)
    if block:
        contents.append("\n".join(block))

    return DocComment(contents_raw=contents_raw, contents=contents)


class TSParser:
    """Parses TypeScript source files using tree-sitter.

    Produces one DocumentationEntry per top-level class, interface,
    type alias or enum, with member flags and doc comments attached.
    """

    def parse_file(
        self, file_path: str, relative_to: Optional[str] = None
    ) -> list[DocumentationEntry]:
        """Parse a TypeScript file and extract its documentation entries.

        Args:
            file_path: Path to the TS file to parse.
            relative_to: Directory the recorded file name is made
                relative to. The path is recorded as given if None.

        Returns:
            Documentation entries in source order.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        source = path.read_text(encoding="utf-8")
        file_name = path.relative_to(relative_to) if relative_to else path
        return self.parse_source(
            source, file_name.as_posix(), tsx=path.suffix == ".tsx"
        )

    def parse_source(
        self,
        source: str,
        file_name: str = "<string>",
        tsx: bool = False,
    ) -> list[DocumentationEntry]:
        """Parse TypeScript source code and extract documentation entries.

        Args:
            source: TypeScript source code.
            file_name: File name recorded on each entry.
            tsx: Parse with the TSX grammar instead of plain TypeScript.

        Returns:
            Documentation entries in source order.
        """
        parser = tree_sitter.Parser(_TSX_LANGUAGE if tsx else _TS_LANGUAGE)
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            logger.debug("Syntax errors in %s; extracting what parsed", file_name)

        entries: list[DocumentationEntry] = []
        for child in root.children:
            self._process_node(child, entries, file_name, source_bytes)

        logger.debug("Parsed %s: %d entries", file_name, len(entries))
        return entries

    def _process_node(
        self,
        node: tree_sitter.Node,
        entries: list[DocumentationEntry],
        file_name: str,
        source_bytes: bytes,
    ) -> None:
        """Process a top-level AST node and collect any declaration in it.

        Args:
            node: A tree-sitter Node to process.
            entries: The list of entries to extend.
            file_name: File name recorded on each entry.
            source_bytes: Source as bytes for text extraction.
        """
        if node.type in _WRAPPER_TYPES:
            for child in node.children:
                self._process_node(child, entries, file_name, source_bytes)
            return

        kind = _DECLARATION_KINDS.get(node.type)
        if kind is None:
            return

        name_node = node.child_by_field_name("name")
        if not name_node:
            return

        entry = DocumentationEntry(
            name=self._node_text(name_node, source_bytes),
            kind=kind,
            file_name=file_name,
            documentation=self._extract_doc_comment(node, source_bytes),
        )
        if kind in (EntryKind.CLASS, EntryKind.INTERFACE):
            body_node = node.child_by_field_name("body")
            if body_node:
                self._extract_members(body_node, entry, source_bytes)
        entries.append(entry)

    def _extract_members(
        self,
        body_node: tree_sitter.Node,
        entry: DocumentationEntry,
        source_bytes: bytes,
    ) -> None:
        """Extract methods and properties from a class or interface body.

        Overloads of the same method are merged into one MethodEntry.

        Args:
            body_node: A class_body or interface body node.
            entry: The entry to populate.
            source_bytes: Source as bytes.
        """
        methods: dict[str, MethodEntry] = {}
        for child in body_node.children:
            if child.type in _METHOD_TYPES:
                if self._is_accessor(child):
                    continue
                name_node = child.child_by_field_name("name")
                if not name_node:
                    continue
                name = self._node_text(name_node, source_bytes)
                if name == "constructor":
                    continue
                signature = SignatureDoc(
                    type=self._format_call_type(child, source_bytes),
                    documentation=self._extract_doc_comment(child, source_bytes),
                )
                if name in methods:
                    methods[name].signatures.append(signature)
                else:
                    methods[name] = MethodEntry(
                        name=name,
                        signatures=[signature],
                        flags=self._extract_flags(child, source_bytes),
                    )

            elif child.type in _PROPERTY_TYPES:
                name_node = child.child_by_field_name("name")
                if not name_node:
                    continue
                entry.properties.append(
                    PropertyEntry(
                        name=self._node_text(name_node, source_bytes),
                        type=self._extract_type(child, "type", source_bytes) or "any",
                        flags=self._extract_flags(child, source_bytes),
                        documentation=self._extract_doc_comment(child, source_bytes),
                    )
                )

        entry.methods.extend(methods.values())

    def _extract_flags(
        self, node: tree_sitter.Node, source_bytes: bytes
    ) -> MemberFlags:
        """Read accessibility, static and optional modifiers of a member.

        Args:
            node: A member tree-sitter node.
            source_bytes: Source as bytes.

        Returns:
            The member's flags.
        """
        flags = MemberFlags()
        for child in node.children:
            if child.type == "accessibility_modifier":
                modifier = self._node_text(child, source_bytes)
                flags.is_protected = modifier == "protected"
                flags.is_private = modifier == "private"
            elif child.type == "static":
                flags.is_static = True
            elif child.type == "?":
                flags.is_optional = True
        return flags

    def _format_call_type(self, node: tree_sitter.Node, source_bytes: bytes) -> str:
        """Format a method's call type as ``(<params>) => <return type>``.

        Args:
            node: A method-like tree-sitter node.
            source_bytes: Source as bytes.

        Returns:
            The formatted call type.
        """
        params: list[str] = []
        params_node = node.child_by_field_name("parameters")
        if params_node:
            for child in params_node.children:
                if child.type in _PARAM_TYPES:
                    params.append(self._node_text(child, source_bytes))

        return_type = self._extract_type(node, "return_type", source_bytes) or "void"
        return f"({', '.join(params)}) => {return_type}"

    def _extract_type(
        self, node: tree_sitter.Node, field_name: str, source_bytes: bytes
    ) -> Optional[str]:
        """Extract a type annotation from a node field.

        Args:
            node: A tree-sitter node with a type annotation field.
            field_name: Field holding the annotation.
            source_bytes: Source as bytes.

        Returns:
            The type text without the leading colon, or None.
        """
        type_node = node.child_by_field_name(field_name)
        if not type_node:
            return None
        text = self._node_text(type_node, source_bytes).strip()
        # Strip leading ':' from type annotations
        if text.startswith(":"):
            text = text[1:].strip()
        return text or None

    def _extract_doc_comment(
        self, node: tree_sitter.Node, source_bytes: bytes
    ) -> Optional[DocComment]:
        """Extract the TSDoc comment directly preceding a node.

        Exported declarations carry their comment above the ``export``
        keyword, so the wrapping statement is checked as well.

        Args:
            node: The tree-sitter node to find documentation for.
            source_bytes: Source as bytes.

        Returns:
            The parsed comment, or None if not found.
        """
        target = node
        while target.prev_named_sibling is None and target.parent is not None:
            if target.parent.type not in _WRAPPER_TYPES:
                return None
            target = target.parent

        prev = target.prev_named_sibling
        if not prev or prev.type != "comment":
            return None
        if prev.end_point.row + 1 < target.start_point.row:
            return None

        text = self._node_text(prev, source_bytes)
        if not text.startswith("/**"):
            return None
        return parse_doc_comment(text)

    def _is_accessor(self, node: tree_sitter.Node) -> bool:
        return any(c.type in ("get", "set") for c in node.children)

    def _node_text(self, node: tree_sitter.Node, source_bytes: bytes) -> str:
        """Extract the text content of a tree-sitter node.

        Args:
            node: A tree-sitter Node.
            source_bytes: Source as bytes.

        Returns:
            The text content of the node.
        """
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8")
