from __future__ import annotations

import logging
import re
from bisect import bisect_left
from dataclasses import dataclass
from functools import cached_property, lru_cache
from pathlib import Path
from typing import Iterable, Optional

from locscan.core.source import SourceFile

try:
    from tree_sitter_languages import get_parser
except Exception:  # pragma: no cover - optional dependency handling
    get_parser = None

logger = logging.getLogger(__name__)

_CONTINUATION_BYTE = re.compile(rb"[\x80-\xbf]")


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    extensions: set[str]
    identifier_types: set[str]
    declaration_node_types: set[str]


TREE_SITTER_ALIASES = {
    "csharp": "c_sharp",
}

LANGUAGE_SPECS = {
    "python": LanguageSpec(
        name="python",
        extensions={".py"},
        identifier_types={"identifier"},
        declaration_node_types={"function_definition", "class_definition"},
    ),
    "javascript": LanguageSpec(
        name="javascript",
        extensions={".js", ".jsx", ".mjs", ".cjs"},
        identifier_types={"identifier", "property_identifier"},
        declaration_node_types={
            "function_declaration",
            "class_declaration",
            "method_definition",
            "variable_declarator",
        },
    ),
    "typescript": LanguageSpec(
        name="typescript",
        extensions={".ts", ".tsx"},
        identifier_types={"identifier", "property_identifier", "type_identifier"},
        declaration_node_types={
            "function_declaration",
            "class_declaration",
            "interface_declaration",
            "method_definition",
            "variable_declarator",
        },
    ),
    "java": LanguageSpec(
        name="java",
        extensions={".java"},
        identifier_types={"identifier"},
        declaration_node_types={
            "class_declaration",
            "interface_declaration",
            "method_declaration",
            "constructor_declaration",
        },
    ),
    "kotlin": LanguageSpec(
        name="kotlin",
        extensions={".kt", ".kts"},
        identifier_types={"simple_identifier", "type_identifier"},
        declaration_node_types={
            "class_declaration",
            "object_declaration",
            "function_declaration",
            "property_declaration",
        },
    ),
    "go": LanguageSpec(
        name="go",
        extensions={".go"},
        identifier_types={"identifier", "field_identifier", "type_identifier"},
        declaration_node_types={"function_declaration", "method_declaration", "type_spec"},
    ),
    "ruby": LanguageSpec(
        name="ruby",
        extensions={".rb"},
        identifier_types={"identifier", "constant"},
        declaration_node_types={"method", "singleton_method", "class", "module"},
    ),
    "rust": LanguageSpec(
        name="rust",
        extensions={".rs"},
        identifier_types={"identifier", "type_identifier"},
        declaration_node_types={"function_item", "struct_item", "enum_item", "trait_item"},
    ),
    "c": LanguageSpec(
        name="c",
        extensions={".c", ".h"},
        identifier_types={"identifier"},
        declaration_node_types={"function_declarator"},
    ),
    "cpp": LanguageSpec(
        name="cpp",
        extensions={".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx"},
        identifier_types={"identifier", "field_identifier", "type_identifier"},
        declaration_node_types={"function_declarator", "class_specifier", "struct_specifier"},
    ),
    "csharp": LanguageSpec(
        name="csharp",
        extensions={".cs"},
        identifier_types={"identifier"},
        declaration_node_types={
            "class_declaration",
            "interface_declaration",
            "method_declaration",
            "constructor_declaration",
        },
    ),
    "swift": LanguageSpec(
        name="swift",
        extensions={".swift"},
        identifier_types={"simple_identifier", "type_identifier"},
        declaration_node_types={"class_declaration", "function_declaration"},
    ),
}


@dataclass(frozen=True)
class ParsedFile:
    file: SourceFile
    language: str
    source: bytes
    tree: object
    spec: LanguageSpec

    @property
    def root(self) -> "TreeSitterNode":
        return TreeSitterNode(self, self.tree.root_node)

    @cached_property
    def continuation_bytes(self) -> list[int]:
        """Positions of UTF-8 continuation bytes, which do not start a character."""
        return [match.start() for match in _CONTINUATION_BYTE.finditer(self.source)]

    def char_offset(self, byte_offset: int) -> int:
        return byte_offset - bisect_left(self.continuation_bytes, byte_offset)


class TreeSitterNode:
    """A tree-sitter node seen through the SourceNode interface."""

    def __init__(self, parsed: ParsedFile, node):
        self.parsed = parsed
        self.node = node

    @property
    def start_offset(self) -> int:
        return self.parsed.char_offset(self.node.start_byte)

    @property
    def end_offset(self) -> int:
        return self.parsed.char_offset(self.node.end_byte)

    @property
    def containing_file(self) -> SourceFile:
        return self.parsed.file

    @property
    def text(self) -> str:
        return node_text(self.parsed, self.node)

    @property
    def parent(self) -> Optional["TreeSitterNode"]:
        parent = self.node.parent
        if parent is None:
            return None
        return TreeSitterNode(self.parsed, parent)

    @property
    def name(self) -> Optional[str]:
        if self.node.type not in self.parsed.spec.declaration_node_types:
            return None
        name_node = self.node.child_by_field_name("name")
        if name_node is None:
            name_node = next(
                (
                    child
                    for child in self.node.named_children
                    if child.type in self.parsed.spec.identifier_types
                ),
                None,
            )
        if name_node is None:
            return None
        return node_text(self.parsed, name_node)

    def __repr__(self) -> str:
        return f"TreeSitterNode(type={self.node.type!r}, start_byte={self.node.start_byte})"


@lru_cache(maxsize=None)
def tree_sitter_available() -> bool:
    if get_parser is None:
        logger.warning("tree_sitter_languages is not installed; source files cannot be parsed")
        return False
    return True


def language_for_path(path: str) -> Optional[str]:
    ext = Path(path).suffix.lower()
    for name, spec in LANGUAGE_SPECS.items():
        if ext in spec.extensions:
            return name
    return None


def _parse(file: SourceFile, source: bytes, language: str) -> Optional[ParsedFile]:
    if not tree_sitter_available():
        return None
    spec = LANGUAGE_SPECS.get(language)
    if spec is None:
        raise ValueError(f"Unsupported language: {language}")
    parser = get_parser(TREE_SITTER_ALIASES.get(language, language))
    tree = parser.parse(source)
    return ParsedFile(file=file, language=language, source=source, tree=tree, spec=spec)


def parse_file(path: str, language: Optional[str] = None) -> Optional[ParsedFile]:
    if language is None:
        language = language_for_path(path)
        if language is None:
            raise ValueError(f"Unsupported language for path: {path}")
    source = Path(path).read_bytes()
    file = SourceFile(source.decode("utf-8", errors="replace"), path=path)
    return _parse(file, source, language)


def parse_source(
    text: str,
    language: str,
    name: str,
    original: Optional[SourceFile] = None,
) -> Optional[ParsedFile]:
    """Parse generated or transformed code held in memory."""
    file = SourceFile.in_memory(text, name, original=original)
    return _parse(file, text.encode("utf-8"), language)


def iter_nodes(node) -> Iterable[object]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def find_nodes(parsed: ParsedFile, types: set[str]) -> Iterable[TreeSitterNode]:
    for node in iter_nodes(parsed.tree.root_node):
        if node.type in types:
            yield TreeSitterNode(parsed, node)


def node_text(parsed: ParsedFile, node) -> str:
    return parsed.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
