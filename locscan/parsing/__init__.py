"""
Language parsing for location resolution.

Source files are parsed with tree-sitter when ``tree_sitter_languages`` is
installed; nodes are exposed through ``TreeSitterNode``.
"""

from locscan.parsing.treesitter import (
    LANGUAGE_SPECS,
    ParsedFile,
    TreeSitterNode,
    find_nodes,
    language_for_path,
    parse_file,
    parse_source,
)

__all__ = [
    "LANGUAGE_SPECS",
    "ParsedFile",
    "TreeSitterNode",
    "find_nodes",
    "language_for_path",
    "parse_file",
    "parse_source",
]
