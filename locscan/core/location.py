"""
Location data structures attached to diagnostic findings.

A ``Location`` is a self-contained snapshot: it keeps no reference to the
AST node or file it was built from, so findings can outlive the parse tree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict


class Compactable(ABC):
    """Something that renders to a short one-line string."""

    @abstractmethod
    def compact(self) -> str:
        ...

    def compact_with_signature(self) -> str:
        return self.compact()


@dataclass(frozen=True, order=True)
class SourceLocation:
    """
    1-based line and column of a position.

    ``(-1, -1)`` marks a position that could not be determined; the two
    fields are never negative independently of each other.
    """
    line: int
    column: int

    UNKNOWN: ClassVar["SourceLocation"]

    @property
    def is_unknown(self) -> bool:
        return self.line == -1 and self.column == -1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


SourceLocation.UNKNOWN = SourceLocation(-1, -1)


@dataclass(frozen=True, order=True)
class TextLocation:
    """Start and end character offsets into a file's text."""
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"


@dataclass(frozen=True)
class Location(Compactable):
    """
    Where a finding sits in the source.

    ``display_text`` is human-readable text for display only; nothing
    should branch on its content. ``file_path`` is the name of the file
    the code originally came from, which differs from the parsed file's
    own name when that file is an in-memory copy of generated code.
    """
    source: SourceLocation
    text: TextLocation
    display_text: str
    file_path: str

    def compact(self) -> str:
        return f"{self.file_path}:{self.source}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "line": self.source.line,
            "column": self.source.column,
            "start": self.text.start,
            "end": self.text.end,
            "display_text": self.display_text,
        }

    @classmethod
    def from_node(cls, node, offset: int = 0) -> "Location":
        """Build a Location for an AST node, shifting its range by ``offset``."""
        from locscan.core.resolver import resolve

        return resolve(node, offset)
