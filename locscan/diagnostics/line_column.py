"""
Line and column lookup for character ranges within a source file.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import NamedTuple, Optional

from locscan.core.source import SourceFile


class TextRange(NamedTuple):
    start: int
    end: int


@dataclass(frozen=True)
class LineAndColumn:
    line: int
    column: int
    line_content: Optional[str] = None


class LineOffsetOutOfRange(IndexError):
    """A range start falls outside the file's line-offset table."""

    def __init__(self, offset: int, length: int):
        super().__init__(f"offset {offset} outside of text of length {length}")
        self.offset = offset
        self.length = length


def line_and_column_for(file: SourceFile, text_range: TextRange) -> LineAndColumn:
    """
    Resolve the 1-based line and column of ``text_range.start``.

    Raises LineOffsetOutOfRange when the start offset is negative or lies
    past the end of the file text. An offset equal to the text length is
    the position after the last character and resolves normally.
    """
    offset = text_range.start
    length = len(file.text)
    if offset < 0 or offset > length:
        raise LineOffsetOutOfRange(offset, length)

    starts = file.line_starts
    index = bisect_right(starts, offset) - 1
    line_start = starts[index]
    if index + 1 < len(starts):
        line_end = starts[index + 1]
    else:
        line_end = length
    content = file.text[line_start:line_end].rstrip("\r\n")
    return LineAndColumn(index + 1, offset - line_start + 1, content)

