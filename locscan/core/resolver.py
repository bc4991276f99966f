"""
Resolution of AST nodes into Location values.

``resolve`` never raises for the boundary cases the diagnostic layer is
known to hit: a range whose start lies outside the file's line-offset
table (a closing ``}`` leaf at the very end of a file, or a range shifted
past it by ``offset``) comes back as the ``-1:-1`` position instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from locscan.analysis.names import get_text_safe, search_name, text_with_location
from locscan.core.location import Location, SourceLocation, TextLocation
from locscan.diagnostics.line_column import (
    LineOffsetOutOfRange,
    TextRange,
    line_and_column_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    line: int
    column: int


@dataclass(frozen=True)
class OutOfRange:
    start: int
    end: int


LineColumnResult = Union[Resolved, OutOfRange]


def resolve(node, offset: int = 0) -> Location:
    """
    Build the Location of ``node``.

    Args:
        node: Any object exposing the SourceNode attributes.
        offset: Character shift applied to both ends of the node's range.
    """
    source = start_line_and_column(node, offset)
    text = TextLocation(node.start_offset + offset, node.end_offset + offset)
    return Location(
        source=source,
        text=text,
        display_text=display_text(node),
        file_path=original_file_path(node),
    )


def query_line_and_column(node, offset: int = 0) -> LineColumnResult:
    text_range = TextRange(node.start_offset + offset, node.end_offset + offset)
    try:
        resolved = line_and_column_for(node.containing_file, text_range)
    except LineOffsetOutOfRange as exc:
        logger.debug(
            "No line/column for range %s:%s in %s: %s",
            text_range.start,
            text_range.end,
            node.containing_file.name,
            exc,
        )
        return OutOfRange(text_range.start, text_range.end)
    return Resolved(resolved.line, resolved.column)


def to_source_location(result: LineColumnResult) -> SourceLocation:
    if isinstance(result, OutOfRange):
        return SourceLocation.UNKNOWN
    return SourceLocation(result.line, result.column)


def start_line_and_column(node, offset: int = 0) -> SourceLocation:
    """Line and column where ``node`` starts, or ``-1:-1`` if out of range."""
    return to_source_location(query_line_and_column(node, offset))


def original_file_path(node) -> str:
    """
    Name of the file ``node`` came from.

    In-memory files built from generated or transformed code may record
    the file they were derived from; that file's name wins over the
    in-memory file's own name.
    """
    file = node.containing_file
    original = getattr(file, "original_file", None)
    if original is not None:
        return original.name
    return file.name


def display_text(node) -> str:
    return get_text_safe(
        lambda: search_name(node),
        lambda: text_with_location(node, start_line_and_column(node)),
    )
