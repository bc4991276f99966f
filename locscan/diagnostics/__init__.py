"""Line and column lookup against a file's line-offset table."""

from locscan.diagnostics.line_column import (
    LineAndColumn,
    LineOffsetOutOfRange,
    TextRange,
    line_and_column_for,
)

__all__ = ["LineAndColumn", "LineOffsetOutOfRange", "TextRange", "line_and_column_for"]
