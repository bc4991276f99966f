"""
locscan

Resolves AST nodes of parsed source files into stable, serializable
locations for diagnostic findings: line/column, character range, the
originating file name and a short display text.
"""

__version__ = "1.0.0"

from locscan.core.location import Location, SourceLocation, TextLocation
from locscan.core.resolver import resolve
from locscan.core.source import SourceFile, SpanNode

__all__ = [
    "Location",
    "SourceLocation",
    "TextLocation",
    "resolve",
    "SourceFile",
    "SpanNode",
]
