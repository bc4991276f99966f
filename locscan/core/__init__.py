"""Location values and the resolver that builds them."""

from locscan.core.location import Compactable, Location, SourceLocation, TextLocation
from locscan.core.source import InMemoryStorage, SourceFile, SpanNode
from locscan.core.resolver import resolve, start_line_and_column

__all__ = [
    "Compactable",
    "Location",
    "SourceLocation",
    "TextLocation",
    "InMemoryStorage",
    "SourceFile",
    "SpanNode",
    "resolve",
    "start_line_and_column",
]
