from __future__ import annotations

from typing import Callable, Optional

from locscan.core.location import SourceLocation


def search_name(node) -> Optional[str]:
    """Return the name of the closest named node, starting at ``node`` itself."""
    current = node
    while current is not None:
        name = current.name
        if name:
            return name
        current = current.parent
    return None


def text_with_location(node, position: SourceLocation) -> str:
    file = node.containing_file
    return f"'{node.text}' at ({position.line},{position.column}) in {file.path}"


def get_text_safe(
    primary: Callable[[], Optional[str]],
    fallback: Callable[[], str],
) -> str:
    try:
        text = primary()
    except LookupError:
        text = None
    if not text:
        # No name to show: render the node text instead.
        return fallback()
    return text
