"""
Utility functions for locscan.
"""

from locscan.utils.files import iter_source_files


def truncate_string(s: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate a string to a maximum length."""
    if len(s) <= max_length:
        return s
    if max_length <= len(suffix):
        return s[:max(max_length, 0)]
    return s[:max_length - len(suffix)] + suffix


__all__ = ["iter_source_files", "truncate_string"]
