"""
Source files and the node interface the location resolver reads.

A ``SourceFile`` is the containing file of an AST node. Its backing storage
is either a file on disk or an in-memory buffer; in-memory buffers created
for generated or transformed code may remember the file they came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class DiskStorage:
    """Backing storage for a file read from disk."""
    path: str


@dataclass(frozen=True)
class InMemoryStorage:
    """Backing storage for generated or transformed source text."""
    name: str
    original_file: Optional["SourceFile"] = None


def _line_starts(text: str) -> List[int]:
    starts = [0]
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\r":
            if i + 1 < length and text[i + 1] == "\n":
                i += 1
            starts.append(i + 1)
        elif ch == "\n":
            starts.append(i + 1)
        i += 1
    return starts


class SourceFile:
    """
    A parsed file's text together with its name and backing storage.

    ``name`` is the base file name reported in locations, ``path`` the
    full path it was loaded from (or the synthetic name of an in-memory
    buffer).
    """

    def __init__(
        self,
        text: str,
        name: Optional[str] = None,
        path: Optional[str] = None,
        storage: object = None,
    ):
        if name is None and path is None:
            raise ValueError("SourceFile needs a name or a path")
        self.text = text
        self.path = path if path is not None else name
        self.name = name if name is not None else PurePath(path).name
        self.storage = storage if storage is not None else DiskStorage(self.path)
        self.line_starts = _line_starts(text)

    @classmethod
    def in_memory(
        cls,
        text: str,
        name: str,
        original: Optional["SourceFile"] = None,
    ) -> "SourceFile":
        """Create a transient file, optionally derived from ``original``."""
        return cls(text, name=name, storage=InMemoryStorage(name, original))

    @property
    def original_file(self) -> Optional["SourceFile"]:
        return getattr(self.storage, "original_file", None)

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, path={self.path!r})"


class SourceNode(Protocol):
    """What the location resolver needs from an AST node."""

    @property
    def start_offset(self) -> int: ...

    @property
    def end_offset(self) -> int: ...

    @property
    def containing_file(self) -> SourceFile: ...

    @property
    def text(self) -> str: ...

    @property
    def parent(self) -> Optional["SourceNode"]: ...

    @property
    def name(self) -> Optional[str]: ...


class SpanNode:
    """
    A plain character range inside a source file.

    Used where no AST element is at hand and a file plus character
    offsets is all that is known.
    """

    def __init__(
        self,
        file: SourceFile,
        start: int,
        end: Optional[int] = None,
        name: Optional[str] = None,
        parent: Optional[SourceNode] = None,
    ):
        self.containing_file = file
        self.start_offset = start
        self.end_offset = start if end is None else end
        self.name = name
        self.parent = parent

    @property
    def text(self) -> str:
        return self.containing_file.text[self.start_offset:self.end_offset]

    def __repr__(self) -> str:
        return (
            f"SpanNode(file={self.containing_file.name!r}, "
            f"start={self.start_offset}, end={self.end_offset})"
        )
