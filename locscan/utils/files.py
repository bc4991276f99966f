from __future__ import annotations

from pathlib import Path
from typing import Iterable

from locscan.parsing.treesitter import language_for_path


IGNORED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    ".vscode",
    ".venv",
    "node_modules",
    "dist",
    "build",
    "target",
    "vendor",
    "bin",
    "obj",
    "out",
}


def _enabled(path: Path, enabled_languages: set[str]) -> bool:
    language = language_for_path(str(path))
    return language is not None and language in enabled_languages


def iter_source_files(root: str, enabled_languages: set[str]) -> Iterable[str]:
    root_path = Path(root)
    if root_path.is_file():
        if _enabled(root_path, enabled_languages):
            yield str(root_path)
        return
    for path in sorted(root_path.rglob("*")):
        if not path.is_file():
            continue
        if any(part in IGNORED_DIRS for part in path.relative_to(root_path).parts):
            continue
        if not _enabled(path, enabled_languages):
            continue
        yield str(path)
