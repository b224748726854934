"""Filesystem helpers for the record directory."""

from __future__ import annotations

import fnmatch
import glob
import os
from pathlib import Path


def ensure_directory(path: str | os.PathLike, mode: int = 0o755) -> Path:
    """Create a directory and any missing parents.

    Raises OSError if the path cannot be created or is not a directory.
    """
    directory = Path(path)
    directory.mkdir(mode=mode, parents=True, exist_ok=True)
    return directory


def escape_glob_part(value: str) -> str:
    """Escape a literal pattern component so wildcards in it do not match."""
    return glob.escape(value)


def record_path(directory: str | os.PathLike, filename: str) -> str:
    return os.path.join(os.fspath(directory), filename)


def match_names(directory: str | os.PathLike, pattern: str) -> list[str]:
    """Return the names of directory entries matching a glob pattern.

    Unlike glob.glob(), a missing or unreadable directory raises OSError
    rather than producing an empty result.
    """
    with os.scandir(directory) as entries:
        return sorted(
            entry.name for entry in entries if fnmatch.fnmatchcase(entry.name, pattern)
        )
