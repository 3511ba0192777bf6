"""Filesystem capability consumed by the tree builder and git classifier.

``LocalFileSystem`` wraps ``os.scandir`` and ``Path.stat``. Errors surface as
the builtin ``OSError`` subclasses (``FileNotFoundError``, ``PermissionError``)
so callers can tell "missing" apart from "unreadable".
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class FileStat:
    """Type bits for one stat result."""

    is_dir: bool
    is_file: bool


@dataclass(frozen=True)
class DirEntry:
    """One directory listing record."""

    name: str
    path: Path
    is_dir: bool
    is_file: bool
    is_symlink: bool = False


class FileSystem(Protocol):
    def stat(self, path: Path) -> FileStat: ...

    def list_entries(self, path: Path) -> list[DirEntry]: ...

    def cwd(self) -> Path: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real operating system."""

    def stat(self, path: Path) -> FileStat:
        """Stat ``path`` following symlinks; raises ``OSError`` on failure."""
        mode = Path(path).stat().st_mode
        return FileStat(is_dir=stat.S_ISDIR(mode), is_file=stat.S_ISREG(mode))

    def list_entries(self, path: Path) -> list[DirEntry]:
        """Return entries of ``path`` in listing order without following symlinks."""
        entries: list[DirEntry] = []
        with os.scandir(path) as scanned:
            for child in scanned:
                try:
                    is_symlink = child.is_symlink()
                    is_dir = child.is_dir(follow_symlinks=False)
                    is_file = child.is_file(follow_symlinks=False)
                except OSError:
                    is_symlink = False
                    is_dir = False
                    is_file = False
                entries.append(
                    DirEntry(
                        name=child.name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        is_file=is_file,
                        is_symlink=is_symlink,
                    )
                )
        return entries

    def cwd(self) -> Path:
        return Path.cwd()
