"""Tree node datatypes shared by the builder and renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class ItemType(enum.Enum):
    """Closed classification of one visited filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"
    REPO_DIRECTORY = "repo_directory"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class GitStatus:
    """Dirty/clean signals collected for one repository directory.

    ``has_unpushed_changes`` and ``ahead_by`` stay ``None`` when they were not
    computed (working changes already present) or no upstream is configured.
    """

    has_working_changes: bool
    has_uncommitted_changes: bool = False
    has_untracked_files: bool = False
    has_unpushed_changes: bool | None = None
    ahead_by: int | None = None

    @classmethod
    def clean(cls) -> GitStatus:
        """Return the degraded status used when ``git`` cannot be queried."""
        return cls(has_working_changes=False)

    @property
    def is_dirty(self) -> bool:
        """Dirty when the work tree changed or commits are waiting to be pushed."""
        return self.has_working_changes or self.has_unpushed_changes is True


@dataclass(frozen=True)
class RepoNode:
    """One built tree node with repository aggregates folded from its children."""

    name: str
    kind: ItemType
    children: tuple[RepoNode, ...] = ()
    all_paths_lead_to_repo: bool = False
    contains_repo: bool = False
    git_status: GitStatus | None = None

    @property
    def is_directory(self) -> bool:
        return self.kind in (ItemType.DIRECTORY, ItemType.REPO_DIRECTORY)

    @property
    def is_dirty(self) -> bool:
        return self.git_status is not None and self.git_status.is_dirty


@dataclass(frozen=True)
class TreeOptions:
    """Traversal policy for one build."""

    path: Path
    skip_directories: frozenset[str] = frozenset()
    depth: int = 10
    include_hidden: bool = False


__all__ = [
    "ItemType",
    "GitStatus",
    "RepoNode",
    "TreeOptions",
]
