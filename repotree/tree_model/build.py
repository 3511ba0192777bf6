"""Recursive repository-tree construction.

Each call returns an immutable ``RepoNode``. Parent aggregates are folded from
the already-built children, so a parent's flags are final only once its whole
subtree has been walked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .types import GitStatus, ItemType, RepoNode, TreeOptions

if TYPE_CHECKING:
    from ..file_system import DirEntry, FileSystem
    from ..git_status import GitClassifier

_LOG = logging.getLogger(__name__)


def classify_item(path: Path, is_dir: bool, is_file: bool, classifier: GitClassifier) -> ItemType:
    """Return the node kind for one entry, probing directories for ``.git``."""
    if is_dir:
        if classifier.is_repository(path):
            return ItemType.REPO_DIRECTORY
        return ItemType.DIRECTORY
    if is_file:
        return ItemType.FILE
    return ItemType.UNKNOWN


def fold_children(kind: ItemType, children: tuple[RepoNode, ...]) -> tuple[bool, bool]:
    """Return ``(all_paths_lead_to_repo, contains_repo)`` for a node and its children.

    A single child that does not lead to a repository poisons the parent.
    """
    all_paths_lead_to_repo = kind is ItemType.REPO_DIRECTORY
    contains_repo = False
    for child in children:
        if not child.all_paths_lead_to_repo:
            all_paths_lead_to_repo = False
        if child.kind is ItemType.REPO_DIRECTORY or child.contains_repo:
            contains_repo = True
    return all_paths_lead_to_repo, contains_repo


def _visible_entries(entries: list[DirEntry], include_hidden: bool) -> list[DirEntry]:
    if include_hidden:
        return entries
    return [entry for entry in entries if not entry.name.startswith(".")]


def _list_children(
    path: Path,
    depth: int,
    options: TreeOptions,
    file_system: FileSystem,
    classifier: GitClassifier,
    logger: logging.Logger,
) -> tuple[RepoNode, ...]:
    try:
        entries = file_system.list_entries(path)
    except PermissionError:
        logger.warning("Permission denied: Could not read directory %s", path)
        return ()
    except OSError as exc:
        logger.warning("Error reading directory %s: %s", path, exc)
        return ()

    children: list[RepoNode] = []
    for entry in _visible_entries(entries, options.include_hidden):
        children.append(
            build_entry_node(
                entry.path,
                entry.name,
                entry.is_dir,
                entry.is_file or entry.is_symlink,
                depth + 1,
                options,
                file_system,
                classifier,
                logger,
            )
        )
    return tuple(children)


def build_entry_node(
    path: Path,
    name: str,
    is_dir: bool,
    is_file: bool,
    depth: int,
    options: TreeOptions,
    file_system: FileSystem,
    classifier: GitClassifier,
    logger: logging.Logger | None = None,
) -> RepoNode:
    """Build the node for one entry at recursion ``depth`` and its subtree."""
    log = logger or _LOG
    try:
        kind = classify_item(path, is_dir, is_file, classifier)
    except OSError as exc:
        log.warning("Could not check %s for a git repository: %s", path, exc)
        kind = ItemType.DIRECTORY
    git_status: GitStatus | None = None
    if kind is ItemType.REPO_DIRECTORY:
        git_status = classifier.status(path)

    children: tuple[RepoNode, ...] = ()
    if kind in (ItemType.DIRECTORY, ItemType.REPO_DIRECTORY):
        pruned = name in options.skip_directories or depth >= options.depth
        if pruned:
            log.debug("Not descending into %s (depth %d)", path, depth)
        else:
            children = _list_children(path, depth, options, file_system, classifier, log)

    all_paths_lead_to_repo, contains_repo = fold_children(kind, children)
    return RepoNode(
        name=name,
        kind=kind,
        children=children,
        all_paths_lead_to_repo=all_paths_lead_to_repo,
        contains_repo=contains_repo,
        git_status=git_status,
    )


def build_repo_tree(
    path: Path,
    options: TreeOptions,
    file_system: FileSystem,
    classifier: GitClassifier,
    depth: int = 0,
    logger: logging.Logger | None = None,
) -> RepoNode:
    """Stat ``path`` and build its tree.

    Raises ``FileNotFoundError`` (or another ``OSError``) when ``path`` itself
    cannot be stat'ed; errors below the root are logged and pruned instead.
    """
    path = Path(path)
    root_stat = file_system.stat(path)
    name = path.name or str(path)
    return build_entry_node(
        path,
        name,
        root_stat.is_dir,
        root_stat.is_file,
        depth,
        options,
        file_system,
        classifier,
        logger,
    )
