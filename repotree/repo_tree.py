"""Top-level repository-tree workflow.

Resolves the start path, builds the tree with injected filesystem and git
capabilities, and writes rendered rows to an output stream.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .command_runner import SubprocessRunner
from .file_system import FileSystem, LocalFileSystem
from .git_status import GitClassifier
from .tree_model import RepoNode, TreeOptions, build_repo_tree, render_repo_tree
from .ui_theme import UITheme

DEFAULT_DEPTH = 10
DEFAULT_SKIP_DIRECTORIES: tuple[str, ...] = ("node_modules", "build", ".gradle", ".git")

_LOG = logging.getLogger(__name__)


class RepoTreeError(Exception):
    """Base class for errors that stop a tree from being shown."""


class RootNotFoundError(RepoTreeError):
    """The start path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error: Path '{path}' not found.")
        self.path = path


class RepositoryTree:
    """Build and display a repository tree for one start path."""

    def __init__(
        self,
        file_system: FileSystem | None = None,
        classifier: GitClassifier | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._file_system = file_system or LocalFileSystem()
        self._log = logger or _LOG
        self._classifier = classifier or GitClassifier(self._file_system, SubprocessRunner(), self._log)

    def resolve_options(
        self,
        path: Path | str | None = None,
        skip_directories: Iterable[str] | None = None,
        depth: int | None = None,
        include_hidden: bool | None = None,
    ) -> TreeOptions:
        """Fill unset options with defaults and resolve the start path."""
        base = Path(path) if path else self._file_system.cwd()
        if not base.is_absolute():
            base = self._file_system.cwd() / base
        return TreeOptions(
            path=Path(os.path.normpath(base)),
            skip_directories=frozenset(DEFAULT_SKIP_DIRECTORIES if skip_directories is None else skip_directories),
            depth=DEFAULT_DEPTH if depth is None else depth,
            include_hidden=bool(include_hidden),
        )

    def build(self, options: TreeOptions) -> RepoNode | None:
        """Build the tree for ``options.path``.

        Raises ``RootNotFoundError`` for a missing root. Any other failure to
        stat the root is logged and yields ``None``.
        """
        try:
            return build_repo_tree(
                options.path,
                options,
                self._file_system,
                self._classifier,
                logger=self._log,
            )
        except FileNotFoundError as exc:
            raise RootNotFoundError(options.path) from exc
        except OSError as exc:
            self._log.error("Error accessing path '%s': %s", options.path, exc)
            return None

    def show(
        self,
        options: TreeOptions,
        stream: TextIO | None = None,
        theme: UITheme | None = None,
    ) -> RepoNode | None:
        """Build the tree and write its rendered rows to ``stream`` (stdout by default)."""
        root = self.build(options)
        if root is None:
            return None
        out = stream if stream is not None else sys.stdout
        for line in render_repo_tree(root, theme):
            out.write(line + "\n")
        return root

