"""Git repository detection and dirty/clean status collection.

Detection is a plain ``.git`` directory probe through the filesystem
capability. Status comes from ``git status --porcelain=v1`` plus an upstream
ahead count when the work tree is clean. Every git failure degrades to a clean
status with a warning so one broken repository never aborts a tree walk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .command_runner import CommandResult, CommandRunner
from .file_system import FileSystem
from .tree_model.types import GitStatus

GIT_DIR_NAME = ".git"
UNTRACKED_MARKER = "??"

_LOG = logging.getLogger(__name__)


def _iter_status_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


class GitClassifier:
    """Decide whether directories are repositories and how dirty they are."""

    def __init__(
        self,
        file_system: FileSystem,
        command_runner: CommandRunner,
        logger: logging.Logger | None = None,
    ) -> None:
        self._file_system = file_system
        self._command_runner = command_runner
        self._log = logger or _LOG

    def is_repository(self, path: Path) -> bool:
        """Return whether ``path/.git`` exists and is a directory.

        Missing paths mean "not a repository"; other filesystem errors propagate.
        """
        try:
            git_stat = self._file_system.stat(Path(path) / GIT_DIR_NAME)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return git_stat.is_dir

    def _run_git(self, repo_path: Path, args: list[str]) -> CommandResult | None:
        try:
            return self._command_runner.run(["git", *args], cwd=repo_path)
        except OSError as exc:
            self._log.warning("Error running git %s for %s: %s", args[0], repo_path, exc)
            return None

    def status(self, path: Path) -> GitStatus:
        """Collect working-tree and unpushed-commit signals for ``path``."""
        result = self._run_git(path, ["status", "--porcelain=v1"])
        if result is None:
            return GitStatus.clean()

        stderr = result.stderr.strip()
        if stderr:
            self._log.warning("Git status stderr for %s: %s", path, stderr)
        if not result.success:
            self._log.warning("Error getting git status for %s: exit code %d", path, result.returncode)
            return GitStatus.clean()

        lines = _iter_status_lines(result.stdout)
        has_uncommitted_changes = any(not line.startswith(UNTRACKED_MARKER) for line in lines)
        has_untracked_files = any(line.startswith(UNTRACKED_MARKER) for line in lines)
        has_working_changes = bool(lines)

        has_unpushed_changes: bool | None = None
        ahead_by: int | None = None
        if not has_working_changes:
            ahead_by = self._ahead_of_upstream(path)
            if ahead_by is not None:
                has_unpushed_changes = ahead_by > 0

        return GitStatus(
            has_working_changes=has_working_changes,
            has_uncommitted_changes=has_uncommitted_changes,
            has_untracked_files=has_untracked_files,
            has_unpushed_changes=has_unpushed_changes,
            ahead_by=ahead_by,
        )

    def _ahead_of_upstream(self, path: Path) -> int | None:
        """Return commits on HEAD missing from its upstream, or ``None`` without one."""
        upstream_proc = self._run_git(
            path,
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
        )
        if upstream_proc is None or not upstream_proc.success:
            return None
        upstream = upstream_proc.stdout.strip()
        if not upstream:
            return None

        count_proc = self._run_git(path, ["rev-list", "--count", f"{upstream}..HEAD"])
        if count_proc is None:
            return None
        if not count_proc.success:
            self._log.warning(
                "Error comparing %s with %s: %s",
                path,
                upstream,
                count_proc.stderr.strip() or f"exit code {count_proc.returncode}",
            )
            return None
        try:
            return int(count_proc.stdout.strip())
        except ValueError:
            self._log.warning("Unexpected rev-list output for %s: %r", path, count_proc.stdout)
            return None
