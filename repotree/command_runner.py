"""Process-runner capability used to invoke ``git``."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def run(self, argv: list[str], cwd: Path | None = None) -> CommandResult: ...


class SubprocessRunner:
    """``CommandRunner`` backed by ``subprocess.run``.

    Non-zero exits are returned, never raised. ``OSError`` (missing executable,
    bad ``cwd``) propagates to the caller.
    """

    def run(self, argv: list[str], cwd: Path | None = None) -> CommandResult:
        proc = subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        return CommandResult(returncode=proc.returncode, stdout=proc.stdout or "", stderr=proc.stderr or "")
