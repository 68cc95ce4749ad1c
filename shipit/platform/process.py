"""Subprocess execution with Result-based error handling.

``run`` captures output (git queries), ``run_streaming`` lets output reach
the terminal (publish commands, the project hook). ``CommandRunner`` is the
seam the checklist depends on, so tests can substitute a recording fake:

    runner = SubprocessRunner(ExecutionContext(root=Path(".")))
    match runner.run(["git", "status", "--porcelain"]):
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from shipit.core.config import ExecutionContext
from shipit.core.result import Err, Ok, Result

__all__ = ["CommandRunner", "ProcessError", "SubprocessRunner", "run", "run_streaming"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never started).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"

    def details(self) -> str:
        """Command summary plus whatever the process wrote to stderr."""
        stderr = self.stderr.strip()
        if stderr:
            return f"{self}: {stderr}"
        return str(self)


def run(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its stdout.

    No timeout is applied: the call blocks until the command exits.

    Returns:
        Ok(stdout) on exit 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_streaming(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with stdout/stderr attached to the terminal.

    Output is not captured, so a failure carries only the exit code.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr="")
        )

    return Ok(None)


class CommandRunner(Protocol):
    """Runs external commands in a fixed project context."""

    @property
    def root(self) -> Path: ...

    def run(
        self, cmd: list[str], *, extra_env: Mapping[str, str] | None = None
    ) -> Result[str, ProcessError]: ...

    def run_streaming(
        self, cmd: list[str], *, extra_env: Mapping[str, str] | None = None
    ) -> Result[None, ProcessError]: ...


class SubprocessRunner:
    """CommandRunner backed by real subprocesses.

    Every command runs in ``context.root`` with ``context.env`` (or the
    inherited environment), plus any per-call ``extra_env``.
    """

    def __init__(self, context: ExecutionContext) -> None:
        self._context = context

    @property
    def root(self) -> Path:
        return self._context.root

    def run(
        self, cmd: list[str], *, extra_env: Mapping[str, str] | None = None
    ) -> Result[str, ProcessError]:
        return run(cmd, cwd=self._context.root, env=self._env(extra_env))

    def run_streaming(
        self, cmd: list[str], *, extra_env: Mapping[str, str] | None = None
    ) -> Result[None, ProcessError]:
        return run_streaming(cmd, cwd=self._context.root, env=self._env(extra_env))

    def _env(self, extra_env: Mapping[str, str] | None) -> Mapping[str, str] | None:
        if not extra_env:
            return self._context.env
        base = self._context.env if self._context.env is not None else os.environ
        return {**base, **extra_env}
