"""Git repository abstraction.

``Repository`` wraps the handful of git commands the release checklist
needs. Queries return raw stdout (the checklist decides what it means);
every method returns a Result so a failing git call never raises.

Usage:
    repo = Repository(SubprocessRunner(ExecutionContext(root=Path("."))))

    match repo.current_branch():
        case Ok(branch):
            print(f"Branch: {branch}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import CommandRunner

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "tag")
        message: Command summary and git's stderr
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """The git checkout at the runner's root."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def status_porcelain(self) -> Result[str, GitError]:
        """Raw ``git status --porcelain`` output; empty means clean."""
        return self._run(["status", "--porcelain"])

    def current_branch(self) -> Result[str, GitError]:
        """Checked-out branch name ("HEAD" when detached)."""
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        if isinstance(result, Err):
            return result
        return Ok(result.value.strip())

    def fetch(self) -> Result[str, GitError]:
        return self._run(["fetch"])

    def upstream(self, branch: str) -> Result[str, GitError]:
        """Name of the remote-tracking branch configured for ``branch``."""
        result = self._run(
            [
                "rev-parse",
                "--symbolic-full-name",
                "--abbrev-ref",
                f"{branch}@{{upstream}}",
            ]
        )
        if isinstance(result, Err):
            return result
        return Ok(result.value.strip())

    def branch_status(self) -> Result[str, GitError]:
        """Porcelain status with the ``## branch...upstream [ahead N]`` header."""
        return self._run(["status", "--porcelain", "--branch"])

    def create_tag(self, tag: str, *, message: str) -> Result[None, GitError]:
        """Create an annotated tag at HEAD."""
        result = self._run(["tag", tag, "-a", "-m", message])
        if isinstance(result, Err):
            return result
        return Ok(None)

    def push_tag(self, remote: str, tag: str) -> Result[None, GitError]:
        result = self._run(["push", remote, tag])
        if isinstance(result, Err):
            return result
        return Ok(None)

    def _run(self, args: list[str]) -> Result[str, GitError]:
        result = self._runner.run(["git", *args])
        match result:
            case Err(e):
                return Err(GitError(command=args[0], message=e.details(), returncode=e.returncode))
            case Ok(stdout):
                return Ok(stdout)
