"""Publishing to the package registry.

The checklist treats publishing as one opaque step: ``Publisher.publish()``
either succeeds or fails as a whole.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import CommandRunner, ProcessError

__all__ = ["CommandPublisher", "Publisher"]


class Publisher(Protocol):
    def publish(self) -> Result[None, ProcessError]: ...


class CommandPublisher:
    """Publish by running commands in order (``uv build`` then ``uv publish``).

    Output streams to the terminal. The first failing command stops the
    sequence and its error is returned.
    """

    def __init__(self, runner: CommandRunner, commands: Sequence[Sequence[str]]) -> None:
        self._runner = runner
        self._commands = [list(cmd) for cmd in commands]

    def publish(self) -> Result[None, ProcessError]:
        for cmd in self._commands:
            result = self._runner.run_streaming(cmd)
            if isinstance(result, Err):
                return result
        return Ok(None)
