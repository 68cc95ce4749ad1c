"""Process execution."""

from .process import CommandRunner, ProcessError, SubprocessRunner, run, run_streaming

__all__ = [
    "CommandRunner",
    "ProcessError",
    "SubprocessRunner",
    "run",
    "run_streaming",
]
