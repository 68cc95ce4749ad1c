"""Exit codes for the shipit command.

Each failure category maps to a stable process exit code so scripts and CI
jobs can tell a failed precondition from a broken environment.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success (checks passed, release published and tagged)
    - 1: A release precondition failed (dirty tree, wrong branch, ...)
    - 2: Malformed command line (same value Click uses for usage errors)
    - 3: pyproject.toml missing or invalid
    - 4: An external command exited non-zero (git, publish)
    - 5: The project hook rejected the release
    """

    OK = 0
    CHECK_FAILED = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    COMMAND_FAILED = 4
    HOOK_FAILED = 5
