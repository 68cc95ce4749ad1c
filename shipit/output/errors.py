"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shipit.core.errors import ErrorCode
from shipit.output.console import Style

if TYPE_CHECKING:
    from shipit.output.console import ConsoleProtocol
    from shipit.services.errors import ShipitError

__all__ = ["print_shipit_error", "shipit_error_exit_code"]


def print_shipit_error(error: ShipitError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def shipit_error_exit_code(error: ShipitError) -> int:
    """Get exit code for a checklist error."""
    match error.kind:
        case "command_failed":
            return int(ErrorCode.COMMAND_FAILED)
        case "hook_failed":
            return int(ErrorCode.HOOK_FAILED)
        case "config_invalid":
            return int(ErrorCode.CONFIG_ERROR)
        case _:
            return int(ErrorCode.CHECK_FAILED)
