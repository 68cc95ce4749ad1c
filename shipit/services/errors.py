from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

ShipitErrorKind: TypeAlias = Literal[
    "version_mismatch",
    "dirty_working_tree",
    "branch_mismatch",
    "changelog_missing",
    "changelog_entry_missing",
    "license_missing",
    "hook_failed",
    "git_error",
    "branch_ahead",
    "branch_behind",
    "command_failed",
    "config_invalid",
]


@dataclass(frozen=True, slots=True)
class ShipitError:
    """Why the release was aborted.

    ``message`` is what the user sees; ``hint`` is an optional next step.
    """

    kind: ShipitErrorKind
    message: str
    hint: str | None = None
