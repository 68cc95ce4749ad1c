"""Individual release preconditions.

Each check takes plain values (command output, a project root) and returns
``Ok`` or an ``Err(ShipitError)`` with the message shown to the user. The
checklist runner gathers the inputs and calls them in order.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from shipit.core.config import PYPROJECT
from shipit.core.result import Err, Ok, Result
from shipit.services.errors import ShipitError

__all__ = [
    "normalize_version",
    "tag_name",
    "check_version",
    "check_working_tree",
    "check_branch",
    "check_changelog",
    "check_license",
    "check_remote_status",
]


def normalize_version(version: str) -> str:
    """Strip one leading ``v`` ("v1.2.0" -> "1.2.0")."""
    if version.startswith("v"):
        return version[1:]
    return version


def tag_name(version: str) -> str:
    """Tag for a normalized version ("1.2.0" -> "v1.2.0")."""
    return f"v{version}"


def check_version(version: str, declared: str) -> Result[None, ShipitError]:
    if version != declared:
        return Err(
            ShipitError(
                kind="version_mismatch",
                message=f'Expected "{version}" to match {PYPROJECT} version "{declared}"',
                hint=f"Bump the version in {PYPROJECT} or pass {tag_name(declared)}",
            )
        )
    return Ok(None)


def check_working_tree(status_output: str) -> Result[None, ShipitError]:
    """Pass only when ``git status --porcelain`` printed nothing."""
    if status_output != "":
        return Err(
            ShipitError(
                kind="dirty_working_tree",
                message="Found uncommitted changes in the working tree",
                hint="Commit or stash your changes",
            )
        )
    return Ok(None)


def check_branch(expected: str, current: str) -> Result[None, ShipitError]:
    if expected != current:
        return Err(
            ShipitError(
                kind="branch_mismatch",
                message=f'Expected branch "{expected}" does not match current "{current}"',
            )
        )
    return Ok(None)


def check_changelog(root: Path, changelog: str, tag: str) -> Result[None, ShipitError]:
    """The changelog must exist and mention ``tag`` somewhere in its text."""
    path = root / changelog
    if not path.is_file():
        return Err(ShipitError(kind="changelog_missing", message=f"{changelog} is missing"))

    try:
        data = path.read_bytes()
    except OSError as e:
        return Err(
            ShipitError(
                kind="changelog_missing",
                message=f"{changelog} could not be read: {e.strerror or e}",
            )
        )

    # Non UTF-8 bytes only need to survive the substring search.
    content = data.decode("utf-8", errors="replace")
    if tag not in content:
        return Err(
            ShipitError(
                kind="changelog_entry_missing",
                message=f"{changelog} does not include an entry for {tag}",
            )
        )
    return Ok(None)


def check_license(root: Path, candidates: Sequence[str]) -> Result[str, ShipitError]:
    """Return the first license file found among ``candidates``."""
    for name in candidates:
        if (root / name).is_file():
            return Ok(name)
    return Err(
        ShipitError(
            kind="license_missing",
            message=f"LICENSE file is missing, add {' or '.join(candidates)}",
        )
    )


def check_remote_status(status_output: str) -> Result[None, ShipitError]:
    """Inspect ``git status --porcelain --branch`` for divergence.

    The header line reads ``## main...origin/main [ahead 1, behind 2]``.
    Ahead wins when both are reported.
    A branch name containing "ahead" or "behind" also trips the check.
    """
    if "ahead" in status_output:
        return Err(
            ShipitError(
                kind="branch_ahead",
                message="Local branch is ahead of the remote branch, aborting",
                hint="Push your commits first",
            )
        )
    if "behind" in status_output:
        return Err(
            ShipitError(
                kind="branch_behind",
                message="Local branch is behind the remote branch, aborting",
                hint="Pull the remote commits first",
            )
        )
    return Ok(None)
