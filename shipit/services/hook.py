"""Project-local release hook.

A project can veto a release with its own checks by adding a hook file
(``.shipit.py`` by default). The hook runs as a separate program:

    .shipit.py BRANCH VERSION

with ``SHIPIT_BRANCH`` and ``SHIPIT_VERSION`` also set in its environment.
``VERSION`` is the tag name (``v1.2.0``). Exit 0 lets the release continue;
any other exit aborts it. The hook's output goes straight to the terminal.
"""

from __future__ import annotations

import sys
from pathlib import Path

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import CommandRunner
from shipit.services.errors import ShipitError

__all__ = ["hook_command", "run_project_hook"]


def hook_command(path: Path, *, branch: str, version: str) -> list[str]:
    """Command line for the hook at ``path``.

    Python hooks run under the current interpreter; anything else must be
    executable on its own.
    """
    if path.suffix == ".py":
        return [sys.executable, str(path), branch, version]
    return [str(path), branch, version]


def run_project_hook(
    runner: CommandRunner,
    hook: str,
    *,
    branch: str,
    version: str,
) -> Result[bool, ShipitError]:
    """Run the hook if the project has one.

    Returns:
        Ok(True) if the hook ran and passed, Ok(False) if there is no hook,
        Err(ShipitError) if it failed
    """
    path = runner.root / hook
    if not path.is_file():
        return Ok(False)

    result = runner.run_streaming(
        hook_command(path, branch=branch, version=version),
        extra_env={"SHIPIT_BRANCH": branch, "SHIPIT_VERSION": version},
    )
    if isinstance(result, Err):
        e = result.error
        detail = e.stderr.strip() if e.returncode == -1 else ""
        message = f"Project hook {hook} failed (exit {e.returncode})"
        return Err(
            ShipitError(
                kind="hook_failed",
                message=f"{message}: {detail}" if detail else message,
            )
        )
    return Ok(True)
