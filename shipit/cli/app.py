from __future__ import annotations

import typer

from shipit.cli.context import build_context
from shipit.core.result import Err
from shipit.output.errors import print_shipit_error, shipit_error_exit_code
from shipit.services.checklist import ChecklistRunner


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command()
def shipit(
    branch: str = typer.Argument(..., help="Branch the release must be cut from."),
    version: str = typer.Argument(..., help="Version to release (1.2.0 or v1.2.0)."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Only run the checks; do not publish or tag.",
    ),
) -> None:
    """Publish a new package version after checking the repository is ready.

    Verifies the version, a clean working tree, the branch, the changelog entry,
    the license file, the project hook and remote sync, then publishes the
    package and pushes a vX.Y.Z tag.
    """
    ctx = build_context()

    runner = ChecklistRunner(runner=ctx.runner, config=ctx.config, console=ctx.console)
    result = runner.run(branch=branch, version=version, dry_run=dry_run)
    if isinstance(result, Err):
        print_shipit_error(result.error, ctx.console)
        raise typer.Exit(code=shipit_error_exit_code(result.error))


def main() -> None:
    app()
