"""Release checklist runner.

Runs the release preconditions in a fixed order and stops at the first
failure:

1. version matches pyproject.toml (one leading ``v`` is ignored)
2. working tree is clean
3. current branch is the release branch
4. changelog mentions the release tag
5. a license file is present
6. the project hook (if any) passes
7. local branch is in sync with its upstream

Then, unless this is a dry run, the package is published and an annotated
``vX.Y.Z`` tag is created and pushed. Nothing is published or tagged unless
every check passed.
"""

from __future__ import annotations

from dataclasses import dataclass

from shipit.core.config import PYPROJECT, ShipitConfig
from shipit.core.result import Err, Ok, Result
from shipit.git.repository import GitError, Repository
from shipit.output.console import ConsoleProtocol
from shipit.platform.process import CommandRunner, ProcessError
from shipit.services.checks import (
    check_branch,
    check_changelog,
    check_license,
    check_remote_status,
    check_version,
    check_working_tree,
    normalize_version,
    tag_name,
)
from shipit.services.errors import ShipitError
from shipit.services.hook import run_project_hook
from shipit.services.publish import CommandPublisher, Publisher

__all__ = ["ChecklistRunner", "ReleaseOutcome"]


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    """What a successful run did."""

    tag: str
    published: bool
    tagged: bool


def _command_failed(error: GitError | ProcessError) -> ShipitError:
    if isinstance(error, GitError):
        return ShipitError(kind="command_failed", message=error.message)
    return ShipitError(kind="command_failed", message=error.details())


class ChecklistRunner:
    """Check, publish and tag one release of the project at ``runner.root``."""

    def __init__(
        self,
        *,
        runner: CommandRunner,
        config: ShipitConfig,
        console: ConsoleProtocol,
        publisher: Publisher | None = None,
    ) -> None:
        self._runner = runner
        self._config = config
        self._console = console
        self._repo = Repository(runner)
        self._publisher = publisher or CommandPublisher(runner, config.publish)

    def run(
        self, *, branch: str, version: str, dry_run: bool
    ) -> Result[ReleaseOutcome, ShipitError]:
        checked = self.check(branch=branch, version=version)
        if isinstance(checked, Err):
            return checked
        tag = checked.value

        if dry_run:
            self._console.info(f"dry run: all checks passed, {tag} was not published")
            return Ok(ReleaseOutcome(tag=tag, published=False, tagged=False))

        published = self.publish()
        if isinstance(published, Err):
            return published

        tagged = self.create_and_push_tag(tag)
        if isinstance(tagged, Err):
            return tagged

        return Ok(ReleaseOutcome(tag=tag, published=True, tagged=True))

    def check(self, *, branch: str, version: str) -> Result[str, ShipitError]:
        """Run every precondition; return the release tag if all pass."""
        console = self._console
        root = self._runner.root
        config = self._config

        version = normalize_version(version)
        declared = config.project_version
        if declared is None:
            return Err(
                ShipitError(
                    kind="config_invalid",
                    message=f"{PYPROJECT} does not declare a static project version",
                )
            )
        r = check_version(version, declared)
        if isinstance(r, Err):
            return r
        tag = tag_name(version)
        console.success(f"version {version} matches pyproject.toml")

        status = self._repo.status_porcelain()
        if isinstance(status, Err):
            return Err(_command_failed(status.error))
        r = check_working_tree(status.value)
        if isinstance(r, Err):
            return r
        console.success("working tree is clean")

        current = self._repo.current_branch()
        if isinstance(current, Err):
            return Err(_command_failed(current.error))
        r = check_branch(branch, current.value)
        if isinstance(r, Err):
            return r
        console.success(f"on branch {branch}")

        r = check_changelog(root, config.changelog, tag)
        if isinstance(r, Err):
            return r
        console.success(f"{config.changelog} has an entry for {tag}")

        license_file = check_license(root, config.licenses)
        if isinstance(license_file, Err):
            return license_file
        console.success(f"{license_file.value} is present")

        hook = run_project_hook(self._runner, config.hook, branch=branch, version=tag)
        if isinstance(hook, Err):
            return hook
        if hook.value:
            console.success(f"project hook {config.hook} passed")

        r = self._check_remote_branch(branch)
        if isinstance(r, Err):
            return r
        console.success(f"{branch} is in sync with its upstream")

        return Ok(tag)

    def publish(self) -> Result[None, ShipitError]:
        result = self._publisher.publish()
        if isinstance(result, Err):
            return Err(_command_failed(result.error))
        return Ok(None)

    def create_and_push_tag(self, tag: str) -> Result[None, ShipitError]:
        console = self._console

        console.print(f"Creating tag {tag}...")
        created = self._repo.create_tag(tag, message=tag)
        if isinstance(created, Err):
            return Err(_command_failed(created.error))
        console.print("done")

        console.print(f"Pushing tag {tag}...")
        pushed = self._repo.push_tag(self._config.remote, tag)
        if isinstance(pushed, Err):
            return Err(_command_failed(pushed.error))
        console.print("done")

        return Ok(None)

    def _check_remote_branch(self, branch: str) -> Result[None, ShipitError]:
        fetched = self._repo.fetch()
        if isinstance(fetched, Err):
            return Err(_command_failed(fetched.error))

        upstream = self._repo.upstream(branch)
        if isinstance(upstream, Err):
            return Err(
                ShipitError(
                    kind="git_error",
                    message="Aborting due to git error",
                    hint=f"Is an upstream configured for {branch}? ({upstream.error.message})",
                )
            )

        status = self._repo.branch_status()
        if isinstance(status, Err):
            return Err(_command_failed(status.error))
        return check_remote_status(status.value)
