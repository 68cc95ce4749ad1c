"""Typed configuration loading.

shipit is configured from the ``[tool.shipit]`` table of the project's own
pyproject.toml. Every key is optional:

    [tool.shipit]
    changelog = "CHANGELOG.md"
    licenses = ["LICENSE.md", "LICENSE"]
    hook = ".shipit.py"
    remote = "origin"
    publish = [["uv", "build"], ["uv", "publish"]]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .project import declared_version
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_command_list, get_str, get_str_list, get_table

__all__ = [
    "PYPROJECT",
    "DEFAULT_CHANGELOG",
    "DEFAULT_LICENSES",
    "DEFAULT_HOOK",
    "DEFAULT_REMOTE",
    "DEFAULT_PUBLISH",
    "ConfigError",
    "ExecutionContext",
    "ShipitConfig",
    "load_config",
    "load_pyproject",
]

PYPROJECT = "pyproject.toml"

DEFAULT_CHANGELOG = "CHANGELOG.md"
DEFAULT_LICENSES = ("LICENSE.md", "LICENSE")
DEFAULT_HOOK = ".shipit.py"
DEFAULT_REMOTE = "origin"
DEFAULT_PUBLISH: tuple[tuple[str, ...], ...] = (("uv", "build"), ("uv", "publish"))


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when pyproject.toml cannot be loaded or understood."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Where and with which environment external commands run.

    Attributes:
        root: Project root; every relative path and command resolves here
        env: Environment for subprocesses (None inherits the current one)
    """

    root: Path
    env: Mapping[str, str] | None = None


@dataclass(frozen=True, slots=True)
class ShipitConfig:
    """Release checklist settings.

    ``project_version`` is the version declared in pyproject.toml (None when
    it is dynamic or missing); the rest comes from ``[tool.shipit]``.
    """

    project_version: str | None = None
    changelog: str = DEFAULT_CHANGELOG
    licenses: tuple[str, ...] = DEFAULT_LICENSES
    hook: str = DEFAULT_HOOK
    remote: str = DEFAULT_REMOTE
    publish: tuple[tuple[str, ...], ...] = DEFAULT_PUBLISH

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ShipitConfig:
        """Create config from a parsed pyproject.toml.

        Values of the wrong type fall back to their defaults.
        """
        tool: StrDict = get_table(data, "tool") or {}
        table: StrDict = get_table(tool, "shipit") or {}

        licenses = get_str_list(table, "licenses")
        publish = get_command_list(table, "publish")

        return cls(
            project_version=declared_version(data),
            changelog=get_str(table, "changelog") or DEFAULT_CHANGELOG,
            licenses=tuple(licenses) if licenses else DEFAULT_LICENSES,
            hook=get_str(table, "hook") or DEFAULT_HOOK,
            remote=get_str(table, "remote") or DEFAULT_REMOTE,
            publish=tuple(tuple(cmd) for cmd in publish) if publish else DEFAULT_PUBLISH,
        )


def load_pyproject(root: Path) -> Result[StrDict, ConfigError]:
    """Parse ``root/pyproject.toml`` into a string-keyed table."""
    import tomllib

    path = root / PYPROJECT
    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"{PYPROJECT} is missing", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax in {PYPROJECT}: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading {PYPROJECT}: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError(f"{PYPROJECT} root must be a TOML table", path=path))
    return Ok(data)


def load_config(root: Path) -> Result[ShipitConfig, ConfigError]:
    """Load ``[tool.shipit]`` and the declared version of the project at ``root``.

    Args:
        root: Project root containing pyproject.toml

    Returns:
        Ok(ShipitConfig) on success, Err(ConfigError) if pyproject.toml is
        missing or unreadable
    """
    result = load_pyproject(root)
    if isinstance(result, Err):
        return result
    return Ok(ShipitConfig.from_dict(result.value))
