"""Project metadata from the build descriptor."""

from __future__ import annotations

from collections.abc import Mapping

from .structured import get_str, get_table

__all__ = ["declared_version"]


def declared_version(data: Mapping[str, object]) -> str | None:
    """Return the static version declared in a parsed pyproject.toml.

    ``[project].version`` wins; ``[tool.poetry].version`` is the fallback for
    Poetry projects. Returns None if neither is set (e.g. a dynamic version).
    """
    project = get_table(data, "project") or {}
    version = get_str(project, "version")
    if version is not None:
        return version

    tool = get_table(data, "tool") or {}
    poetry = get_table(tool, "poetry") or {}
    return get_str(poetry, "version")
