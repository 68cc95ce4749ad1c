"""Typed access to parsed TOML.

``tomllib`` hands back plain dicts and lists of unknown shape; these helpers
validate at the boundary so the rest of the code works with real types.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty, stripped string value.

    Returns None if missing, not a str, or blank.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """Get a list of non-empty strings.

    Returns None unless the value is a non-empty list made only of strings.
    """
    value = table.get(key)
    if not isinstance(value, list) or not value:
        return None
    items = cast(list[object], value)
    out: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            return None
        out.append(item.strip())
    return out


def get_command_list(table: Mapping[str, object], key: str) -> list[list[str]] | None:
    """Get a list of commands, each command being a list of strings.

    A single flat list of strings is accepted as one command.
    """
    single = get_str_list(table, key)
    if single is not None:
        return [single]

    value = table.get(key)
    if not isinstance(value, list) or not value:
        return None
    commands: list[list[str]] = []
    for item in cast(list[object], value):
        command = get_str_list({"command": item}, "command")
        if command is None:
            return None
        commands.append(command)
    return commands
