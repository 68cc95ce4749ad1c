"""Result values for expected failures.

Every collaborator that can fail (a git command, reading pyproject.toml,
a checklist step) returns ``Ok(value)`` or ``Err(error)`` instead of raising.
Callers narrow with ``isinstance`` or ``match``:

    match repo.current_branch():
        case Ok(branch):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
