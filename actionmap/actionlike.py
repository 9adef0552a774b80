"""Helpers treating an Enum class as a fixed, ordered set of actions."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from functools import lru_cache
from typing import TypeVar

A = TypeVar("A", bound=Enum)


@lru_cache(maxsize=None)
def _members(action_type: type) -> tuple:
    if not (isinstance(action_type, type) and issubclass(action_type, Enum)):
        raise TypeError(
            f"{action_type!r} is not an Enum class; actions must be Enum members"
        )
    return tuple(action_type)


def variants(action_type: type[A]) -> Iterator[A]:
    """Iterate over every action of ``action_type`` in definition order."""
    return iter(_members(action_type))


def n_variants(action_type: type[A]) -> int:
    """The number of distinct actions in ``action_type``."""
    return len(_members(action_type))


def get_at(action_type: type[A], index: int) -> A | None:
    """The action at ``index``, or ``None`` if the index is out of range."""
    members = _members(action_type)
    if 0 <= index < len(members):
        return members[index]
    return None


def index_of(action: Enum) -> int:
    """The position of ``action`` within its Enum class."""
    if not isinstance(action, Enum):
        raise TypeError(f"{action!r} is not an Enum member")
    return _members(type(action)).index(action)