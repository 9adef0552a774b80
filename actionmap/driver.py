"""Links between input sources and the action states they drive, and action diffs."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, TypeVar

from actionmap.action_state import ActionState

A = TypeVar("A", bound=Enum)


class ActionStateDriverTarget:
    """The set of entities whose action state a driver updates.

    Entities are any hashable identifiers. A target holds no entity, one
    entity, or several.
    """

    __slots__ = ("_entities",)

    def __init__(self, entities: Iterable[Hashable] = ()) -> None:
        self._entities: set[Hashable] = set(entities)

    @classmethod
    def from_entities(cls, entities: Iterable[Hashable]) -> ActionStateDriverTarget:
        """A target holding every distinct entity of ``entities``."""
        return cls(entities)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionStateDriverTarget):
            return NotImplemented
        return self._entities == other._entities

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ActionStateDriverTarget({sorted(self._entities, key=repr)!r})"

    def is_empty(self) -> bool:
        """Are there no targets?"""
        return not self._entities

    def insert(self, entity: Hashable) -> None:
        """Add ``entity`` as a target."""
        self._entities.add(entity)

    def remove(self, entity: Hashable) -> None:
        """Remove ``entity`` as a target.

        A target with a single entity becomes empty whichever entity is given.
        """
        self._entities = self.without_entity(entity)._entities

    def add(self, entities: Iterable[Hashable]) -> None:
        """Add every entity of ``entities`` as a target."""
        for entity in entities:
            self.insert(entity)

    def with_entity(self, entity: Hashable) -> ActionStateDriverTarget:
        """A new target holding these entities and ``entity``."""
        return ActionStateDriverTarget((*self._entities, entity))

    def without_entity(self, entity: Hashable) -> ActionStateDriverTarget:
        """A new target without ``entity``.

        A target with a single entity yields an empty target whichever entity is given.
        """
        if len(self._entities) <= 1:
            return ActionStateDriverTarget()
        return ActionStateDriverTarget(e for e in self._entities if e != entity)


@dataclass
class ActionStateDriver(Generic[A]):
    """Lets one entity drive ``action`` in the action states of ``targets``."""

    action: A
    targets: ActionStateDriverTarget = field(default_factory=ActionStateDriverTarget)

    def __post_init__(self) -> None:
        if not isinstance(self.targets, ActionStateDriverTarget):
            raise TypeError(
                f"targets must be an ActionStateDriverTarget, not {self.targets!r}"
            )


class ActionDiffKind(Enum):
    """Whether an action was pressed or released."""

    PRESSED = auto()
    RELEASED = auto()


@dataclass(frozen=True)
class ActionDiff(Generic[A]):
    """A press or release of one action for the entity with stable identifier ``id``.

    Carries no timing, keeping it small for sending over a network.
    """

    kind: ActionDiffKind
    action: A
    id: Hashable

    def apply(self, action_state: ActionState[A]) -> None:
        """Press or release the action in ``action_state``."""
        if self.kind is ActionDiffKind.PRESSED:
            action_state.press(self.action)
        else:
            action_state.release(self.action)