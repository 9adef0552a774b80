"""Per-action press state, values and timing for one set of actions."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from actionmap.actionlike import index_of, n_variants, variants
from actionmap.axislike import DualAxisData
from actionmap.buttonlike import ButtonState

A = TypeVar("A", bound=Enum)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Timing:
    """When an action was pressed or released, and how long it has stayed so.

    Instants and durations are plain seconds, e.g. from ``time.monotonic()``.
    Ordering compares ``current_duration`` only.
    """

    instant_started: float | None = None
    current_duration: float = 0.0
    previous_duration: float = 0.0

    def tick(self, current_instant: float, previous_instant: float) -> None:
        """Advance ``current_duration``; the first tick records ``previous_instant`` as the start."""
        if self.instant_started is not None:
            self.current_duration = current_instant - self.instant_started
        else:
            self.current_duration = current_instant - previous_instant
            self.instant_started = previous_instant

    def flip(self) -> None:
        """Store the current duration as the previous one and restart timing."""
        self.previous_duration = self.current_duration
        self.current_duration = 0.0
        self.instant_started = None

    def __lt__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration < other.current_duration

    def __le__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration <= other.current_duration

    def __gt__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration > other.current_duration

    def __ge__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration >= other.current_duration


@dataclass
class ActionData:
    """Everything known about one action.

    ``value`` may exceed the usual range when several inputs trigger the action.
    A consumed action cannot be pressed again until it is released.
    """

    state: ButtonState = ButtonState.RELEASED
    value: float = 0.0
    axis_pair: DualAxisData | None = None
    timing: Timing = field(default_factory=Timing)
    consumed: bool = False


class ActionState(Generic[A]):
    """The input-agnostic state of every action of one Enum class."""

    def __init__(self, action_type: type[A]) -> None:
        self.action_type = action_type
        self._data: list[ActionData] = [ActionData() for _ in variants(action_type)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionState):
            return NotImplemented
        return self.action_type is other.action_type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ActionState({self.action_type.__name__}, {self._data!r})"

    def __iter__(self) -> Iterator[tuple[A, ActionData]]:
        return zip(variants(self.action_type), self._data)

    def _index(self, action: A) -> int:
        if not isinstance(action, self.action_type):
            raise TypeError(
                f"{action!r} is not an action of {self.action_type.__name__}"
            )
        return index_of(action)

    def update(self, action_data: Sequence[ActionData]) -> None:
        """Apply fresh data, ordered like the actions, pressing or releasing each action."""
        expected = n_variants(self.action_type)
        if len(action_data) != expected:
            raise ValueError(
                f"expected {expected} entries of action data, got {len(action_data)}"
            )
        for action, incoming in zip(variants(self.action_type), action_data):
            if incoming.state.pressed():
                self.press(action)
            else:
                self.release(action)
            data = self._data[self._index(action)]
            data.axis_pair = copy.copy(incoming.axis_pair)
            data.value = incoming.value

    def tick(self, current_instant: float, previous_instant: float) -> None:
        """Advance button states and timings; consumed actions keep their timing."""
        for data in self._data:
            data.state = data.state.tick()
        for data in self._data:
            if not data.consumed:
                data.timing.tick(current_instant, previous_instant)

    def action_data(self, action: A) -> ActionData:
        """The live data of ``action``; changes to it change this state."""
        return self._data[self._index(action)]

    def set_action_data(self, action: A, data: ActionData) -> None:
        """Replace the data of ``action`` with a copy of ``data``."""
        self._data[self._index(action)] = copy.deepcopy(data)

    def value(self, action: A) -> float:
        """The raw value of ``action``; not bounded."""
        return self.action_data(action).value

    def clamped_value(self, action: A) -> float:
        """The value of ``action`` clamped to [-1, 1]."""
        return _clamp(self.value(action), -1.0, 1.0)

    def axis_pair(self, action: A) -> DualAxisData | None:
        """The axis pair of ``action``, if its binding produced one."""
        return self.action_data(action).axis_pair

    def clamped_axis_pair(self, action: A) -> DualAxisData | None:
        """The axis pair of ``action`` with each component clamped to [-1, 1]."""
        pair = self.axis_pair(action)
        if pair is None:
            return None
        return DualAxisData(_clamp(pair.x, -1.0, 1.0), _clamp(pair.y, -1.0, 1.0))

    def press(self, action: A) -> None:
        """Press ``action`` unless it is consumed."""
        data = self.action_data(action)
        if data.consumed:
            return
        if data.state.released():
            data.timing.flip()
        data.state = data.state.press()

    def release(self, action: A) -> None:
        """Release ``action``, which also lifts any consumption."""
        data = self.action_data(action)
        data.consumed = False
        if data.state.pressed():
            data.timing.flip()
        data.state = data.state.release()

    def consume(self, action: A) -> None:
        """Release ``action`` and block presses until it is released again."""
        data = self.action_data(action)
        data.consumed = True
        data.state = data.state.release()
        data.timing.flip()

    def consume_all(self) -> None:
        """Consume every action."""
        for action in variants(self.action_type):
            self.consume(action)

    def release_all(self) -> None:
        """Release every action."""
        for action in variants(self.action_type):
            self.release(action)

    def pressed(self, action: A) -> bool:
        """Is ``action`` currently pressed?"""
        return self.action_data(action).state.pressed()

    def just_pressed(self, action: A) -> bool:
        """Was ``action`` pressed since the last tick?"""
        return self.action_data(action).state.just_pressed()

    def released(self, action: A) -> bool:
        """Is ``action`` currently released?"""
        return self.action_data(action).state.released()

    def just_released(self, action: A) -> bool:
        """Was ``action`` released since the last tick?"""
        return self.action_data(action).state.just_released()

    def get_pressed(self) -> list[A]:
        """Every currently pressed action, in definition order."""
        return [a for a in variants(self.action_type) if self.pressed(a)]

    def get_just_pressed(self) -> list[A]:
        """Every action pressed since the last tick."""
        return [a for a in variants(self.action_type) if self.just_pressed(a)]

    def get_released(self) -> list[A]:
        """Every currently released action."""
        return [a for a in variants(self.action_type) if self.released(a)]

    def get_just_released(self) -> list[A]:
        """Every action released since the last tick."""
        return [a for a in variants(self.action_type) if self.just_released(a)]

    def instant_started(self, action: A) -> float | None:
        """When ``action`` was last pressed or released; ``None`` until the next tick."""
        return self.action_data(action).timing.instant_started

    def current_duration(self, action: A) -> float:
        """How long ``action`` has been held or released."""
        return self.action_data(action).timing.current_duration

    def previous_duration(self, action: A) -> float:
        """How long ``action`` was held or released before its last change."""
        return self.action_data(action).timing.previous_duration