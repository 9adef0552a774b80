"""Axis-like inputs: analog sticks, mouse wheel and mouse motion axes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import ClassVar, Union

# Largest finite single-precision float; used to make one side of an axis unreachable.
_F32_MAX = 3.4028234663852886e38
_F32_MIN = -_F32_MAX


class GamepadAxisType(Enum):
    """An analog axis on a gamepad."""

    LEFT_STICK_X = auto()
    LEFT_STICK_Y = auto()
    LEFT_Z = auto()
    RIGHT_STICK_X = auto()
    RIGHT_STICK_Y = auto()
    RIGHT_Z = auto()


class MouseWheelAxisType(Enum):
    """The direction of motion of the mouse wheel."""

    X = auto()  # horizontal, only supported on some devices
    Y = auto()  # vertical, the usual scrolling direction


class MouseMotionAxisType(Enum):
    """The direction of motion of the mouse."""

    X = auto()
    Y = auto()


class AxisConversionError(ValueError):
    """An ``AxisType`` could not be converted into a more specialised axis."""


_AxisLike = Union[GamepadAxisType, MouseWheelAxisType, MouseMotionAxisType]


@dataclass(frozen=True)
class AxisType:
    """The kind of axis read by a ``SingleAxis`` or ``DualAxis``."""

    axis: _AxisLike

    def __post_init__(self) -> None:
        if not isinstance(
            self.axis, (GamepadAxisType, MouseWheelAxisType, MouseMotionAxisType)
        ):
            raise TypeError(f"{self.axis!r} is not an axis")

    @staticmethod
    def from_axis(axis: _AxisLike | AxisType) -> AxisType:
        """Wrap a gamepad, mouse-wheel or mouse-motion axis; ``AxisType`` passes through."""
        if isinstance(axis, AxisType):
            return axis
        return AxisType(axis)

    def to_gamepad(self) -> GamepadAxisType:
        """The gamepad axis held here; ``AxisConversionError`` otherwise."""
        if isinstance(self.axis, GamepadAxisType):
            return self.axis
        raise AxisConversionError(f"{self.axis!r} is not a gamepad axis")

    def to_mouse_wheel(self) -> MouseWheelAxisType:
        """The mouse-wheel axis held here; ``AxisConversionError`` otherwise."""
        if isinstance(self.axis, MouseWheelAxisType):
            return self.axis
        raise AxisConversionError(f"{self.axis!r} is not a mouse wheel axis")

    def to_mouse_motion(self) -> MouseMotionAxisType:
        """The mouse-motion axis held here; ``AxisConversionError`` otherwise."""
        if isinstance(self.axis, MouseMotionAxisType):
            return self.axis
        raise AxisConversionError(f"{self.axis!r} is not a mouse motion axis")


@dataclass(frozen=True)
class SingleAxis:
    """A single directional axis with a configurable trigger zone.

    Values above ``positive_low`` or below ``negative_low`` trigger the input.
    ``inverted`` and ``value`` take no part in equality or hashing.
    """

    axis_type: AxisType
    positive_low: float
    negative_low: float
    inverted: bool = field(default=False, compare=False)
    value: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis_type", AxisType.from_axis(self.axis_type))

    @classmethod
    def symmetric(cls, axis_type: _AxisLike | AxisType, threshold: float) -> SingleAxis:
        """An axis triggering beyond ``threshold`` in either direction."""
        return cls(AxisType.from_axis(axis_type), threshold, -threshold)

    @classmethod
    def from_value(cls, axis_type: _AxisLike | AxisType, value: float) -> SingleAxis:
        """An axis with zero thresholds carrying a target ``value``, for mocking input."""
        return cls(AxisType.from_axis(axis_type), 0.0, 0.0, value=value)

    @classmethod
    def mouse_wheel_x(cls) -> SingleAxis:
        """Horizontal mouse-wheel movement."""
        return cls(AxisType(MouseWheelAxisType.X), 0.0, 0.0)

    @classmethod
    def mouse_wheel_y(cls) -> SingleAxis:
        """Vertical mouse-wheel movement."""
        return cls(AxisType(MouseWheelAxisType.Y), 0.0, 0.0)

    @classmethod
    def mouse_motion_x(cls) -> SingleAxis:
        """Horizontal mouse movement."""
        return cls(AxisType(MouseMotionAxisType.X), 0.0, 0.0)

    @classmethod
    def mouse_motion_y(cls) -> SingleAxis:
        """Vertical mouse movement."""
        return cls(AxisType(MouseMotionAxisType.Y), 0.0, 0.0)

    @classmethod
    def negative_only(
        cls, axis_type: _AxisLike | AxisType, threshold: float
    ) -> SingleAxis:
        """An axis triggered only by values below ``threshold``."""
        return cls(AxisType.from_axis(axis_type), _F32_MAX, threshold)

    @classmethod
    def positive_only(
        cls, axis_type: _AxisLike | AxisType, threshold: float
    ) -> SingleAxis:
        """An axis triggered only by values above ``threshold``."""
        return cls(AxisType.from_axis(axis_type), threshold, _F32_MIN)

    def with_deadzone(self, deadzone: float) -> SingleAxis:
        """A copy whose trigger zone is ``deadzone`` on both sides."""
        return replace(self, positive_low=deadzone, negative_low=-deadzone)

    def inverted_axis(self) -> SingleAxis:
        """A copy with the inversion flag toggled."""
        return replace(self, inverted=not self.inverted)


@dataclass(frozen=True)
class DualAxis:
    """Two directional axes combined as one input."""

    DEFAULT_DEADZONE: ClassVar[float] = 0.1

    x: SingleAxis
    y: SingleAxis

    @classmethod
    def symmetric(
        cls,
        x_axis_type: _AxisLike | AxisType,
        y_axis_type: _AxisLike | AxisType,
        threshold: float,
    ) -> DualAxis:
        """Both axes triggering beyond ``threshold`` in either direction."""
        return cls(
            SingleAxis.symmetric(x_axis_type, threshold),
            SingleAxis.symmetric(y_axis_type, threshold),
        )

    @classmethod
    def from_value(
        cls,
        x_axis_type: _AxisLike | AxisType,
        y_axis_type: _AxisLike | AxisType,
        x_value: float,
        y_value: float,
    ) -> DualAxis:
        """Both axes with zero thresholds carrying target values, for mocking input."""
        return cls(
            SingleAxis.from_value(x_axis_type, x_value),
            SingleAxis.from_value(y_axis_type, y_value),
        )

    @classmethod
    def left_stick(cls) -> DualAxis:
        """The left analog stick with the default deadzone."""
        return cls.symmetric(
            GamepadAxisType.LEFT_STICK_X,
            GamepadAxisType.LEFT_STICK_Y,
            cls.DEFAULT_DEADZONE,
        )

    @classmethod
    def right_stick(cls) -> DualAxis:
        """The right analog stick with the default deadzone."""
        return cls.symmetric(
            GamepadAxisType.RIGHT_STICK_X,
            GamepadAxisType.RIGHT_STICK_Y,
            cls.DEFAULT_DEADZONE,
        )

    @classmethod
    def mouse_wheel(cls) -> DualAxis:
        """Horizontal and vertical mouse-wheel movement."""
        return cls(SingleAxis.mouse_wheel_x(), SingleAxis.mouse_wheel_y())

    @classmethod
    def mouse_motion(cls) -> DualAxis:
        """Horizontal and vertical mouse movement."""
        return cls(SingleAxis.mouse_motion_x(), SingleAxis.mouse_motion_y())

    def with_deadzone(self, deadzone: float) -> DualAxis:
        """A copy with ``deadzone`` applied to both axes."""
        return DualAxis(self.x.with_deadzone(deadzone), self.y.with_deadzone(deadzone))

    def inverted_x(self) -> DualAxis:
        """A copy with the x axis inverted."""
        return DualAxis(self.x.inverted_axis(), self.y)

    def inverted_y(self) -> DualAxis:
        """A copy with the y axis inverted."""
        return DualAxis(self.x, self.y.inverted_axis())

    def inverted(self) -> DualAxis:
        """A copy with both axes inverted."""
        return DualAxis(self.x.inverted_axis(), self.y.inverted_axis())


@dataclass
class DualAxisData:
    """The processed position of two combined input axes, neutral at (0, 0)."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_xy(cls, xy: tuple[float, float]) -> DualAxisData:
        """Build from an ``(x, y)`` pair."""
        x, y = xy
        return cls(x, y)

    @property
    def xy(self) -> tuple[float, float]:
        """The ``(x, y)`` pair."""
        return (self.x, self.y)

    def merged_with(self, other: DualAxisData) -> DualAxisData:
        """The sum of both positions; the result may exceed unit length."""
        return DualAxisData(self.x + other.x, self.y + other.y)

    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """Square of the distance from the origin."""
        return self.x * self.x + self.y * self.y

    def clamp_length(self, max_length: float) -> None:
        """Scale down in place so the length is at most ``max_length``."""
        length_sq = self.length_squared()
        if length_sq > max_length * max_length:
            scale = max_length / math.sqrt(length_sq)
            self.x *= scale
            self.y *= scale