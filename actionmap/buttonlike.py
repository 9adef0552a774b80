"""Button-like inputs: press/release state and discrete mouse directions."""

from __future__ import annotations

from enum import Enum, auto


class ButtonState(Enum):
    """The current state of a single button-like action.

    States are immutable values: ``tick``, ``press`` and ``release`` return
    the resulting state rather than changing the receiver. The default state
    is ``RELEASED``.
    """

    JUST_PRESSED = auto()
    PRESSED = auto()
    JUST_RELEASED = auto()
    RELEASED = auto()

    @classmethod
    def default(cls) -> ButtonState:
        """The state a button starts in."""
        return cls.RELEASED

    def tick(self) -> ButtonState:
        """Drop the "just" part: JUST_PRESSED becomes PRESSED, JUST_RELEASED becomes RELEASED."""
        if self is ButtonState.JUST_PRESSED:
            return ButtonState.PRESSED
        if self is ButtonState.JUST_RELEASED:
            return ButtonState.RELEASED
        return self

    def press(self) -> ButtonState:
        """Press the button; JUST_PRESSED unless it was already PRESSED."""
        if self is ButtonState.PRESSED:
            return self
        return ButtonState.JUST_PRESSED

    def release(self) -> ButtonState:
        """Release the button; JUST_RELEASED unless it was already RELEASED."""
        if self is ButtonState.RELEASED:
            return self
        return ButtonState.JUST_RELEASED

    def pressed(self) -> bool:
        """Is the button currently held down?"""
        return self in (ButtonState.PRESSED, ButtonState.JUST_PRESSED)

    def released(self) -> bool:
        """Is the button currently up?"""
        return self in (ButtonState.RELEASED, ButtonState.JUST_RELEASED)

    def just_pressed(self) -> bool:
        """Was the button pressed since the last tick?"""
        return self is ButtonState.JUST_PRESSED

    def just_released(self) -> bool:
        """Was the button released since the last tick?"""
        return self is ButtonState.JUST_RELEASED


class MouseWheelDirection(Enum):
    """A button-like input triggered by net mouse-wheel movement in one direction."""

    UP = auto()  # +y
    DOWN = auto()  # -y
    RIGHT = auto()  # +x
    LEFT = auto()  # -x


class MouseMotionDirection(Enum):
    """A button-like input triggered by net mouse movement in one direction."""

    UP = auto()  # +y
    DOWN = auto()  # -y
    RIGHT = auto()  # +x
    LEFT = auto()  # -x