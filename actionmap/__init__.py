"""Input-agnostic action state: button lifecycles, axis descriptions, action timing and diffs."""

__version__ = "0.1.0"

__all__ = ["action_state", "actionlike", "axislike", "buttonlike", "driver"]