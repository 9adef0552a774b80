# actionmap

A small library for tracking the state of game actions independently of the
device that triggered them. Actions are plain Python enums. An `ActionState`
records, for each action, whether it is pressed, just pressed, released or
just released, together with an analog value, an optional two-axis reading,
timing information and whether the action has been consumed.

## Installation

```
pip install actionmap
```

To run the test suite:

```
pip install "actionmap[test]"
pytest
```

## Modules

- `actionmap.buttonlike`: `ButtonState` and the `MouseWheelDirection` and
  `MouseMotionDirection` enums.
- `actionmap.actionlike`: helpers that treat any `enum.Enum` class as an
  ordered list of actions: `variants`, `n_variants`, `get_at` and `index_of`.
- `actionmap.axislike`: axis descriptions (`GamepadAxisType`,
  `MouseWheelAxisType`, `MouseMotionAxisType`, `AxisType`, `SingleAxis`,
  `DualAxis`) and `DualAxisData` for two-axis readings.
- `actionmap.action_state`: `ActionState`, `ActionData` and `Timing`.
- `actionmap.driver`: `ActionStateDriverTarget` and `ActionStateDriver` for
  letting one entity drive the actions of others, and `ActionDiff` /
  `ActionDiffKind` for compact press and release messages.

## Actions

Any `Enum` class serves as a set of actions. Its members keep their
definition order:

```python
import enum

from actionmap.actionlike import get_at, index_of, n_variants, variants


class Action(enum.Enum):
    RUN = enum.auto()
    JUMP = enum.auto()


assert list(variants(Action)) == [Action.RUN, Action.JUMP]
assert n_variants(Action) == 2
assert index_of(Action.JUMP) == 1
assert get_at(Action, 5) is None
```

Passing something that is not an `Enum` class or member raises `TypeError`.

## Button states

`ButtonState` is an immutable enum with the members `JUST_PRESSED`, `PRESSED`,
`JUST_RELEASED` and `RELEASED` (the default). `press()`, `release()` and
`tick()` return the resulting state instead of changing the value in place;
`pressed()`, `released()`, `just_pressed()` and `just_released()` query it.

```python
from actionmap.buttonlike import ButtonState

state = ButtonState.default().press()
assert state is ButtonState.JUST_PRESSED
assert state.tick() is ButtonState.PRESSED
```

## Action state

```python
from actionmap.action_state import ActionState

state = ActionState(Action)

state.press(Action.JUMP)
assert state.pressed(Action.JUMP)
assert state.just_pressed(Action.JUMP)

# Advance one frame: "just" states become steady states.
state.tick(current_instant=1.0, previous_instant=0.0)
assert state.pressed(Action.JUMP)
assert not state.just_pressed(Action.JUMP)

state.release(Action.JUMP)
assert state.just_released(Action.JUMP)
assert state.get_just_released() == [Action.JUMP]
```

- `update(action_data)` takes one `ActionData` per action, in definition
  order, presses or releases each action from its `state`, and copies its
  `value` and `axis_pair`. A sequence of the wrong length raises
  `ValueError`.
- `action_data(action)` returns the live `ActionData`, and changes to it
  change the state. `set_action_data(action, data)` stores a copy. This lets
  you move the data of one action, timing included, to another.
- `value` and `axis_pair` return the raw readings, which are not bounded.
  `clamped_value` and `clamped_axis_pair` clamp each component to [-1, 1].
- `get_pressed`, `get_just_pressed`, `get_released` and `get_just_released`
  list the matching actions in definition order.
- `ActionState` can be iterated as `(action, ActionData)` pairs.
- Passing an action of another enum raises `TypeError`.

### Timing

Instants and durations are plain numbers of seconds, for example values of
`time.monotonic()`. Pressing or releasing an action flips its `Timing`: the
current duration becomes `previous_duration` and `instant_started` is cleared.
The next `tick(current_instant, previous_instant)` records `previous_instant`
as the start, and later ticks measure `current_duration` from it.
`instant_started`, `current_duration` and `previous_duration` read these per
action. `Timing` objects are ordered by `current_duration`.

### Consuming actions

A consumed action reads as released. It cannot be pressed again until it is
explicitly released, and its timing does not advance while it is consumed:

```python
state.press(Action.RUN)
state.consume(Action.RUN)
state.press(Action.RUN)
assert state.released(Action.RUN)

state.release(Action.RUN)
state.press(Action.RUN)
assert state.pressed(Action.RUN)
```

`consume_all()` and `release_all()` apply to every action.

## Axes

`SingleAxis` describes one axis with a trigger zone: values above
`positive_low` or below `negative_low` trigger it. Constructors include
`symmetric`, `positive_only`, `negative_only`, `from_value` (for mocked
input) and the mouse helpers `mouse_wheel_x`, `mouse_wheel_y`,
`mouse_motion_x` and `mouse_motion_y`. `with_deadzone` and `inverted_axis`
return modified copies; `inverted` and `value` take no part in equality.

`DualAxis` pairs two of them, with `left_stick()` and `right_stick()` (using
`DualAxis.DEFAULT_DEADZONE`, 0.1), `mouse_wheel()`, `mouse_motion()`,
`with_deadzone`, `inverted_x`, `inverted_y` and `inverted`.

`AxisType` wraps one gamepad, mouse-wheel or mouse-motion axis;
`to_gamepad`, `to_mouse_wheel` and `to_mouse_motion` raise
`AxisConversionError` (a `ValueError`) when it holds another kind.

```python
from actionmap.axislike import DualAxis, DualAxisData

stick = DualAxis.left_stick().with_deadzone(0.2)
assert stick.x.positive_low == 0.2

reading = DualAxisData(3.0, 4.0)
assert reading.length() == 5.0
reading.clamp_length(1.0)
```

`DualAxisData` also offers `from_xy`, `xy`, `merged_with` and
`length_squared`.

## Drivers and diffs

`ActionStateDriverTarget` holds any number of hashable entity identifiers,
with `insert`, `remove`, `add`, `with_entity`, `without_entity`, `is_empty`,
`len()`, `in` and iteration. Removing from a target that holds a single entity
empties it whichever entity is given. `ActionStateDriver(action, targets)`
names the action an entity drives and the entities it drives.

`ActionDiff(kind, action, id)` records a press or release
(`ActionDiffKind.PRESSED` / `RELEASED`) without timing, for the entity with the
stable identifier `id`. `apply(action_state)` presses or releases the action.

```python
from actionmap.driver import ActionDiff, ActionDiffKind

remote = ActionState(Action)
ActionDiff(ActionDiffKind.PRESSED, Action.JUMP, id=76).apply(remote)
assert remote.pressed(Action.JUMP)
```

## What this package does not do

It reads no devices: there is no keyboard, mouse or gamepad input here, and
no map from inputs to actions. `SingleAxis`, `DualAxis` and the mouse
direction enums only describe inputs; nothing in the package evaluates them
against readings. The state changes only through `press`, `release`,
`consume`, `update`, `tick` and `ActionDiff.apply`, called by your own code.
`ActionDiff` values are plain objects, and sending them anywhere is left to
you.