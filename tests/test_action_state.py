import time
from enum import Enum, auto

import pytest

from actionmap.action_state import ActionData, ActionState, Timing
from actionmap.axislike import DualAxisData
from actionmap.buttonlike import ButtonState


class Action(Enum):
    RUN = auto()
    JUMP = auto()
    HIDE = auto()


class Slot(Enum):
    SLOT1 = auto()
    SLOT2 = auto()


def _data(run=ButtonState.RELEASED, jump=ButtonState.RELEASED, hide=ButtonState.RELEASED):
    return [ActionData(state=run), ActionData(state=jump), ActionData(state=hide)]


def test_press_lifecycle():
    state = ActionState(Action)
    state.update(_data())
    assert not state.pressed(Action.RUN)
    assert not state.just_pressed(Action.RUN)
    assert state.released(Action.RUN)
    assert not state.just_released(Action.RUN)

    state.update(_data(run=ButtonState.JUST_PRESSED))
    assert state.pressed(Action.RUN)
    assert state.just_pressed(Action.RUN)
    assert not state.released(Action.RUN)
    assert not state.just_released(Action.RUN)

    now = time.monotonic()
    state.tick(now, now - 1e-6)
    state.update(_data(run=ButtonState.JUST_PRESSED))
    assert state.pressed(Action.RUN)
    assert not state.just_pressed(Action.RUN)
    assert not state.released(Action.RUN)
    assert not state.just_released(Action.RUN)

    state.update(_data())
    assert not state.pressed(Action.RUN)
    assert not state.just_pressed(Action.RUN)
    assert state.released(Action.RUN)
    assert state.just_released(Action.RUN)

    now = time.monotonic()
    state.tick(now, now - 1e-6)
    state.update(_data())
    assert state.released(Action.RUN)
    assert not state.just_released(Action.RUN)


def test_time_tick_ticks_away():
    state = ActionState(Action)
    assert state.released(Action.RUN)
    assert not state.just_released(Action.JUMP)

    now = time.monotonic()
    state.tick(now, now - 1e-6)
    assert state.released(Action.JUMP)
    assert not state.just_released(Action.JUMP)
    state.press(Action.JUMP)
    assert state.just_pressed(Action.JUMP)

    now = time.monotonic()
    state.tick(now, now - 1e-6)
    assert state.pressed(Action.JUMP)
    assert not state.just_pressed(Action.JUMP)


def test_durations():
    state = ActionState(Action)
    assert state.released(Action.JUMP)
    assert state.instant_started(Action.JUMP) is None
    assert state.current_duration(Action.JUMP) == 0.0
    assert state.previous_duration(Action.JUMP) == 0.0

    state.press(Action.JUMP)
    assert state.pressed(Action.JUMP)
    assert state.instant_started(Action.JUMP) is None
    assert state.current_duration(Action.JUMP) == 0.0
    assert state.previous_duration(Action.JUMP) == 0.0

    t0 = 100.0
    t1 = t0 + 1.0
    state.tick(t1, t0)
    assert state.instant_started(Action.JUMP) == t0
    assert state.current_duration(Action.JUMP) == t1 - t0
    assert state.previous_duration(Action.JUMP) == 0.0

    t2 = t1 + 5.0
    state.tick(t2, t1)
    assert state.instant_started(Action.JUMP) == t0
    assert state.current_duration(Action.JUMP) == t2 - t0
    assert state.previous_duration(Action.JUMP) == 0.0

    state.release(Action.JUMP)
    assert state.instant_started(Action.JUMP) is None
    assert state.current_duration(Action.JUMP) == 0.0
    assert state.previous_duration(Action.JUMP) == t2 - t0


def test_press_release_example():
    state = ActionState(Action)
    state.press(Action.JUMP)
    assert state.pressed(Action.JUMP)
    assert state.just_pressed(Action.JUMP)
    assert state.released(Action.RUN)

    state.tick(1.0, 0.0)
    assert state.pressed(Action.JUMP)
    assert not state.just_pressed(Action.JUMP)

    state.release(Action.JUMP)
    assert not state.pressed(Action.JUMP)
    assert state.released(Action.JUMP)
    assert state.just_released(Action.JUMP)

    state.tick(2.0, 1.0)
    assert state.released(Action.JUMP)
    assert not state.just_released(Action.JUMP)


def test_consume_example():
    state = ActionState(Action)
    state.press(Action.RUN)
    assert state.pressed(Action.RUN)

    state.consume(Action.RUN)
    assert state.released(Action.RUN)

    state.press(Action.RUN)
    assert state.released(Action.RUN)

    state.release(Action.RUN)
    state.press(Action.RUN)
    assert state.pressed(Action.RUN)


def test_consumed_timing_does_not_advance():
    state = ActionState(Action)
    state.press(Action.RUN)
    state.consume(Action.RUN)
    state.tick(10.0, 5.0)
    assert state.current_duration(Action.RUN) == 0.0
    assert state.instant_started(Action.RUN) is None
    assert state.current_duration(Action.JUMP) == 5.0


def test_consume_all_and_release_all():
    state = ActionState(Action)
    state.press(Action.RUN)
    state.press(Action.HIDE)
    state.consume_all()
    assert state.get_pressed() == []
    state.press(Action.HIDE)
    assert state.released(Action.HIDE)
    state.release_all()
    state.press(Action.HIDE)
    assert state.get_pressed() == [Action.HIDE]


def test_get_lists_follow_definition_order():
    state = ActionState(Action)
    state.press(Action.HIDE)
    state.press(Action.RUN)
    assert state.get_pressed() == [Action.RUN, Action.HIDE]
    assert state.get_just_pressed() == [Action.RUN, Action.HIDE]
    assert state.get_released() == [Action.JUMP]
    assert state.get_just_released() == []
    state.release(Action.RUN)
    assert state.get_just_released() == [Action.RUN]


def test_update_copies_value_and_axis_pair():
    state = ActionState(Action)
    incoming = _data(jump=ButtonState.PRESSED)
    incoming[1].value = 2.5
    incoming[1].axis_pair = DualAxisData(0.3, -0.4)
    state.update(incoming)
    assert state.pressed(Action.JUMP)
    assert state.value(Action.JUMP) == 2.5
    assert state.axis_pair(Action.JUMP) == DualAxisData(0.3, -0.4)
    assert state.axis_pair(Action.RUN) is None


def test_update_rejects_wrong_length():
    state = ActionState(Action)
    with pytest.raises(ValueError):
        state.update([ActionData()])


def test_clamped_value_and_axis_pair():
    state = ActionState(Action)
    data = state.action_data(Action.RUN)
    data.value = 3.0
    data.axis_pair = DualAxisData(2.0, -5.0)
    assert state.value(Action.RUN) == 3.0
    assert state.clamped_value(Action.RUN) == 1.0
    assert state.clamped_axis_pair(Action.RUN) == DualAxisData(1.0, -1.0)
    assert state.clamped_axis_pair(Action.JUMP) is None
    state.action_data(Action.JUMP).value = -7.0
    assert state.clamped_value(Action.JUMP) == -1.0


def test_set_action_data_transfers_between_states():
    slots = ActionState(Slot)
    slots.press(Slot.SLOT1)
    slots.tick(3.0, 1.0)
    actions = ActionState(Action)
    actions.set_action_data(Action.RUN, slots.action_data(Slot.SLOT1))
    assert actions.pressed(Action.RUN)
    assert actions.current_duration(Action.RUN) == 2.0
    assert actions.instant_started(Action.RUN) == 1.0
    slots.release(Slot.SLOT1)
    assert actions.pressed(Action.RUN)


def test_wrong_action_type_rejected():
    state = ActionState(Action)
    with pytest.raises(TypeError):
        state.pressed(Slot.SLOT1)


def test_equality():
    a = ActionState(Action)
    b = ActionState(Action)
    assert a == b
    a.press(Action.RUN)
    assert not a == b
    b.press(Action.RUN)
    assert a == b


def test_timing_tick_and_flip():
    timing = Timing()
    timing.tick(4.0, 3.0)
    assert timing.instant_started == 3.0
    assert timing.current_duration == 1.0
    timing.tick(7.0, 4.0)
    assert timing.current_duration == 4.0
    timing.flip()
    assert timing == Timing(None, 0.0, 4.0)


def test_timing_orders_by_current_duration():
    short = Timing(instant_started=0.0, current_duration=1.0, previous_duration=9.0)
    long = Timing(instant_started=5.0, current_duration=2.0, previous_duration=0.0)
    assert short < long
    assert long >= short
    assert max([short, long]) is long


def test_action_data_defaults():
    data = ActionData()
    assert data.state is ButtonState.RELEASED
    assert data.value == 0.0
    assert data.axis_pair is None
    assert data.timing == Timing()
    assert data.consumed is False