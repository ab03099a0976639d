from __future__ import annotations

import dataclasses

import pytest

from framekit.api.input_events import (
    EVENT_TYPES,
    GamepadAttach,
    GamepadAxis,
    GamepadButtonDown,
    GamepadButtonUp,
    GamepadDetach,
    KeyCharacter,
    KeyDown,
    KeyUp,
    MouseButtonDown,
    MouseButtonUp,
    MouseEnter,
    MouseLeave,
    MouseMove,
    MouseWheel,
    TouchBegin,
    TouchCancel,
    TouchEnd,
    TouchMove,
    ViewSize,
    ViewUpdate,
    is_event,
)


def _field_names(cls: type) -> tuple[str, ...]:
    return tuple(item.name for item in dataclasses.fields(cls))


def test_key_events_keep_supplied_values() -> None:
    typed = KeyCharacter(code=65, modifiers=2, character="é")
    down = KeyDown(code=13, modifiers=0)
    up = KeyUp(code=13, modifiers=1)

    assert (typed.code, typed.modifiers, typed.character) == (65, 2, "é")
    assert (down.code, down.modifiers) == (13, 0)
    assert (up.code, up.modifiers) == (13, 1)


def test_gamepad_events_keep_supplied_values() -> None:
    axis = GamepadAxis(id=1, axis=3, position=-0.25)
    down = GamepadButtonDown(id=1, button=7, pressure=0.5)
    up = GamepadButtonUp(id=1, button=7, pressure=0.0)
    attach = GamepadAttach(id=2, axes=6, buttons=16)
    detach = GamepadDetach(id=2)

    assert (axis.id, axis.axis, axis.position) == (1, 3, -0.25)
    assert (down.id, down.button, down.pressure) == (1, 7, 0.5)
    assert (up.id, up.button, up.pressure) == (1, 7, 0.0)
    assert (attach.id, attach.axes, attach.buttons) == (2, 6, 16)
    assert detach.id == 2


def test_mouse_events_keep_supplied_values() -> None:
    move = MouseMove(x=10.0, y=20.0, delta_x=1.5, delta_y=-2.0)
    wheel = MouseWheel(x=0.0, y=3.0, delta_x=0.0, delta_y=1.0)
    down = MouseButtonDown(x=5.0, y=6.0, button=1, pressure=1.0)
    up = MouseButtonUp(x=5.0, y=6.0, button=1, pressure=0.0)
    enter = MouseEnter(x=0.0, y=1.0)
    leave = MouseLeave(x=2.0, y=3.0)

    assert (move.x, move.y, move.delta_x, move.delta_y) == (10.0, 20.0, 1.5, -2.0)
    assert (wheel.x, wheel.y, wheel.delta_x, wheel.delta_y) == (0.0, 3.0, 0.0, 1.0)
    assert (down.x, down.y, down.button, down.pressure) == (5.0, 6.0, 1, 1.0)
    assert (up.x, up.y, up.button, up.pressure) == (5.0, 6.0, 1, 0.0)
    assert (enter.x, enter.y) == (0.0, 1.0)
    assert (leave.x, leave.y) == (2.0, 3.0)


def test_view_and_touch_events_keep_supplied_values() -> None:
    size = ViewSize(width=800, height=600)
    begin = TouchBegin(id=4, x=1.0, y=2.0, pressure=0.3, primary=True)
    move = TouchMove(id=4, x=3.0, y=4.0, delta_x=2.0, delta_y=2.0, pressure=0.4, primary=True)
    end = TouchEnd(id=4, x=3.0, y=4.0, delta_x=0.0, delta_y=0.0, pressure=0.0, primary=False)
    cancel = TouchCancel(id=4)

    assert (size.width, size.height) == (800, 600)
    assert (begin.id, begin.x, begin.y, begin.pressure, begin.primary) == (4, 1.0, 2.0, 0.3, True)
    assert (move.delta_x, move.delta_y, move.pressure) == (2.0, 2.0, 0.4)
    assert (end.id, end.primary) == (4, False)
    assert cancel.id == 4
    assert _field_names(ViewUpdate) == ()


def test_events_compare_by_value_and_are_hashable() -> None:
    assert KeyDown(code=1, modifiers=0) == KeyDown(code=1, modifiers=0)
    assert KeyDown(code=1, modifiers=0) != KeyDown(code=2, modifiers=0)
    assert ViewUpdate() == ViewUpdate()
    assert len({MouseEnter(x=1.0, y=1.0), MouseEnter(x=1.0, y=1.0)}) == 1


def test_events_are_immutable() -> None:
    event = TouchCancel(id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.id = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (KeyDown, KeyUp),
        (GamepadButtonDown, GamepadButtonUp),
        (MouseButtonDown, MouseButtonUp),
        (MouseEnter, MouseLeave),
        (TouchMove, TouchEnd),
    ],
)
def test_paired_events_share_fields_but_stay_distinct(first: type, second: type) -> None:
    assert _field_names(first) == _field_names(second)
    assert not issubclass(first, second)
    assert not issubclass(second, first)


def test_paired_events_with_same_values_are_not_equal() -> None:
    assert KeyDown(code=1, modifiers=0) != KeyUp(code=1, modifiers=0)


def test_event_types_cover_catalog_once() -> None:
    assert len(EVENT_TYPES) == 20
    assert len(set(EVENT_TYPES)) == len(EVENT_TYPES)


def test_is_event_accepts_only_catalog_records() -> None:
    assert is_event(ViewUpdate())
    assert is_event(GamepadDetach(id=0))
    assert not is_event(object())
    assert not is_event({"type": "ViewUpdate"})
