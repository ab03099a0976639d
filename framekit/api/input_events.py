"""Public input and view event types.

Events are plain immutable records produced by a platform layer and consumed
by an external dispatcher. Numeric ranges noted on fields are contracts the
producer upholds; nothing here enforces them (see
``framekit.runtime.event_bounds`` for consumer-side clamping).

Coordinates and sizes are in device-independent pixels unless noted.
Key codes, modifiers and button indices are opaque integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, TypeGuard


@dataclass(frozen=True, slots=True)
class _KeyFields:
    code: int
    modifiers: int


@dataclass(frozen=True, slots=True)
class KeyCharacter(_KeyFields):
    """Character actually typed on the keyboard, possibly via an input method."""

    character: str


@dataclass(frozen=True, slots=True)
class KeyDown(_KeyFields):
    """Key press."""


@dataclass(frozen=True, slots=True)
class KeyUp(_KeyFields):
    """Key release. Same data as ``KeyDown``."""


@dataclass(frozen=True, slots=True)
class GamepadAxis:
    """Change of one gamepad axis.

    ``position`` varies between -1.0 and 1.0.
    """

    id: int
    axis: int
    position: float


@dataclass(frozen=True, slots=True)
class _GamepadButtonFields:
    id: int
    button: int
    # 0.0 for not pressed, 1.0 for completely pressed.
    pressure: float


@dataclass(frozen=True, slots=True)
class GamepadButtonDown(_GamepadButtonFields):
    """Gamepad button press."""


@dataclass(frozen=True, slots=True)
class GamepadButtonUp(_GamepadButtonFields):
    """Gamepad button release. Same data as ``GamepadButtonDown``."""


@dataclass(frozen=True, slots=True)
class GamepadAttach:
    """A gamepad was attached, with its axis and button counts."""

    id: int
    axes: int
    buttons: int


@dataclass(frozen=True, slots=True)
class GamepadDetach:
    """A gamepad was detached."""

    id: int


@dataclass(frozen=True, slots=True)
class MouseMove:
    """Pointer movement; deltas are relative to the previous ``MouseMove``."""

    x: float
    y: float
    delta_x: float
    delta_y: float


@dataclass(frozen=True, slots=True)
class MouseWheel:
    """Mouse wheel scroll in arbitrary units.

    Values increase when scrolling down (x) or right (y); deltas are positive
    downwards/rightwards and negative upwards/leftwards.
    """

    x: float
    y: float
    delta_x: float
    delta_y: float


@dataclass(frozen=True, slots=True)
class _MouseButtonFields:
    x: float
    y: float
    button: int
    # 0.0 for not pressed, 1.0 for completely pressed.
    pressure: float


@dataclass(frozen=True, slots=True)
class MouseButtonDown(_MouseButtonFields):
    """Mouse button press."""


@dataclass(frozen=True, slots=True)
class MouseButtonUp(_MouseButtonFields):
    """Mouse button release. Same data as ``MouseButtonDown``."""


@dataclass(frozen=True, slots=True)
class _MouseCrossingFields:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class MouseEnter(_MouseCrossingFields):
    """Pointer entered the view window."""


@dataclass(frozen=True, slots=True)
class MouseLeave(_MouseCrossingFields):
    """Pointer left the view window. Same data as ``MouseEnter``."""


@dataclass(frozen=True, slots=True)
class ViewUpdate:
    """The view is ready for the next frame."""


@dataclass(frozen=True, slots=True)
class ViewSize:
    """The view port size changed."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class TouchBegin:
    """A touch started.

    ``pressure`` varies between 0.0 and 1.0; ``primary`` marks the main contact.
    """

    id: int
    x: float
    y: float
    pressure: float
    primary: bool


@dataclass(frozen=True, slots=True)
class _TouchMotionFields:
    id: int
    x: float
    y: float
    delta_x: float
    delta_y: float
    pressure: float
    primary: bool


@dataclass(frozen=True, slots=True)
class TouchMove(_TouchMotionFields):
    """A touch was dragged; deltas are relative to the previous touch event."""


@dataclass(frozen=True, slots=True)
class TouchEnd(_TouchMotionFields):
    """A touch ended. Same data as ``TouchMove``."""


@dataclass(frozen=True, slots=True)
class TouchCancel:
    """A touch was canceled by the platform, e.g. when the app loses focus."""

    id: int


Event: TypeAlias = (
    KeyCharacter
    | KeyDown
    | KeyUp
    | GamepadAxis
    | GamepadButtonDown
    | GamepadButtonUp
    | GamepadAttach
    | GamepadDetach
    | MouseMove
    | MouseWheel
    | MouseButtonDown
    | MouseButtonUp
    | MouseEnter
    | MouseLeave
    | ViewUpdate
    | ViewSize
    | TouchBegin
    | TouchMove
    | TouchEnd
    | TouchCancel
)

EVENT_TYPES: tuple[type[Event], ...] = (
    KeyCharacter,
    KeyDown,
    KeyUp,
    GamepadAxis,
    GamepadButtonDown,
    GamepadButtonUp,
    GamepadAttach,
    GamepadDetach,
    MouseMove,
    MouseWheel,
    MouseButtonDown,
    MouseButtonUp,
    MouseEnter,
    MouseLeave,
    ViewUpdate,
    ViewSize,
    TouchBegin,
    TouchMove,
    TouchEnd,
    TouchCancel,
)


def is_event(value: object) -> TypeGuard[Event]:
    """Return whether value is one of the catalog event records."""
    return type(value) in EVENT_TYPES


__all__ = [
    "EVENT_TYPES",
    "Event",
    "GamepadAttach",
    "GamepadAxis",
    "GamepadButtonDown",
    "GamepadButtonUp",
    "GamepadDetach",
    "KeyCharacter",
    "KeyDown",
    "KeyUp",
    "MouseButtonDown",
    "MouseButtonUp",
    "MouseEnter",
    "MouseLeave",
    "MouseMove",
    "MouseWheel",
    "TouchBegin",
    "TouchCancel",
    "TouchEnd",
    "TouchMove",
    "ViewSize",
    "ViewUpdate",
    "is_event",
]
