"""Public framekit API contracts."""

from framekit.api.input_events import (
    EVENT_TYPES,
    Event,
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
from framekit.api.licensing import LicenseSource, create_license_source
from framekit.api.logging import LoggerPort, LoggingConfig, configure_logging

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
    "LicenseSource",
    "LoggerPort",
    "LoggingConfig",
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
    "configure_logging",
    "create_license_source",
    "is_event",
]
