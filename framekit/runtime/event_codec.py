"""Wire payload codec for event records.

Payloads are flat JSON objects tagged with the record class name::

    {"type": "MouseMove", "x": 10.0, "y": 4.5, "deltaX": 1.0, "deltaY": 0.0}

Wire field names match the event contract consumed by external dispatchers;
only the delta fields differ from the Python attribute names.
"""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Any, Mapping

from framekit.api.input_events import EVENT_TYPES, Event, is_event
from framekit.runtime.errors import EventPayloadError
from framekit.runtime.json_codec import dumps_bytes, loads

TYPE_KEY = "type"

_WIRE_NAMES: dict[str, str] = {"delta_x": "deltaX", "delta_y": "deltaY"}
_EVENT_TYPES_BY_NAME: dict[str, type[Event]] = {cls.__name__: cls for cls in EVENT_TYPES}


def _wire_name(attr: str) -> str:
    return _WIRE_NAMES.get(attr, attr)


def _coerce(event_name: str, key: str, annotation: str, value: object) -> object:
    # bool is an int subclass; never accept it where a number is expected.
    if annotation == "bool":
        if isinstance(value, bool):
            return value
    elif annotation == "int":
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif annotation == "float":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif annotation == "str":
        if isinstance(value, str) and len(value) == 1:
            return value
    raise EventPayloadError(f"{event_name}.{key} must be {annotation}, got {value!r}.")


def event_to_payload(event: Event) -> dict[str, object]:
    """Convert an event record to a JSON-serializable payload."""
    if not is_event(event):
        raise EventPayloadError(f"Not an event record: {type(event).__name__}.")
    payload: dict[str, object] = {TYPE_KEY: type(event).__name__}
    for item in fields(event):
        value = getattr(event, item.name)
        # JSON has no NaN or infinity; orjson would write null.
        if isinstance(value, float) and not math.isfinite(value):
            raise EventPayloadError(
                f"{type(event).__name__}.{_wire_name(item.name)} is not finite: {value!r}."
            )
        payload[_wire_name(item.name)] = value
    return payload


def event_from_payload(payload: Mapping[str, Any]) -> Event:
    """Convert a wire payload into its event record."""
    if not isinstance(payload, Mapping):
        raise EventPayloadError("Event payload must be an object.")
    event_name = payload.get(TYPE_KEY)
    if not isinstance(event_name, str) or event_name not in _EVENT_TYPES_BY_NAME:
        raise EventPayloadError(f"Unknown event type {event_name!r}.")
    event_cls = _EVENT_TYPES_BY_NAME[event_name]

    kwargs: dict[str, Any] = {}
    expected = {TYPE_KEY}
    for item in fields(event_cls):
        key = _wire_name(item.name)
        expected.add(key)
        if key not in payload:
            raise EventPayloadError(f"{event_name} payload is missing '{key}'.")
        kwargs[item.name] = _coerce(event_name, key, str(item.type), payload[key])

    unexpected = sorted(repr(key) for key in set(payload) - expected)
    if unexpected:
        raise EventPayloadError(f"{event_name} payload has unexpected fields: {', '.join(unexpected)}.")
    return event_cls(**kwargs)


def dumps_event(event: Event) -> bytes:
    """Serialize one event to JSON bytes."""
    payload = event_to_payload(event)
    try:
        return dumps_bytes(payload)
    except TypeError as exc:
        raise EventPayloadError(f"{type(event).__name__} cannot be encoded as JSON.") from exc


def loads_event(raw: bytes | str) -> Event:
    """Parse one event from JSON bytes or text."""
    try:
        payload = loads(raw)
    except ValueError as exc:
        raise EventPayloadError("Event payload is not valid JSON.") from exc
    return event_from_payload(payload)


__all__ = [
    "TYPE_KEY",
    "dumps_event",
    "event_from_payload",
    "event_to_payload",
    "loads_event",
]
