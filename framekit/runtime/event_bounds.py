"""Consumer-side tolerance for out-of-range event values.

Producers are expected to keep gamepad axis positions in [-1, 1] and
pressures in [0, 1], but nothing stops them from emitting other values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from framekit.api.input_events import Event

logger = logging.getLogger(__name__)

# Field name -> (minimum, maximum).
RANGE_FIELDS: dict[str, tuple[float, float]] = {
    "position": (-1.0, 1.0),
    "pressure": (0.0, 1.0),
}


def _clamp(value: float, minimum: float, maximum: float) -> float:
    if math.isnan(value):
        return 0.0
    return max(minimum, min(maximum, value))


def in_range(event: Event) -> bool:
    """Return whether every range-contracted field of event holds."""
    for name, (minimum, maximum) in RANGE_FIELDS.items():
        value = getattr(event, name, None)
        if value is None:
            continue
        if not minimum <= value <= maximum:
            return False
    return True


def clamp_event(event: Event) -> Event:
    """Return event with range-contracted fields clamped.

    In-range events are returned unchanged (same object).
    """
    changes: dict[str, float] = {}
    for name, (minimum, maximum) in RANGE_FIELDS.items():
        value = getattr(event, name, None)
        if value is None:
            continue
        clamped = _clamp(float(value), minimum, maximum)
        if clamped != value:
            changes[name] = clamped
    if not changes:
        return event
    logger.debug(
        "event_clamped type=%s fields=%s",
        type(event).__name__,
        ",".join(sorted(changes)),
    )
    return replace(event, **changes)


__all__ = ["RANGE_FIELDS", "clamp_event", "in_range"]
