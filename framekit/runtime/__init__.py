"""Runtime implementations behind the public framekit API."""

from framekit.runtime.config import RuntimeConfig, load_runtime_config
from framekit.runtime.errors import (
    EventPayloadError,
    FramekitError,
    LicenseError,
    LicenseFormatError,
    LicenseReadError,
)
from framekit.runtime.event_bounds import clamp_event, in_range
from framekit.runtime.event_codec import (
    dumps_event,
    event_from_payload,
    event_to_payload,
    loads_event,
)
from framekit.runtime.licensing import (
    LicenseFile,
    license_comment,
    license_header,
    license_year,
)
from framekit.runtime.logging import setup_logging

__all__ = [
    "EventPayloadError",
    "FramekitError",
    "LicenseError",
    "LicenseFile",
    "LicenseFormatError",
    "LicenseReadError",
    "RuntimeConfig",
    "clamp_event",
    "dumps_event",
    "event_from_payload",
    "event_to_payload",
    "in_range",
    "license_comment",
    "license_header",
    "license_year",
    "load_runtime_config",
    "setup_logging",
]
