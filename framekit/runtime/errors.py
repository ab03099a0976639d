"""Shared runtime exception types."""

from __future__ import annotations


class FramekitError(Exception):
    """Base class for errors raised by framekit."""


class LicenseError(FramekitError):
    """License text could not be produced."""


class LicenseReadError(LicenseError, OSError):
    """License file is missing, unreadable or not valid UTF-8."""


class LicenseFormatError(LicenseError, ValueError):
    """License text does not start with a ``Copyright <year>`` line."""


class EventPayloadError(FramekitError, ValueError):
    """Wire payload does not describe a known event record."""


__all__ = [
    "EventPayloadError",
    "FramekitError",
    "LicenseError",
    "LicenseFormatError",
    "LicenseReadError",
]
