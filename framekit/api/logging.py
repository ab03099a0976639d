"""Public logging API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class LogValue(Protocol):
    """Opaque logging argument boundary contract."""


class LoggerPort(Protocol):
    """Minimal logger surface for library callers."""

    def debug(self, message: LogValue, *args: LogValue, **kwargs: LogValue) -> None: ...

    def info(self, message: LogValue, *args: LogValue, **kwargs: LogValue) -> None: ...

    def warning(self, message: LogValue, *args: LogValue, **kwargs: LogValue) -> None: ...

    def error(self, message: LogValue, *args: LogValue, **kwargs: LogValue) -> None: ...

    def exception(self, message: LogValue, *args: LogValue, **kwargs: LogValue) -> None: ...


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging through the runtime implementation."""
    from framekit.runtime.logging import configure_logging as runtime_configure_logging

    runtime_configure_logging(config)


__all__ = ["LogValue", "LoggerPort", "LoggingConfig", "configure_logging"]
