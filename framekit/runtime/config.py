"""Centralized runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    license_path: str | None
    log_level: str
    log_format: str
    log_file: str | None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _optional_text(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = _text(name, "", env=env)
    return value if value else None


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    return value if value in _LOG_FORMATS else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with framekit-prefixed override."""
    value = _raw("FRAMEKIT_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    return RuntimeConfig(
        license_path=_optional_text("FRAMEKIT_LICENSE_PATH", env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("FRAMEKIT_LOG_FORMAT", "text", env=env)),
        log_file=_optional_text("FRAMEKIT_LOG_FILE", env=env),
    )


__all__ = ["RuntimeConfig", "load_runtime_config", "resolve_log_level_name"]
