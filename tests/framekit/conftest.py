from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

LicenseFactory = Callable[[str], Path]


@pytest.fixture(autouse=True)
def _clean_framekit_env(monkeypatch) -> None:
    for name in (
        "FRAMEKIT_LICENSE_PATH",
        "FRAMEKIT_LOG_LEVEL",
        "FRAMEKIT_LOG_FORMAT",
        "FRAMEKIT_LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_license(tmp_path) -> LicenseFactory:
    def _write(content: str) -> Path:
        path = tmp_path / "LICENSE"
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
