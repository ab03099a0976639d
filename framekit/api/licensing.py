"""Public license text API contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class LicenseSource(Protocol):
    """Source of comment-formatted license text."""

    @property
    def path(self) -> Path:
        """Resolved license file path."""

    def comment(self) -> str:
        """Return the license text with each line comment-prefixed."""

    def year(self) -> int:
        """Return the copyright year from the first license line."""

    def header(self, body: str) -> str:
        """Return body prefixed by the license comment block."""


def create_license_source(path: str | Path | None = None) -> LicenseSource:
    """Create default license source.

    Without an explicit path, ``FRAMEKIT_LICENSE_PATH`` is used, then the
    license bundled with the package.
    """
    from framekit.runtime.licensing import LicenseFile

    return LicenseFile(path)


__all__ = ["LicenseSource", "create_license_source"]
