"""License text extraction for generated source headers."""

from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path

from framekit.runtime.config import load_runtime_config
from framekit.runtime.errors import LicenseFormatError, LicenseReadError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "// "
BUNDLED_LICENSE_NAME = "LICENSE"
_YEAR_PATTERN = re.compile(r"^// Copyright ([0-9]+)")


def resolve_license_path(path: str | Path | None = None) -> Path:
    """Resolve the license file from argument, config, then the bundled resource."""
    if path is not None:
        return Path(path)
    configured = load_runtime_config().license_path
    if configured:
        return Path(configured)
    return Path(str(resources.files("framekit").joinpath(BUNDLED_LICENSE_NAME)))


class LicenseFile:
    """License file rendered as line-comment text."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = resolve_license_path(path)

    @property
    def path(self) -> Path:
        return self._path

    def comment(self) -> str:
        """Return the license with every line prefixed by ``// ``.

        The final line of the file is dropped; it is the blank remainder after
        the trailing newline.
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LicenseReadError(f"Cannot read license file '{self._path}'.") from exc
        lines = content.split("\n")
        logger.debug("license_read path=%s lines=%d", self._path, len(lines))
        return COMMENT_PREFIX + ("\n" + COMMENT_PREFIX).join(lines[:-1])

    def year(self) -> int:
        """Return the copyright year from the first license line."""
        match = _YEAR_PATTERN.match(self.comment())
        if match is None:
            raise LicenseFormatError(
                f"License file '{self._path}' does not start with 'Copyright <year>'."
            )
        try:
            return int(match.group(1))
        except ValueError as exc:
            raise LicenseFormatError(f"Invalid copyright year in '{self._path}'.") from exc

    def header(self, body: str) -> str:
        """Return body prefixed by the license comment block."""
        return f"{self.comment()}\n\n{body}"


def license_comment(path: str | Path | None = None) -> str:
    return LicenseFile(path).comment()


def license_year(path: str | Path | None = None) -> int:
    return LicenseFile(path).year()


def license_header(body: str, path: str | Path | None = None) -> str:
    return LicenseFile(path).header(body)


__all__ = [
    "COMMENT_PREFIX",
    "LicenseFile",
    "license_comment",
    "license_header",
    "license_year",
    "resolve_license_path",
]
