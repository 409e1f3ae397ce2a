"""Exception hierarchy for appicons.

Font-availability errors (download, parse, not found) are raised inside the
font provider and absorbed at its public boundary; callers only ever see a
``None`` result for those. Configuration errors propagate.
"""

from __future__ import annotations

from typing import Any


class AppIconsError(Exception):
    """Base class for all appicons errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class FontDownloadError(AppIconsError):
    """Raised when a font resource cannot be fetched over HTTP."""

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"Failed to fetch {url}: HTTP {status_code}"
        else:
            message = f"Failed to fetch {url}"
        super().__init__(message, details)


class FontParseError(AppIconsError):
    """Raised when a Google Fonts CSS response has no usable font URL."""

    def __init__(self, font_family: str, details: dict[str, Any] | None = None) -> None:
        self.font_family = font_family
        super().__init__(
            f"Could not parse font URL from Google Fonts CSS for '{font_family}'",
            details,
        )


class FontNotFoundError(AppIconsError):
    """Raised when no candidate font file is readable."""

    def __init__(self, font_family: str, searched: list[str] | None = None) -> None:
        self.font_family = font_family
        self.searched = list(searched or [])
        super().__init__(
            f"Font '{font_family}' not found",
            {"searched": len(self.searched)} if self.searched else None,
        )


class FontConfigError(AppIconsError):
    """Raised when a font request is malformed (unknown source, missing path)."""


class ConfigError(AppIconsError):
    """Raised when the configuration file or environment holds invalid values."""
