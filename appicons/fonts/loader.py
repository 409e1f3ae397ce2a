"""Font loading for text-based icon foregrounds.

Fonts can come from three sources:

- Google Fonts: downloaded on demand through the CSS API and kept in an
  in-memory :class:`~appicons.fonts.cache.FontCache`.
- System fonts: looked up by file name in the OS font directories.
- Custom fonts: read from a user-supplied path.

Every loader returns the raw font bytes, or ``None`` when the font is not
available. Failures are logged, never raised.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from appicons.exceptions import (
    FontConfigError,
    FontDownloadError,
    FontNotFoundError,
    FontParseError,
)
from appicons.fonts.cache import DEFAULT_CACHE, FontCache
from appicons.fonts.system import SystemPlatform, get_system_font_paths
from appicons.http import fetch_async
from appicons.paths import resolve_path

logger = logging.getLogger(__name__)

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2?family={family}:wght@400&display=swap"

# Google Fonts picks the font format from the User-Agent. This old Safari
# string gets TTF urls instead of woff2, and the renderer needs TTF.
TTF_USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_6_8) AppleWebKit/534.59.8"

_CSS_FONT_URL = re.compile(r"src:\s*url\(([^)]+)\)")

# Curated for clarity at small sizes and visual impact.
POPULAR_GOOGLE_FONTS = (
    "Roboto",
    "Open Sans",
    "Montserrat",
    "Poppins",
    "Inter",
    "Lato",
    "Raleway",
    "Playfair Display",
    "Bebas Neue",
    "Oswald",
)

# Xiroi brand fonts; these must be installed manually.
XIROI_FONTS = (
    ("TT Satoshi", "Regular weight"),
    ("TT Satoshi Medium", "Medium weight"),
    ("TT Satoshi DemiBold", "Bold weight"),
)


class FontSource(str, Enum):
    """Where a font is loaded from."""

    GOOGLE = "google"
    SYSTEM = "system"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FontChoice:
    """A selectable font option for prompts and listings."""

    value: str
    label: str
    hint: str | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": self.value, "label": self.label}
        if self.hint is not None:
            data["hint"] = self.hint
        return data


def extract_font_url(css: str) -> str | None:
    """Return the first ``url(...)`` of a ``src:`` declaration in ``css``."""
    match = _CSS_FONT_URL.search(css)
    if not match or not match.group(1):
        return None
    return match.group(1)


class FontProvider:
    """Resolve font family names to font file bytes.

    Two concurrent requests for the same uncached Google font may both
    download it; the second write replaces the first with identical data.
    """

    def __init__(
        self,
        cache: FontCache | None = None,
        timeout: float | None = None,
        platform: SystemPlatform | None = None,
        home: Path | str | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            cache: Cache for downloaded Google fonts. Defaults to the
                process-wide cache.
            timeout: Per-request HTTP timeout in seconds, None for no limit.
            platform: Platform used for system font lookup. Defaults to the
                running platform.
            home: Home directory used for per-user font directories.
        """
        self.cache = cache if cache is not None else DEFAULT_CACHE
        self.timeout = timeout
        self.platform = platform
        self.home = home

    async def load_google_font(self, font_family: str) -> bytes | None:
        """Download a Google Font as TTF.

        Fetches the CSS for the family, extracts the font file URL, downloads
        it and caches the result. Cached fonts are returned without network
        access.

        Args:
            font_family: Family name in any casing, e.g. "Open Sans".

        Returns:
            TTF bytes, or None if the font could not be downloaded.
        """
        cached = self.cache.get(font_family)
        if cached is not None:
            logger.debug("Google Font '%s' served from cache", font_family)
            return cached

        try:
            data = await self._download_google_font(font_family)
        except (FontDownloadError, FontParseError) as e:
            logger.error("%s", e)
            return None
        except Exception as e:
            logger.error("Error loading Google Font '%s': %s", font_family, e)
            return None

        self.cache.set(font_family, data)
        logger.info("Downloaded Google Font '%s' (%d bytes)", font_family, len(data))
        return data

    async def _download_google_font(self, font_family: str) -> bytes:
        css_url = GOOGLE_FONTS_CSS_URL.format(family=font_family.replace(" ", "+"))
        css_response = await fetch_async(
            css_url, headers={"User-Agent": TTF_USER_AGENT}, timeout=self.timeout
        )
        if not css_response.ok:
            raise FontDownloadError(css_url, status_code=css_response.status)

        font_url = extract_font_url(css_response.text())
        if font_url is None:
            raise FontParseError(font_family)

        font_response = await fetch_async(font_url, timeout=self.timeout)
        if not font_response.ok:
            raise FontDownloadError(font_url, status_code=font_response.status)
        return font_response.body

    def system_font_paths(self, font_family: str) -> list[str]:
        """Return the candidate files probed for ``font_family``."""
        return get_system_font_paths(font_family, platform=self.platform, home=self.home)

    async def load_system_font(self, font_family: str) -> bytes | None:
        """Load an installed font from the OS font directories.

        Args:
            font_family: Family name; spaces are removed to build the file name.

        Returns:
            Font bytes from the first readable candidate, or None.
        """
        paths = self.system_font_paths(font_family)
        try:
            return await asyncio.to_thread(_read_first_readable, font_family, paths)
        except FontNotFoundError as e:
            logger.debug("%s", e)
            return None

    async def load_custom_font(self, font_path: str) -> bytes | None:
        """Load a font file from a user-supplied path (``~`` is expanded)."""
        path = resolve_path(font_path)
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            logger.error("Cannot read font file %s: %s", path, e)
            return None

    async def load_font(
        self,
        source: FontSource | str,
        font_family: str | None = None,
        font_path: str | None = None,
    ) -> bytes | None:
        """Load a font from the given source.

        Raises:
            FontConfigError: If the source is unknown, or required arguments
                for it are missing.
        """
        try:
            source = FontSource(source)
        except ValueError as e:
            raise FontConfigError(f"Unknown font source: {source}") from e

        if source is FontSource.CUSTOM:
            if not font_path:
                raise FontConfigError("Font path is required for custom fonts")
            return await self.load_custom_font(font_path)

        if not font_family:
            raise FontConfigError(f"Font family is required for {source.value} fonts")
        if source is FontSource.GOOGLE:
            return await self.load_google_font(font_family)
        return await self.load_system_font(font_family)


def _read_first_readable(font_family: str, paths: list[str]) -> bytes:
    for path in paths:
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError:
            continue
    raise FontNotFoundError(font_family, searched=paths)


_default_provider = FontProvider()


async def load_google_font(font_family: str) -> bytes | None:
    """Load a Google Font with the default provider."""
    return await _default_provider.load_google_font(font_family)


async def load_system_font(font_family: str) -> bytes | None:
    """Load a system font with the default provider."""
    return await _default_provider.load_system_font(font_family)


async def load_custom_font(font_path: str) -> bytes | None:
    return await _default_provider.load_custom_font(font_path)


async def load_font(
    source: FontSource | str,
    font_family: str | None = None,
    font_path: str | None = None,
) -> bytes | None:
    return await _default_provider.load_font(source, font_family, font_path)


def get_google_font_choices() -> list[FontChoice]:
    """Popular Google Fonts as choices, in display order."""
    return [FontChoice(value=font, label=font) for font in POPULAR_GOOGLE_FONTS]


def get_xiroi_font_choices() -> list[FontChoice]:
    """Xiroi brand fonts as choices, with a weight hint."""
    return [FontChoice(value=font, label=font, hint=hint) for font, hint in XIROI_FONTS]
