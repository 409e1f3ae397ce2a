"""appicons: font and path utilities for app icon generation.

This library provides the pieces the icon generator relies on:
- Path resolution with home directory expansion
- Google Fonts download with an in-memory cache
- System and custom font loading
- Font choice lists for prompts

Example:
    >>> import asyncio
    >>> from appicons import load_google_font, resolve_path
    >>> out_dir = resolve_path("~/Desktop/icons")
    >>> font = asyncio.run(load_google_font("Roboto"))
"""

from appicons.config import Config
from appicons.exceptions import (
    AppIconsError,
    ConfigError,
    FontConfigError,
    FontDownloadError,
    FontNotFoundError,
    FontParseError,
)
from appicons.fonts import (
    FontCache,
    FontChoice,
    FontProvider,
    FontSource,
    get_google_font_choices,
    get_xiroi_font_choices,
    load_custom_font,
    load_font,
    load_google_font,
    load_system_font,
)
from appicons.paths import resolve_path

__version__ = "0.1.0"

__all__ = [
    # Paths
    "resolve_path",
    # Fonts
    "FontCache",
    "FontChoice",
    "FontProvider",
    "FontSource",
    "get_google_font_choices",
    "get_xiroi_font_choices",
    "load_custom_font",
    "load_font",
    "load_google_font",
    "load_system_font",
    # Config
    "Config",
    # Exceptions
    "AppIconsError",
    "ConfigError",
    "FontConfigError",
    "FontDownloadError",
    "FontNotFoundError",
    "FontParseError",
    # Metadata
    "__version__",
]
