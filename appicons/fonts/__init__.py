"""Font loading for appicons.

This subpackage provides:
- Google Fonts download with an in-memory cache
- System font lookup in the OS font directories
- Custom font files
- The Google Fonts catalog for search and validation
"""

from appicons.fonts.cache import DEFAULT_CACHE, FontCache
from appicons.fonts.catalog import GoogleFont, GoogleFontsCatalog
from appicons.fonts.loader import (
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
from appicons.fonts.system import SystemPlatform, get_system_font_paths

__all__ = [
    "DEFAULT_CACHE",
    "FontCache",
    "FontChoice",
    "FontProvider",
    "FontSource",
    "GoogleFont",
    "GoogleFontsCatalog",
    "SystemPlatform",
    "get_google_font_choices",
    "get_system_font_paths",
    "get_xiroi_font_choices",
    "load_custom_font",
    "load_font",
    "load_google_font",
    "load_system_font",
]
