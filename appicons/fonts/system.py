"""Candidate locations for fonts installed on the host system.

Fonts are looked up by file name only: the family name with its spaces
removed, plus a ``.ttf`` or ``.ttc`` extension. The probe order is fixed by
:data:`SYSTEM_FONT_LOCATIONS`.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

from appicons.paths import home_directory


class SystemPlatform(Enum):
    """Platforms with a known font directory layout."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"


# (directory template, extension) in probe order. "{home}" is the user's
# home directory.
SYSTEM_FONT_LOCATIONS: dict[SystemPlatform, tuple[tuple[str, str], ...]] = {
    SystemPlatform.MACOS: (
        ("/System/Library/Fonts", ".ttf"),
        ("/System/Library/Fonts", ".ttc"),
        ("/Library/Fonts", ".ttf"),
        ("/Library/Fonts", ".ttc"),
        ("{home}/Library/Fonts", ".ttf"),
        ("{home}/Library/Fonts", ".ttc"),
    ),
    SystemPlatform.LINUX: (
        ("/usr/share/fonts/truetype", ".ttf"),
        ("/usr/share/fonts/TTF", ".ttf"),
        ("/usr/local/share/fonts", ".ttf"),
        ("{home}/.fonts", ".ttf"),
        ("{home}/.local/share/fonts", ".ttf"),
    ),
    SystemPlatform.WINDOWS: (
        ("C:\\Windows\\Fonts", ".ttf"),
        ("C:\\Windows\\Fonts", ".ttc"),
    ),
}

# macOS and Linux directories are probed on every host; a failed read of a
# missing file costs little. Windows directories only exist on Windows.
ALWAYS_PROBED = (SystemPlatform.MACOS, SystemPlatform.LINUX)


def current_platform(platform: str | None = None) -> SystemPlatform:
    """Map ``sys.platform`` (or the given value) to a SystemPlatform."""
    platform = platform or sys.platform
    if platform == "darwin":
        return SystemPlatform.MACOS
    if platform.startswith("win"):
        return SystemPlatform.WINDOWS
    return SystemPlatform.LINUX


def sanitize_family(font_family: str) -> str:
    """Return the file stem used for ``font_family`` (spaces removed)."""
    return font_family.replace(" ", "")


def get_system_font_paths(
    font_family: str,
    platform: SystemPlatform | None = None,
    home: Path | str | None = None,
) -> list[str]:
    """Build the ordered list of candidate font file paths.

    Args:
        font_family: Family name, e.g. "Arial" or "TT Satoshi Medium".
        platform: Host platform. Defaults to the running platform.
        home: Home directory. Defaults to the current user's; when that
            is unknown, per-user directories are skipped.

    Returns:
        Absolute candidate paths, macOS first, then Linux, then Windows when
        ``platform`` is Windows.
    """
    platform = platform or current_platform()
    home_dir = str(home) if home is not None else home_directory()
    sanitized = sanitize_family(font_family)

    platforms = list(ALWAYS_PROBED)
    if platform is SystemPlatform.WINDOWS:
        platforms.append(SystemPlatform.WINDOWS)

    paths: list[str] = []
    for entry in platforms:
        sep = "\\" if entry is SystemPlatform.WINDOWS else "/"
        for directory, extension in SYSTEM_FONT_LOCATIONS[entry]:
            if "{home}" in directory:
                if home_dir is None:
                    continue
                directory = directory.format(home=home_dir)
            paths.append(f"{directory}{sep}{sanitized}{extension}")
    return paths
