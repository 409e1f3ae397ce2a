"""In-memory cache for downloaded font data."""

from __future__ import annotations

from collections.abc import Iterator


class FontCache:
    """Map of normalized font family name to raw font bytes.

    Keys are lower-cased, so lookups are case-insensitive. Entries are never
    evicted; the cache lives as long as the object that owns it. A
    process-wide instance is available as :data:`DEFAULT_CACHE`.
    """

    def __init__(self) -> None:
        self._fonts: dict[str, bytes] = {}

    @staticmethod
    def key(font_family: str) -> str:
        """Return the cache key for a family name."""
        return font_family.lower()

    def get(self, font_family: str) -> bytes | None:
        return self._fonts.get(self.key(font_family))

    def set(self, font_family: str, data: bytes) -> None:
        self._fonts[self.key(font_family)] = data

    def clear(self) -> None:
        self._fonts.clear()

    def __contains__(self, font_family: object) -> bool:
        return isinstance(font_family, str) and self.key(font_family) in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fonts)


DEFAULT_CACHE = FontCache()
