"""Google Fonts family catalog.

The full catalog (1,500+ families) is read from Google's public metadata
endpoint, which needs no API key. Until it has been fetched, or when the
fetch fails, a curated fallback list is used instead.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from urllib.parse import quote

from appicons.http import fetch_async

logger = logging.getLogger(__name__)

GOOGLE_FONTS_METADATA_URL = "https://fonts.google.com/metadata/fonts"

# Anti-JSON-hijacking prefix in front of the metadata payload.
_XSSI_PREFIX = ")]}'"


@dataclass(frozen=True)
class GoogleFont:
    family: str
    category: str


FALLBACK_FONTS: tuple[GoogleFont, ...] = (
    GoogleFont("Playfair Display", "serif"),
    GoogleFont("Merriweather", "serif"),
    GoogleFont("Lora", "serif"),
    GoogleFont("Roboto", "sans-serif"),
    GoogleFont("Open Sans", "sans-serif"),
    GoogleFont("Inter", "sans-serif"),
    GoogleFont("Montserrat", "sans-serif"),
    GoogleFont("Poppins", "sans-serif"),
    GoogleFont("Lato", "sans-serif"),
    GoogleFont("Bebas Neue", "display"),
    GoogleFont("Oswald", "display"),
    GoogleFont("Pacifico", "handwriting"),
    GoogleFont("Fira Code", "monospace"),
    GoogleFont("JetBrains Mono", "monospace"),
)


def normalize_category(category: str) -> str:
    """Lower-case a category and hyphenate it, e.g. "Sans Serif" -> "sans-serif"."""
    return "-".join(category.lower().split())


def parse_metadata(text: str) -> list[GoogleFont]:
    """Parse the metadata endpoint payload into a sorted font list.

    Raises:
        ValueError: If the payload is not the expected JSON document.
    """
    text = text.strip()
    if text.startswith(_XSSI_PREFIX):
        text = text[len(_XSSI_PREFIX) :]
    data = json.loads(text)
    try:
        entries = data["familyMetadataList"]
        fonts = [
            GoogleFont(
                family=entry["family"],
                category=normalize_category(str(entry["category"])),
            )
            for entry in entries
        ]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Unexpected Google Fonts metadata: {e}") from e
    fonts.sort(key=lambda font: font.family.lower())
    return fonts


def levenshtein_distance(a: str, b: str) -> int:
    """Number of single-character edits turning ``a`` into ``b``."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j - 1] + (char_a != char_b),
                    current[j - 1] + 1,
                    previous[j] + 1,
                )
            )
        previous = current
    return previous[-1]


class GoogleFontsCatalog:
    """Cached view of the Google Fonts catalog.

    Only a successful fetch is cached; after a failure the next
    :meth:`fetch` tries again. Concurrent fetches share one request.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout
        self._fonts: list[GoogleFont] | None = None
        self._pending: asyncio.Task[list[GoogleFont]] | None = None

    @property
    def loaded(self) -> bool:
        return self._fonts is not None

    async def fetch(self) -> list[GoogleFont]:
        """Return the full catalog, fetching it on first use."""
        if self._fonts is not None:
            return self._fonts
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch())
            self._pending.add_done_callback(self._clear_pending)
        # Cancelling one caller must not cancel the request the others share.
        return await asyncio.shield(self._pending)

    def _clear_pending(self, task: asyncio.Task[list[GoogleFont]]) -> None:
        if self._pending is task:
            self._pending = None

    async def _fetch(self) -> list[GoogleFont]:
        try:
            response = await fetch_async(GOOGLE_FONTS_METADATA_URL, timeout=self.timeout)
            if not response.ok:
                logger.error("Failed to fetch Google Fonts: HTTP %s", response.status)
                return list(FALLBACK_FONTS)
            fonts = parse_metadata(response.text())
        except Exception as e:
            logger.error("Error fetching Google Fonts: %s", e)
            return list(FALLBACK_FONTS)

        self._fonts = fonts
        logger.info("Loaded %d Google Fonts", len(fonts))
        return fonts

    def fonts(self) -> list[GoogleFont]:
        """Cached catalog, or the fallback list if not fetched yet."""
        return list(self._fonts) if self._fonts is not None else list(FALLBACK_FONTS)

    def families(self) -> list[str]:
        return [font.family for font in self.fonts()]

    def get(self, family: str) -> GoogleFont | None:
        wanted = family.lower()
        return next((f for f in self.fonts() if f.family.lower() == wanted), None)

    def by_category(self, category: str) -> list[GoogleFont]:
        wanted = normalize_category(category)
        return [font for font in self.fonts() if font.category == wanted]

    def search(self, query: str, limit: int = 0) -> list[GoogleFont]:
        """Case-insensitive substring search; ``limit=0`` means unlimited."""
        needle = query.lower()
        matches = [font for font in self.fonts() if needle in font.family.lower()]
        return matches[:limit] if limit > 0 else matches

    def normalize(self, family: str) -> str:
        """Return the catalog's casing for ``family``, or ``family`` unchanged."""
        match = self.get(family)
        return match.family if match else family

    def exists(self, family: str) -> bool:
        return self.get(family) is not None

    def url(self, family: str | None, preview_text: str) -> str:
        """Google Fonts web URL showing ``preview_text``.

        Points at the family's specimen page when the family is known, at the
        catalog browser otherwise.
        """
        encoded_text = quote(preview_text, safe="")
        if family and self.exists(family):
            encoded_family = self.normalize(family).replace(" ", "+")
            return f"https://fonts.google.com/specimen/{encoded_family}?preview.text={encoded_text}"
        return f"https://fonts.google.com/?preview.text={encoded_text}"

    async def is_valid(self, family: str) -> bool:
        await self.fetch()
        return self.exists(family)

    async def suggest(self, family: str, max_distance: int = 3) -> list[str]:
        """Up to five families within ``max_distance`` edits, closest first."""
        fonts = await self.fetch()
        wanted = family.lower()
        candidates: list[tuple[int, str]] = []
        for font in fonts:
            distance = levenshtein_distance(wanted, font.family.lower())
            if distance <= max_distance:
                candidates.append((distance, font.family))
        candidates.sort(key=lambda item: item[0])
        return [name for _, name in candidates[:5]]

    async def autocomplete(self, prefix: str, limit: int = 20) -> list[str]:
        fonts = await self.fetch()
        wanted = prefix.lower()
        return [f.family for f in fonts if f.family.lower().startswith(wanted)][:limit]


_default_catalog = GoogleFontsCatalog()


async def fetch_google_fonts() -> list[GoogleFont]:
    return await _default_catalog.fetch()


def get_google_fonts() -> list[GoogleFont]:
    return _default_catalog.fonts()


def get_font_families() -> list[str]:
    return _default_catalog.families()


def get_font_by_family(family: str) -> GoogleFont | None:
    return _default_catalog.get(family)


def get_fonts_by_category(category: str) -> list[GoogleFont]:
    return _default_catalog.by_category(category)


def search_fonts(query: str, limit: int = 0) -> list[GoogleFont]:
    return _default_catalog.search(query, limit)


def normalize_font_family(family: str) -> str:
    return _default_catalog.normalize(family)


def font_exists(family: str) -> bool:
    return _default_catalog.exists(family)


def get_google_fonts_url(family: str | None, preview_text: str) -> str:
    return _default_catalog.url(family, preview_text)


async def is_valid_google_font(family: str) -> bool:
    return await _default_catalog.is_valid(family)


async def suggest_similar_fonts(family: str, max_distance: int = 3) -> list[str]:
    return await _default_catalog.suggest(family, max_distance)


async def autocomplete_google_fonts(prefix: str, limit: int = 20) -> list[str]:
    return await _default_catalog.autocomplete(prefix, limit)
