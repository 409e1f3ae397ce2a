"""Minimal HTTP GET helper used by the font loader and the font catalog.

Requests run on a worker thread so that callers awaiting a download do not
block other coroutines on the event loop.
"""

from __future__ import annotations

import asyncio
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_USER_AGENT = "appicons/0.1.0"


@dataclass
class HttpResponse:
    """A fully-read HTTP response."""

    url: str
    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")


def fetch(
    url: str,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> HttpResponse:
    """Perform a blocking GET request.

    HTTP error statuses are returned as responses, not raised, so callers can
    inspect ``ok``. Transport failures (DNS, refused connection, TLS) raise
    ``urllib.error.URLError`` or ``OSError``.

    Args:
        url: URL to fetch.
        headers: Extra request headers.
        timeout: Socket timeout in seconds, or None for no timeout.

    Returns:
        HttpResponse with the body fully read.
    """
    request_headers = {"User-Agent": DEFAULT_USER_AGENT}
    request_headers.update(headers or {})
    req = urllib.request.Request(url, headers=request_headers)

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return HttpResponse(
                url=url,
                status=response.status,
                body=response.read(),
                headers=dict(response.headers.items()),
            )
    except urllib.error.HTTPError as e:
        with e:
            return HttpResponse(
                url=url,
                status=e.code,
                body=e.read() or b"",
                headers=dict(e.headers.items()) if e.headers else {},
            )


async def fetch_async(
    url: str,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> HttpResponse:
    """Async wrapper around :func:`fetch`."""
    return await asyncio.to_thread(fetch, url, headers, timeout)
