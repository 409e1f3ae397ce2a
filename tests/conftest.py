"""Pytest configuration and shared fixtures for appicons tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from appicons.fonts.cache import DEFAULT_CACHE, FontCache
from appicons.http import HttpResponse

SAMPLE_CSS = """/* latin */
@font-face {
  font-family: 'Roboto';
  font-style: normal;
  font-weight: 400;
  font-display: swap;
  src: url(https://fonts.gstatic.com/s/roboto/v30/KFOmCnqEu92Fr1Me5Q.ttf) format('truetype');
}
"""

SAMPLE_FONT_URL = "https://fonts.gstatic.com/s/roboto/v30/KFOmCnqEu92Fr1Me5Q.ttf"

# Minimal TrueType header followed by padding; enough for byte comparisons.
SAMPLE_TTF = b"\x00\x01\x00\x00" + b"\x00" * 252


def make_response(url: str = "https://example.test/", status: int = 200, body: bytes = b"") -> HttpResponse:
    """Build an HttpResponse for mocked network calls."""
    return HttpResponse(url=url, status=status, body=body)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def font_cache() -> FontCache:
    """Return an empty, isolated font cache."""
    return FontCache()


@pytest.fixture(autouse=True)
def clear_default_cache() -> Generator[None, None, None]:
    """Keep the process-wide font cache from leaking between tests."""
    DEFAULT_CACHE.clear()
    yield
    DEFAULT_CACHE.clear()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point config loading at an empty location and drop APPICONS_* vars."""
    for name in (
        "APPICONS_LOG_LEVEL",
        "APPICONS_HTTP_TIMEOUT",
        "APPICONS_OUTPUT_DIR",
        "APPICONS_FONT_SOURCE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("APPICONS_CONFIG", str(tmp_path / "no-such-config.toml"))


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """Return a temporary directory used as the user's home."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def no_home(monkeypatch):
    """Make the current user's home directory impossible to determine."""
    for name in ("HOME", "USERPROFILE", "HOMEDRIVE", "HOMEPATH"):
        monkeypatch.delenv(name, raising=False)
    try:
        import pwd
    except ImportError:
        return

    def getpwuid(uid):
        raise KeyError(f"getpwuid(): uid not found: {uid}")

    monkeypatch.setattr(pwd, "getpwuid", getpwuid)


@pytest.fixture
def http_response():
    """Return a factory for HttpResponse objects."""
    return make_response


@pytest.fixture
def sample_css() -> str:
    """Return a Google Fonts CSS document with a TTF src url."""
    return SAMPLE_CSS


@pytest.fixture
def sample_font_url() -> str:
    return SAMPLE_FONT_URL


@pytest.fixture
def sample_ttf() -> bytes:
    return SAMPLE_TTF
