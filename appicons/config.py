"""Configuration for appicons.

Values come from, in increasing priority: defaults, a TOML file, and
``APPICONS_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from appicons.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("~/.config/appicons/config.toml")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FONT_SOURCES = ("google", "system", "custom")


@dataclass(frozen=True)
class Config:
    """Runtime settings shared by the CLI commands."""

    log_level: str = "WARNING"
    http_timeout: float | None = 30.0
    output_dir: str = "."
    font_source: str = "google"

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from file and environment.

        Args:
            path: TOML file to read. Defaults to ``$APPICONS_CONFIG`` or
                ``~/.config/appicons/config.toml``. A missing file is not an
                error.

        Returns:
            A validated Config.

        Raises:
            ConfigError: If the file cannot be parsed or a value is invalid.
        """
        if path is None:
            path = os.environ.get("APPICONS_CONFIG") or DEFAULT_CONFIG_PATH
        config_path = Path(path).expanduser()

        values: dict[str, Any] = {}
        if config_path.is_file():
            values.update(_read_toml(config_path))

        env_map = {
            "APPICONS_LOG_LEVEL": "log_level",
            "APPICONS_HTTP_TIMEOUT": "http_timeout",
            "APPICONS_OUTPUT_DIR": "output_dir",
            "APPICONS_FONT_SOURCE": "font_source",
        }
        for env_name, key in env_map.items():
            raw = os.environ.get(env_name)
            if raw is not None and raw != "":
                values[key] = raw

        return cls().merge(values)

    def merge(self, values: dict[str, Any]) -> Config:
        """Return a copy with ``values`` applied; unknown keys are ignored."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                logging.getLogger(__name__).debug("Ignoring unknown config key %r", key)
                continue
            updates[key] = _coerce(key, value)
        return replace(self, **updates)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}", {"error": str(e)}) from e
    # Settings may live at the top level or under an [appicons] table.
    section = data.get("appicons", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid [appicons] section in {path}")
    return section


def _coerce(key: str, value: Any) -> Any:
    if key == "log_level":
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {value}")
        return level
    if key == "http_timeout":
        if value is None or str(value).strip().lower() in ("0", "none", ""):
            return None
        try:
            timeout = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid HTTP timeout: {value}") from e
        if timeout < 0:
            raise ConfigError(f"Invalid HTTP timeout: {value}")
        return timeout
    if key == "font_source":
        source = str(value).lower()
        if source not in _FONT_SOURCES:
            raise ConfigError(f"Invalid font source: {value}")
        return source
    return str(value)
