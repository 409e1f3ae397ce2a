"""Logging setup for the appicons CLI.

Library modules only create loggers under the ``appicons`` namespace; handlers
are installed here, once, by the command-line entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "appicons"

_handler: RichHandler | None = None


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the ``appicons`` logger.

    Calling this again only updates the level.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.
        console: Console to log to. Defaults to stderr.

    Returns:
        The configured ``appicons`` logger.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _handler is None:
        _handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_handler)

    return logger
