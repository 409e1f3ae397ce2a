"""CLI commands for appicons."""

from appicons.cli.commands.fonts import fonts
from appicons.cli.commands.resolve import resolve

__all__ = ["fonts", "resolve"]
