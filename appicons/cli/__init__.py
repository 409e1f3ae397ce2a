"""Command-line interface for appicons."""

from appicons.cli.main import cli

__all__ = ["cli"]
