"""appicons command-line entry point."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from appicons import __version__
from appicons.cli.commands import fonts, resolve
from appicons.config import Config
from appicons.exceptions import ConfigError
from appicons.log import setup_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="appicons")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a TOML config file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Font and path utilities for app icon generation."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(fonts)
cli.add_command(resolve)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
