"""Resolve command - print the absolute form of a path."""

from __future__ import annotations

import click

from appicons.paths import resolve_path


@click.command()
@click.argument("path", required=False)
@click.pass_context
def resolve(ctx: click.Context, path: str | None) -> None:
    """Resolve PATH (default: configured output dir) to an absolute path."""
    if path is None:
        config = ctx.obj.get("config") if ctx.obj else None
        path = config.output_dir if config else "."
    click.echo(resolve_path(path))
