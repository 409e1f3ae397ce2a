"""Fonts command - font lookup and download utilities."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from appicons.config import Config
from appicons.exceptions import FontConfigError
from appicons.fonts import FontProvider, FontSource, GoogleFontsCatalog
from appicons.fonts.catalog import normalize_category
from appicons.fonts.loader import get_google_font_choices, get_xiroi_font_choices
from appicons.paths import resolve_path

console = Console()


def _config(ctx: click.Context) -> Config:
    obj = ctx.obj or {}
    return obj.get("config") or Config.load()


def _write_font(data: bytes, output: str) -> str:
    target = resolve_path(output)
    Path(target).parent.mkdir(parents=True, exist_ok=True)
    Path(target).write_bytes(data)
    return target


@click.group()
def fonts() -> None:
    """Font management commands."""
    pass


@fonts.command("choices")
@click.option("--xiroi", is_flag=True, help="List Xiroi brand fonts instead")
def list_choices(xiroi: bool) -> None:
    """List the curated font choices."""
    choices = get_xiroi_font_choices() if xiroi else get_google_font_choices()

    table = Table(title="Xiroi Fonts" if xiroi else "Popular Google Fonts")
    table.add_column("Family", style="cyan")
    if xiroi:
        table.add_column("Weight", style="yellow")

    for choice in choices:
        if xiroi:
            table.add_row(choice.label, choice.hint or "")
        else:
            table.add_row(choice.label)

    console.print(table)


@fonts.command("google")
@click.argument("family")
@click.option("--output", "-o", help="Write the TTF file to this path")
@click.pass_context
def google_font(ctx: click.Context, family: str, output: str | None) -> None:
    """Download a Google Font as TTF."""
    provider = FontProvider(timeout=_config(ctx).http_timeout)

    with console.status(f"[bold green]Downloading '{family}'..."):
        data = asyncio.run(provider.load_google_font(family))

    if data is None:
        console.print(f"[red]Error:[/red] Could not download Google Font '{family}'")
        raise SystemExit(1)

    console.print(f"[green]Downloaded:[/green] {family} ({len(data) / 1024:.1f} KB)")
    if output:
        console.print(f"[bold]Saved to:[/bold] {_write_font(data, output)}")


@fonts.command("system")
@click.argument("family")
@click.option("--output", "-o", help="Copy the font file to this path")
@click.option("--show-paths", is_flag=True, help="List every candidate path probed")
def system_font(family: str, output: str | None, show_paths: bool) -> None:
    """Find an installed system font."""
    provider = FontProvider()

    if show_paths:
        for path in provider.system_font_paths(family):
            marker = "[green]✓[/green]" if os.path.isfile(path) else "[dim]-[/dim]"
            console.print(f"{marker} {path}")

    data = asyncio.run(provider.load_system_font(family))
    if data is None:
        console.print(f"[red]Not found:[/red] {family}")
        raise SystemExit(1)

    console.print(f"[green]Found:[/green] {family} ({len(data) / 1024:.1f} KB)")
    if output:
        console.print(f"[bold]Saved to:[/bold] {_write_font(data, output)}")


@fonts.command("custom")
@click.argument("path")
def custom_font(path: str) -> None:
    """Check that a custom font file is readable."""
    data = asyncio.run(FontProvider().load_custom_font(path))
    if data is None:
        console.print(f"[red]Error:[/red] Cannot read font file {resolve_path(path)}")
        raise SystemExit(1)
    console.print(f"[green]Loaded:[/green] {resolve_path(path)} ({len(data) / 1024:.1f} KB)")


@fonts.command("load")
@click.argument("family", required=False)
@click.option(
    "--source",
    type=click.Choice([source.value for source in FontSource]),
    help="Font source (default: configured font_source)",
)
@click.option("--path", "font_path", help="Font file for --source custom")
@click.option("--output", "-o", help="Write the font file to this path")
@click.pass_context
def load(
    ctx: click.Context,
    family: str | None,
    source: str | None,
    font_path: str | None,
    output: str | None,
) -> None:
    """Load a font from any source."""
    config = _config(ctx)
    provider = FontProvider(timeout=config.http_timeout)
    source = source or config.font_source

    try:
        data = asyncio.run(provider.load_font(source, family, font_path))
    except FontConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(2) from e

    if data is None:
        console.print(f"[red]Error:[/red] Font unavailable ({source})")
        raise SystemExit(1)

    name = family or font_path
    console.print(f"[green]Loaded:[/green] {name} from {source} ({len(data) / 1024:.1f} KB)")
    if output:
        console.print(f"[bold]Saved to:[/bold] {_write_font(data, output)}")


@fonts.command("search")
@click.argument("query")
@click.option("--limit", type=int, default=20, help="Maximum results (0 = unlimited)")
@click.option("--category", help="Filter by category (serif, sans-serif, display, ...)")
@click.pass_context
def search(ctx: click.Context, query: str, limit: int, category: str | None) -> None:
    """Search the Google Fonts catalog."""
    catalog = GoogleFontsCatalog(timeout=_config(ctx).http_timeout)

    with console.status("[bold green]Loading Google Fonts catalog..."):
        asyncio.run(catalog.fetch())

    matches = catalog.search(query)
    if category:
        wanted = normalize_category(category)
        matches = [font for font in matches if font.category == wanted]
    if limit > 0:
        matches = matches[:limit]

    if not matches:
        console.print(f"[yellow]No fonts match '{query}'[/yellow]")
        suggestions = asyncio.run(catalog.suggest(query))
        if suggestions:
            console.print(f"Did you mean: {', '.join(suggestions)}?")
        raise SystemExit(1)

    table = Table(title=f"Google Fonts matching '{query}'")
    table.add_column("Family", style="cyan")
    table.add_column("Category", style="green")
    for font in matches:
        table.add_row(font.family, font.category)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(matches)} fonts")
