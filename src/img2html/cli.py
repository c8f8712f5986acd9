"""Click CLI for img2html: convert images and maintain the cache."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from img2html.config.hierarchy import load_config_hierarchy
from img2html.errors.exceptions import Img2HtmlError

if TYPE_CHECKING:
    from img2html.core import ImageToHtml

console = Console()
error_console = Console(stderr=True)


def _log_level(verbosity: int, configured: str | None = None) -> int:
    """-v and -vv win; otherwise the configured level name, else WARNING."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    level = logging.getLevelName(str(configured or "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging(verbosity: int, configured: str | None = None) -> None:
    """Configure logging based on verbosity and the configured log level."""
    level = _log_level(verbosity, configured)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _build_converter(config: dict[str, Any]) -> ImageToHtml:
    from img2html.core import ImageToHtml

    return ImageToHtml(config)


def _resolve_cache_dir(config: dict[str, Any]) -> Path:
    """Cache directory from the merged configuration, else under the base dir."""
    from img2html.config.defaults import CACHE_SUBDIR_NAME, DEFAULT_BASE_DIR

    if config.get("cache_dir"):
        return Path(config["cache_dir"])
    base_dir = Path(config["base_dir"]) if config.get("base_dir") else DEFAULT_BASE_DIR
    return base_dir / CACHE_SUBDIR_NAME


@click.group()
@click.version_option(package_name="img2html")
def cli() -> None:
    """img2html: render images as pixel-grid HTML."""


@cli.command()
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output file path.")
@click.option("--max-width", type=click.IntRange(min=1), default=None, help="Width bound in pixels.")
@click.option(
    "--max-height", type=click.IntRange(min=1), default=None, help="Height bound in pixels."
)
@click.option("--cache-dir", type=click.Path(file_okay=False), default=None, help="Cache directory.")
@click.option(
    "--cache-lifetime", type=click.IntRange(min=1), default=None, help="Entry lifetime in seconds."
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def convert(
    image_path: str,
    output: str | None,
    max_width: int | None,
    max_height: int | None,
    cache_dir: str | None,
    cache_lifetime: int | None,
    verbose: int,
) -> None:
    """Convert an image to pixel-grid HTML."""
    config = load_config_hierarchy(
        max_width=max_width,
        max_height=max_height,
        cache_dir=cache_dir,
        cache_lifetime=cache_lifetime,
    )
    _setup_logging(verbose, config.get("log_level"))

    try:
        converter = _build_converter(config)
        result = converter.convert(image_path)
    except Img2HtmlError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if output:
        written = result.save(output)
        console.print(f"[green]Written to {written}[/green]")
    else:
        click.echo(result.html)

    if verbose >= 1:
        table = Table(title="Conversion Summary", show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Cache key", result.cache_key)
        table.add_row("Size", f"{result.dimensions.width}x{result.dimensions.height}")
        table.add_row("Cached", "yes" if result.cached else "no")
        if result.cache_path:
            table.add_row("Entry", str(result.cache_path))
        error_console.print(table)


@cli.group()
def cache() -> None:
    """Cache management commands."""


@cache.command("clean")
@click.option("--cache-dir", type=click.Path(file_okay=False), default=None, help="Cache directory.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def cache_clean(cache_dir: str | None, verbose: int) -> None:
    """Delete expired cache entries (run this from a scheduler)."""
    from img2html.core import clean_up_cache

    config = load_config_hierarchy(cache_dir=cache_dir)
    _setup_logging(verbose, config.get("log_level"))
    target = _resolve_cache_dir(config)
    try:
        removed = clean_up_cache(target)
    except Img2HtmlError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    console.print(f"[green]Removed {removed} expired entries from {target}[/green]")


@cache.command("stats")
@click.option("--cache-dir", type=click.Path(file_okay=False), default=None, help="Cache directory.")
def cache_stats(cache_dir: str | None) -> None:
    """Show cache statistics."""
    from img2html.cache.store import FileCacheStore

    target = _resolve_cache_dir(load_config_hierarchy(cache_dir=cache_dir))
    stats = FileCacheStore(target, create=False).stats()

    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")
    table.add_row("Directory", str(target))
    table.add_row("Entries", str(stats.entries))
    table.add_row("Live", str(stats.live))
    table.add_row("Expired", str(stats.expired))
    table.add_row("Size (MB)", f"{stats.size_mb:.2f}")
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
