"""
Command-line interface for the error-code site builder.

Uses Typer to provide commands to seed the dataset, build the static site
and preview search results. Supports loading .env files (e.g. SITE_URL).
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config
from .core.catalog import build_catalog
from .core.search import search as run_search
from .input.dataset import load_entries
from .logging_utils import setup_logging
from .runner import run_build, run_seed

app = typer.Typer(add_completion=False)
console = Console()


def _load(config: Path | None) -> AppConfig:
    # Load environment variables from .env if available
    load_dotenv()
    return load_config(str(config) if config else None)


@app.command()
def seed(
    output: Path | None = typer.Option(None, "--output", "-o", help="Dataset file to write."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
):
    """Generate the seed dataset from the built-in blueprint."""
    cfg = _load(config)
    setup_logging(cfg.logging)
    output_path = output or Path(cfg.data.path)
    count = run_seed(output_path)
    console.print(f"Generated {count} error-code entries at {output_path}")


@app.command()
def build(
    input: Path | None = typer.Option(None, "--input", "-i", help="Dataset JSON file."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Canonical site origin (or set SITE_URL / .env)."
    ),
    clean: bool | None = typer.Option(
        None, "--clean/--no-clean", help="Delete the output directory before building."
    ),
    duplicate_slugs: str | None = typer.Option(
        None, "--duplicate-slugs", help="Slug collision policy: error or warn."
    ),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Build the static site.

    Args:
        input: Dataset JSON file (defaults to data.path from config)
        output: Output directory (defaults to build.output_dir from config)
        config: Optional path to YAML config file
        base_url: Canonical origin used for canonical links and the sitemap
        clean: Whether to delete the output directory first
        duplicate_slugs: "error" to fail on slug collisions, "warn" to keep the last entry
        progress: Whether to show progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    cfg = _load(config)

    # Override with CLI options
    if base_url:
        cfg.site.base_url = base_url
    if clean is not None:
        cfg.build.clean = clean
    if duplicate_slugs:
        cfg.build.duplicate_slugs = duplicate_slugs
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    setup_logging(cfg.logging)
    data_path = input or Path(cfg.data.path)
    output_dir = output or Path(cfg.build.output_dir)

    stats = run_build(data_path, output_dir, cfg, show_progress=progress, console=console)
    console.print(
        f"Built {stats.entries} code pages + index pages into {output_dir}/ "
        f"({stats.brands} brands, {stats.appliances} appliances, {stats.pages} pages)"
    )


@app.command()
def search(
    query: str = typer.Argument("", help="Free-text query, e.g. 'LG washer OE'."),
    input: Path | None = typer.Option(None, "--input", "-i", help="Dataset JSON file."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    brand: str = typer.Option("", "--brand", help="Exact brand name filter."),
    appliance: str = typer.Option("", "--appliance", help="Exact appliance filter."),
    limit: int | None = typer.Option(None, "--limit", min=0, help="Maximum results."),
):
    """Preview the results the site search would show for a query."""
    cfg = _load(config)
    setup_logging(cfg.logging)
    catalog = build_catalog(load_entries(input or Path(cfg.data.path)), cfg.build.duplicate_slugs)
    results = run_search(
        catalog.search_index,
        query,
        brand_filter=brand,
        appliance_filter=appliance,
        limit=limit if limit is not None else cfg.search.max_results,
    )

    if not results:
        console.print(cfg.search.fallback_text)
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Brand")
    table.add_column("Appliance")
    table.add_column("Code")
    table.add_column("Variants", justify="right")
    table.add_column("Severity")
    for result in results:
        item = result.item
        table.add_row(
            item.slug,
            item.brand,
            item.appliance,
            item.code,
            str(result.variant_count),
            item.severity,
        )
    console.print(table)


if __name__ == "__main__":
    app()
