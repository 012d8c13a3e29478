"""
Build orchestration for the error-code site.

This module coordinates the whole build:
1. Load and validate the dataset
2. Build the catalog (brand/appliance groupings, search index)
3. Prepare the output directory and copy assets
4. Render and write every page
5. Write the search index, sitemap, robots.txt and 404 page
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.catalog import Catalog, build_catalog
from .input.dataset import load_entries
from .input.seed import write_seed
from .logging_utils import log_event
from .output.renderer import STATIC_PAGES, SiteRenderer
from .output.sitemap import collect_paths, render_robots, render_sitemap
from .output.writer import dump_search_index, prepare_output_dir, write_page, write_text

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Counts collected during a build.

    Attributes:
        entries: Entry pages written
        brands: Brand pages written
        appliances: Appliance pages written
        pages: All HTML pages written, including home, hubs, static pages and 404
    """

    entries: int = 0
    brands: int = 0
    appliances: int = 0
    pages: int = 0


def run_seed(output_path: Path) -> int:
    """Generate the seed dataset and return the number of entries written."""
    entries = write_seed(output_path)
    log_event(logger, "Seed written", event="seed_written", path=str(output_path), entries=len(entries))
    return len(entries)


def run_build(
    data_path: Path,
    output_dir: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> BuildStats:
    """Run the complete site build.

    Args:
        data_path: Dataset JSON file
        output_dir: Directory the site is written to
        cfg: Application configuration
        show_progress: Whether to display a progress bar while writing pages
        console: Rich console for progress output (creates default if None)

    Returns:
        Counts of the pages written

    Raises:
        FileNotFoundError: If the dataset is missing
        ValueError: If the dataset is invalid, slugs collide in "error" mode,
            or search.max_results is negative
    """
    log_event(
        logger,
        "Build start",
        event="build_start",
        input=str(data_path),
        output=str(output_dir),
    )

    entries = load_entries(data_path)
    catalog = build_catalog(entries, cfg.build.duplicate_slugs)
    renderer = SiteRenderer(cfg)

    prepare_output_dir(output_dir, clean=cfg.build.clean)

    stats = BuildStats()
    total = len(catalog.entries) + len(catalog.by_brand) + len(catalog.by_appliance)
    if show_progress:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console or Console(),
            transient=True,
        ) as progress:
            task_id = progress.add_task("Rendering pages", total=total)
            _write_catalog_pages(
                catalog, renderer, output_dir, stats, lambda: progress.advance(task_id)
            )
    else:
        _write_catalog_pages(catalog, renderer, output_dir, stats, None)

    _write_site_pages(catalog, renderer, output_dir, stats)
    _write_auxiliary_files(catalog, renderer, output_dir, cfg)

    log_event(
        logger,
        "Build complete",
        event="build_complete",
        output=str(output_dir),
        entries=stats.entries,
        brands=stats.brands,
        appliances=stats.appliances,
        pages=stats.pages,
    )
    return stats


def _write_catalog_pages(
    catalog: Catalog,
    renderer: SiteRenderer,
    output_dir: Path,
    stats: BuildStats,
    advance: Callable[[], None] | None,
) -> None:
    for entry in catalog.entries:
        write_page(output_dir, entry.slug, renderer.render_entry(catalog, entry))
        stats.entries += 1
        if advance:
            advance()

    for brand_slug, items in catalog.by_brand.items():
        write_page(output_dir, f"brands/{brand_slug}", renderer.render_brand(brand_slug, items))
        stats.brands += 1
        if advance:
            advance()

    for appliance_slug, items in catalog.by_appliance.items():
        write_page(
            output_dir, f"appliances/{appliance_slug}", renderer.render_appliance(appliance_slug, items)
        )
        stats.appliances += 1
        if advance:
            advance()

    stats.pages += stats.entries + stats.brands + stats.appliances


def _write_site_pages(
    catalog: Catalog, renderer: SiteRenderer, output_dir: Path, stats: BuildStats
) -> None:
    write_page(output_dir, "", renderer.render_home(catalog))
    write_page(output_dir, "brands", renderer.render_hub("brands", catalog.by_brand))
    write_page(output_dir, "appliances", renderer.render_hub("appliances", catalog.by_appliance))
    for page in STATIC_PAGES:
        write_page(output_dir, page.path, renderer.render_static_page(page))
    write_text(output_dir / "404.html", renderer.render_not_found())
    stats.pages += 3 + len(STATIC_PAGES) + 1


def _write_auxiliary_files(
    catalog: Catalog, renderer: SiteRenderer, output_dir: Path, cfg: AppConfig
) -> None:
    write_text(output_dir / cfg.search.index_filename, dump_search_index(catalog.search_index))
    write_text(
        output_dir / "sitemap.xml",
        render_sitemap(renderer.site_url, collect_paths(catalog)),
    )
    write_text(output_dir / "robots.txt", render_robots(renderer.site_url))
