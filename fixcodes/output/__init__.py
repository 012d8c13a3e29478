"""Page rendering, sitemap generation and output writing helpers."""

from .renderer import STATIC_PAGES, SiteRenderer, StaticPage, build_environment, build_faq
from .sitemap import collect_paths, render_robots, render_sitemap
from .writer import dump_search_index, prepare_output_dir, write_page, write_text

__all__ = [
    "STATIC_PAGES",
    "SiteRenderer",
    "StaticPage",
    "build_environment",
    "build_faq",
    "collect_paths",
    "render_robots",
    "render_sitemap",
    "dump_search_index",
    "prepare_output_dir",
    "write_page",
    "write_text",
]
