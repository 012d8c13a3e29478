"""Sitemap and robots.txt generation."""

from __future__ import annotations

from html import escape

from ..core.catalog import Catalog

STATIC_PATHS = (
    "/",
    "/about",
    "/privacy",
    "/terms",
    "/contact",
    "/editorial-policy",
    "/brands",
    "/appliances",
)


def collect_paths(catalog: Catalog) -> list[str]:
    """Every published page path: static pages, hubs, groups, then entries."""
    return [
        *STATIC_PATHS,
        *(f"/brands/{slug}" for slug in catalog.by_brand),
        *(f"/appliances/{slug}" for slug in catalog.by_appliance),
        *(f"/{entry.slug}" for entry in catalog.entries),
    ]


def render_sitemap(site_url: str, paths: list[str]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for path in paths:
        priority = "1.0" if path == "/" else "0.7"
        lines.append(
            f"<url><loc>{escape(site_url + path)}</loc>"
            f"<changefreq>weekly</changefreq><priority>{priority}</priority></url>"
        )
    lines.append("</urlset>")
    return "\n".join(lines)


def render_robots(site_url: str) -> str:
    return f"User-agent: *\nAllow: /\nSitemap: {site_url}/sitemap.xml\n"
