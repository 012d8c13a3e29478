"""
Build-time catalog: entries plus the indexes pages are rendered from.

Groupings keep first-seen key order and input item order, so pages list
entries in dataset order unless a page sorts them explicitly.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging
from typing import Callable, Iterable

from .search import build_search_index
from .types import Entry, SearchIndexItem

logger = logging.getLogger(__name__)

DUPLICATE_SLUG_MODES = ("error", "warn")


@dataclass
class Catalog:
    """Everything a build renders from.

    Attributes:
        entries: Entries in dataset order, one per slug
        by_brand: Entries grouped by brand slug
        by_appliance: Entries grouped by appliance slug
        search_index: Search projection of ``entries``
    """

    entries: list[Entry]
    by_brand: dict[str, list[Entry]] = field(default_factory=dict)
    by_appliance: dict[str, list[Entry]] = field(default_factory=dict)
    search_index: list[SearchIndexItem] = field(default_factory=list)


def group_entries(entries: Iterable[Entry], key: Callable[[Entry], str]) -> dict[str, list[Entry]]:
    """Group entries by key, preserving first-seen key order."""
    grouped: dict[str, list[Entry]] = {}
    for entry in entries:
        grouped.setdefault(key(entry), []).append(entry)
    return grouped


def find_duplicate_slugs(entries: Iterable[Entry]) -> list[str]:
    """Return slugs used by more than one entry, in first-seen order."""
    counts = Counter(entry.slug for entry in entries)
    return [slug for slug, count in counts.items() if count > 1]


def build_catalog(entries: list[Entry], duplicate_slugs: str = "error") -> Catalog:
    """Validate entries and build the catalog indexes.

    Args:
        entries: Parsed dataset entries
        duplicate_slugs: "error" to reject colliding slugs, "warn" to log
            them and keep only the last entry per slug

    Returns:
        The assembled Catalog

    Raises:
        ValueError: If duplicate slugs are found in "error" mode, or the
            mode is not supported
    """
    mode = (duplicate_slugs or "error").lower()
    if mode not in DUPLICATE_SLUG_MODES:
        raise ValueError("Unsupported duplicate_slugs mode. Use 'error' or 'warn'.")

    duplicates = find_duplicate_slugs(entries)
    if duplicates:
        preview = ", ".join(duplicates[:5])
        if mode == "error":
            raise ValueError(f"Duplicate entry slugs ({len(duplicates)}): {preview}")
        logger.warning(
            "Duplicate entry slugs (%d), keeping the last entry for each: %s",
            len(duplicates),
            preview,
        )
        entries = _keep_last_per_slug(entries)

    return Catalog(
        entries=entries,
        by_brand=group_entries(entries, lambda entry: entry.brand_slug),
        by_appliance=group_entries(entries, lambda entry: entry.appliance_slug),
        search_index=build_search_index(entries),
    )


def related_entries(catalog: Catalog, entry: Entry, limit: int = 8) -> list[Entry]:
    """Other entries for the same brand and appliance, in dataset order."""
    related = [
        candidate
        for candidate in catalog.by_brand.get(entry.brand_slug, [])
        if candidate.appliance_slug == entry.appliance_slug and candidate.slug != entry.slug
    ]
    return related[:limit]


def _keep_last_per_slug(entries: list[Entry]) -> list[Entry]:
    # Position of the first occurrence, content of the last one.
    latest: dict[str, Entry] = {}
    for entry in entries:
        latest[entry.slug] = entry
    return list(latest.values())
