"""
Variant collapsing for search results.

Entries that share brand, appliance and code (typically differing only by
model family) are variants of the same fault. Search shows one row per
fault and reports how many variants matched.
"""

from __future__ import annotations

from typing import Callable, Iterable

from .types import SearchIndexItem, SearchResult


def collapse_variants(
    items: Iterable[SearchIndexItem],
    key: Callable[[SearchIndexItem], tuple[str, ...]],
) -> list[SearchResult]:
    """Collapse items that share a key into single results.

    The first item seen for a key is kept as the group's representative and
    later items only increase its variant count, so output order is the
    order in which each key first appears.

    Args:
        items: Matched items, in display order
        key: Grouping key for an item

    Returns:
        One SearchResult per distinct key, preserving first-seen order
    """
    counts: dict[tuple[str, ...], int] = {}
    representatives: list[tuple[tuple[str, ...], SearchIndexItem]] = []

    for item in items:
        group = key(item)
        if group in counts:
            counts[group] += 1
            continue
        counts[group] = 1
        representatives.append((group, item))

    return [SearchResult(item=item, variant_count=counts[group]) for group, item in representatives]
