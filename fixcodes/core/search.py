"""
Search, filter and de-duplication over the search index.

This is the reference implementation of the filtering routine that the home
page runs in the browser (see ``output/templates/partials/search.js``). Both
must stay behaviourally identical:

1. Keep items whose brand equals the brand filter (empty filter keeps all)
2. Keep items whose appliance equals the appliance filter (same rule)
3. Keep items where every query token is a prefix of some word of the
   combined title/brand/appliance/code/summary text, or a prefix of the
   whole normalized brand, appliance or code
4. Collapse items sharing normalized (brand, appliance, code), first wins
5. Truncate to the result cap

There is no relevance ranking; results keep the order of the index. Every
call rescans the whole index, which is fine for a catalog in the low
thousands. A larger catalog would want a precomputed prefix index.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .dedup import collapse_variants
from .types import Entry, SearchIndexItem, SearchResult

MAX_RESULTS = 30

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize(value: object) -> str:
    """Lower-case, collapse every non-alphanumeric run to one space, trim."""
    return _NON_ALNUM_RE.sub(" ", str(value).lower()).strip()


def tokenize(query: str) -> list[str]:
    """Split a free-text query into normalized, non-empty tokens."""
    return normalize(query).split()


def build_search_index(entries: Iterable[Entry]) -> list[SearchIndexItem]:
    """Project entries onto the search index, keeping entry order."""
    return [SearchIndexItem.from_entry(entry) for entry in entries]


def matches_tokens(item: SearchIndexItem, tokens: Sequence[str]) -> bool:
    """Return True if every token matches at least one field of the item."""
    if not tokens:
        return True

    words = normalize(
        " ".join([item.title, item.brand, item.appliance, item.code, item.summary])
    ).split()
    brand_text = normalize(item.brand)
    appliance_text = normalize(item.appliance)
    code_text = normalize(item.code)

    return all(
        any(word.startswith(token) for word in words)
        or brand_text.startswith(token)
        or appliance_text.startswith(token)
        or code_text.startswith(token)
        for token in tokens
    )


def variant_key(item: SearchIndexItem) -> tuple[str, str, str]:
    return (normalize(item.brand), normalize(item.appliance), normalize(item.code))


def filter_items(
    items: Iterable[SearchIndexItem],
    query: str = "",
    brand_filter: str = "",
    appliance_filter: str = "",
) -> list[SearchIndexItem]:
    """Apply the brand, appliance and token filters in order."""
    tokens = tokenize(query)
    return [
        item
        for item in items
        if (not brand_filter or item.brand == brand_filter)
        and (not appliance_filter or item.appliance == appliance_filter)
        and matches_tokens(item, tokens)
    ]


def search(
    items: Sequence[SearchIndexItem],
    query: str = "",
    brand_filter: str = "",
    appliance_filter: str = "",
    limit: int = MAX_RESULTS,
) -> list[SearchResult]:
    """Run the full search pipeline.

    Variant counts are taken over the whole matched set, before the cap.

    Args:
        items: The search index, in display order
        query: Free-text query
        brand_filter: Exact brand name, or "" for all brands
        appliance_filter: Exact appliance name, or "" for all appliances
        limit: Maximum number of results

    Returns:
        Between 0 and ``limit`` results in index order

    Raises:
        ValueError: If ``limit`` is negative
    """
    if limit < 0:
        raise ValueError(f"Search limit must be zero or greater, got {limit}")
    matched = filter_items(items, query, brand_filter, appliance_filter)
    return collapse_variants(matched, variant_key)[:limit]


def facet_options(items: Iterable[SearchIndexItem]) -> tuple[list[str], list[str]]:
    """Return the sorted distinct brands and appliances for the filter selects."""
    brands: set[str] = set()
    appliances: set[str] = set()
    for item in items:
        brands.add(item.brand)
        appliances.add(item.appliance)
    return sorted(brands), sorted(appliances)
