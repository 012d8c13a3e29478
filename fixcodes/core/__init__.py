"""
Core domain models and business logic.

This package contains data types, slug helpers, catalog indexing and the
search engine, independent of how the site is rendered.
"""

from .types import Entry, SearchIndexItem, SearchResult, SEVERITIES
from .entry import build_entry_slug, slug_label, slugify, to_title
from .dedup import collapse_variants
from .search import build_search_index, facet_options, normalize, search, tokenize
from .catalog import Catalog, build_catalog, group_entries, related_entries

__all__ = [
    "Entry",
    "SearchIndexItem",
    "SearchResult",
    "SEVERITIES",
    "build_entry_slug",
    "slug_label",
    "slugify",
    "to_title",
    "collapse_variants",
    "build_search_index",
    "facet_options",
    "normalize",
    "search",
    "tokenize",
    "Catalog",
    "build_catalog",
    "group_entries",
    "related_entries",
]
