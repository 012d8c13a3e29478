"""Identity helpers for catalog entries.

Slugs are the stable identifiers used for page paths and for grouping
entries by brand and appliance.
"""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert text to URL-safe slug.

    Args:
        text: The text to slugify

    Returns:
        A lowercase, hyphenated slug; empty when text has no ASCII alphanumerics
    """
    # Replace non-alphanumeric runs with hyphens
    slug = _NON_ALNUM_RE.sub("-", text.lower())
    return slug.strip("-")


def slug_label(slug: str) -> str:
    """Turn a slug back into a display label ("front-load" -> "Front Load")."""
    return " ".join(segment[:1].upper() + segment[1:] for segment in slug.split("-"))


def to_title(text: str) -> str:
    """Capitalize the first character only ("washer" -> "Washer", "ac" -> "Ac")."""
    return text[:1].upper() + text[1:]


def build_entry_slug(brand_slug: str, appliance: str, model_family: str, code: str) -> str:
    """Build the page slug for one brand/appliance/model-family/code combination.

    Whitespace is removed from the model family before slugifying, so
    "Series 100" contributes "series100".

    Examples:
        >>> build_entry_slug("lg", "washer", "Series 100", "OE")
        'lg-washer-series100-oe'
        >>> build_entry_slug("samsung", "refrigerator", "Series 200", "ER IF")
        'samsung-refrigerator-series200-er-if'
    """
    model_tag = re.sub(r"\s+", "", model_family)
    return f"{brand_slug}-{appliance}-{slugify(model_tag)}-{slugify(code)}"
