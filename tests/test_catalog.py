"""Tests for catalog grouping and slug validation."""

import logging

import pytest

from fixcodes.core.catalog import build_catalog, find_duplicate_slugs, group_entries, related_entries
from fixcodes.input.seed import BRANDS, create_entry


def _sample_entries():
    samsung, lg = BRANDS[0], BRANDS[1]
    return [
        create_entry(lg, "washer", "Series 100", "OE", "Drain timeout detected"),
        create_entry(samsung, "dryer", "Series 100", "D80", "Restricted airflow warning"),
        create_entry(lg, "washer", "Series 200", "OE", "Drain timeout detected"),
        create_entry(lg, "dryer", "Series 100", "F1", "Control relay fault"),
        create_entry(lg, "washer", "Series 100", "IE", "Water fill delay"),
    ]


def test_group_entries_keeps_first_seen_key_order():
    grouped = group_entries(_sample_entries(), lambda entry: entry.brand_slug)

    assert list(grouped) == ["lg", "samsung"]
    assert [entry.code for entry in grouped["lg"]] == ["OE", "OE", "F1", "IE"]


def test_build_catalog_indexes():
    catalog = build_catalog(_sample_entries())

    assert list(catalog.by_brand) == ["lg", "samsung"]
    assert list(catalog.by_appliance) == ["washer", "dryer"]
    assert [item.slug for item in catalog.search_index] == [e.slug for e in catalog.entries]
    assert catalog.search_index[0].to_dict() == {
        "slug": "lg-washer-series100-oe",
        "title": "LG Washer OE Error Code: Causes and Fixes",
        "brand": "LG",
        "brandSlug": "lg",
        "appliance": "washer",
        "applianceSlug": "washer",
        "code": "OE",
        "summary": "Drain timeout detected",
        "severity": catalog.entries[0].severity,
    }


def test_related_entries_same_brand_and_appliance():
    catalog = build_catalog(_sample_entries())
    entry = catalog.entries[0]

    related = related_entries(catalog, entry)

    assert [candidate.slug for candidate in related] == [
        "lg-washer-series200-oe",
        "lg-washer-series100-ie",
    ]
    assert related_entries(catalog, entry, limit=1)[0].slug == "lg-washer-series200-oe"


def test_duplicate_slugs_fail_by_default():
    entries = _sample_entries()
    entries.append(entries[0])

    assert find_duplicate_slugs(entries) == ["lg-washer-series100-oe"]
    with pytest.raises(ValueError, match="Duplicate entry slugs"):
        build_catalog(entries)


def test_duplicate_slugs_warn_keeps_last(caplog, monkeypatch):
    # A CLI run earlier in the session may have detached the package logger.
    monkeypatch.setattr(logging.getLogger("fixcodes"), "propagate", True)
    samsung = BRANDS[0]
    entries = _sample_entries()
    replacement = create_entry(BRANDS[1], "washer", "Series 100", "OE", "Pump blocked")
    entries.append(replacement)

    with caplog.at_level(logging.WARNING, logger="fixcodes"):
        catalog = build_catalog(entries, duplicate_slugs="warn")

    assert len(catalog.entries) == 5
    assert catalog.entries[0].summary == "Pump blocked"
    assert samsung.slug in catalog.by_brand
    assert "Duplicate entry slugs" in caplog.text


def test_unsupported_duplicate_mode():
    with pytest.raises(ValueError, match="Unsupported duplicate_slugs mode"):
        build_catalog(_sample_entries(), duplicate_slugs="ignore")
