"""Tests for dataset loading and validation."""

import json
from pathlib import Path

import pytest

from fixcodes.input.dataset import load_entries, parse_entries, parse_entry


def _sample_record(**overrides) -> dict:
    record = {
        "id": "lg-washer-series100-oe",
        "slug": "lg-washer-series100-oe",
        "brand": "LG",
        "brandSlug": "lg",
        "appliance": "washer",
        "applianceSlug": "washer",
        "modelFamily": "Series 100",
        "code": "OE",
        "title": "LG Washer OE Error Code: Causes and Fixes",
        "summary": "Drain timeout detected",
        "symptom": "Washer stops cycle and shows OE.",
        "severity": "medium",
        "causes": ["Clogged drain hose."],
        "steps": ["Power-cycle the unit.", "Clean the drain filter."],
        "tools": ["Flashlight"],
        "preventiveTips": ["Clean filters monthly."],
        "estimatedFixTime": "10-35 minutes",
        "whenToStop": "Stop if you see water leaking.",
        "updatedAt": "2026-02-20",
    }
    record.update(overrides)
    return record


def test_parse_entry_maps_camel_case_fields():
    entry = parse_entry(_sample_record())

    assert entry.brand_slug == "lg"
    assert entry.appliance_slug == "washer"
    assert entry.model_family == "Series 100"
    assert entry.preventive_tips == ("Clean filters monthly.",)
    assert entry.steps == ("Power-cycle the unit.", "Clean the drain filter.")
    assert entry.estimated_fix_time == "10-35 minutes"


def test_parse_entries_preserves_order():
    data = [_sample_record(slug="b"), _sample_record(slug="a")]
    assert [entry.slug for entry in parse_entries(data)] == ["b", "a"]


def test_parse_entries_rejects_empty_and_non_list():
    with pytest.raises(ValueError, match="No entries"):
        parse_entries([])
    with pytest.raises(ValueError, match="JSON array"):
        parse_entries({"entries": []})


def test_parse_entries_reports_missing_field_with_index():
    broken = _sample_record()
    del broken["summary"]

    with pytest.raises(ValueError, match=r"#1: missing or non-string field 'summary'"):
        parse_entries([_sample_record(), broken])


def test_parse_entry_rejects_bad_list_field():
    with pytest.raises(ValueError, match="'causes' must be a list of strings"):
        parse_entry(_sample_record(causes="Clogged drain hose."))


def test_parse_entry_rejects_unknown_severity():
    with pytest.raises(ValueError, match="severity 'critical'"):
        parse_entry(_sample_record(severity="critical"))


def test_load_entries_reads_file(tmp_path: Path):
    path = tmp_path / "error-codes.json"
    path.write_text(json.dumps([_sample_record()]), encoding="utf-8")

    entries = load_entries(path)

    assert len(entries) == 1
    assert entries[0].code == "OE"


def test_load_entries_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="fixcodes seed"):
        load_entries(tmp_path / "missing.json")
