"""JSON loader for the error-code dataset.

The dataset is a JSON array of entry objects with camelCase keys:

    [
        {
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
            "causes": ["..."],
            "steps": ["..."],
            "tools": ["..."],
            "preventiveTips": ["..."],
            "estimatedFixTime": "10-35 minutes",
            "whenToStop": "...",
            "updatedAt": "2026-02-20"
        }
    ]

"id" mirrors "slug" and, like any other unknown key, is ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..core.types import SEVERITIES, Entry

logger = logging.getLogger(__name__)

# JSON key -> Entry attribute
_TEXT_FIELDS = {
    "slug": "slug",
    "code": "code",
    "brand": "brand",
    "brandSlug": "brand_slug",
    "appliance": "appliance",
    "applianceSlug": "appliance_slug",
    "title": "title",
    "summary": "summary",
    "symptom": "symptom",
    "whenToStop": "when_to_stop",
    "estimatedFixTime": "estimated_fix_time",
    "modelFamily": "model_family",
    "updatedAt": "updated_at",
    "severity": "severity",
}
_LIST_FIELDS = {
    "causes": "causes",
    "steps": "steps",
    "tools": "tools",
    "preventiveTips": "preventive_tips",
}


def load_entries(path: Path) -> list[Entry]:
    """Read and parse a dataset file.

    Raises:
        FileNotFoundError: If the dataset does not exist
        ValueError: If the content is not a valid dataset
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing dataset {path}. Run `fixcodes seed` first.")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_entries(data)


def parse_entries(data: Any) -> list[Entry]:
    """Parse decoded JSON into a list of Entry objects.

    Args:
        data: The decoded dataset, expected to be a non-empty list

    Returns:
        Entries in dataset order

    Raises:
        ValueError: If the dataset is empty, not a list, or any entry is
            missing a field or has a field of the wrong type
    """
    if not isinstance(data, list):
        raise ValueError("Invalid dataset: expected a JSON array of entries")
    if not data:
        raise ValueError("No entries found in dataset")

    entries = [parse_entry(item, index) for index, item in enumerate(data)]
    logger.debug("Parsed %d entries", len(entries))
    return entries


def parse_entry(item: Any, index: int = 0) -> Entry:
    """Parse one dataset object into an Entry."""
    if not isinstance(item, dict):
        raise ValueError(f"Invalid entry #{index}: expected an object")

    values: dict[str, Any] = {}
    for key, attr in _TEXT_FIELDS.items():
        value = item.get(key)
        if not isinstance(value, str):
            raise ValueError(f"Invalid entry #{index}: missing or non-string field '{key}'")
        values[attr] = value

    for key, attr in _LIST_FIELDS.items():
        value = item.get(key)
        if not isinstance(value, list) or not all(isinstance(part, str) for part in value):
            raise ValueError(f"Invalid entry #{index}: field '{key}' must be a list of strings")
        values[attr] = tuple(value)

    if values["severity"] not in SEVERITIES:
        raise ValueError(
            f"Invalid entry #{index}: severity '{values['severity']}' is not one of {', '.join(SEVERITIES)}"
        )

    return Entry(**values)
