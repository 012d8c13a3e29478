"""
Core data types for the error-code site builder.

This module defines the records that flow through a build:
- Entry: One troubleshooting article as stored in the dataset
- SearchIndexItem: The reduced projection of an Entry shipped to the browser
- SearchResult: A search hit with the number of collapsed variants
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SEVERITIES = ("low", "medium", "high")


@dataclass(frozen=True)
class Entry:
    """One structured troubleshooting article.

    Attributes:
        slug: Unique, URL-safe identifier (brand + appliance + model family + code)
        code: Manufacturer error code, e.g. "OE" or "ER IF"
        brand: Brand display name (e.g., "LG")
        brand_slug: URL-safe form of the brand
        appliance: Appliance category display name (e.g., "washer")
        appliance_slug: URL-safe form of the appliance
        title: Page headline
        summary: One-line meaning of the code
        symptom: What the user sees when the code appears
        causes: Likely causes, most likely first
        steps: Ordered fix steps
        tools: Tools the fix may need
        preventive_tips: Ordered prevention advice
        when_to_stop: When to stop DIY and call a technician
        estimated_fix_time: Human-readable duration (e.g., "10-35 minutes")
        model_family: Model family the article targets
        updated_at: Last editorial update as a date string
        severity: One of "low", "medium", "high"
    """

    slug: str
    code: str
    brand: str
    brand_slug: str
    appliance: str
    appliance_slug: str
    title: str
    summary: str
    symptom: str
    causes: tuple[str, ...]
    steps: tuple[str, ...]
    tools: tuple[str, ...]
    preventive_tips: tuple[str, ...]
    when_to_stop: str
    estimated_fix_time: str
    model_family: str
    updated_at: str
    severity: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dataset's camelCase JSON shape."""
        return {
            "id": self.slug,
            "slug": self.slug,
            "brand": self.brand,
            "brandSlug": self.brand_slug,
            "appliance": self.appliance,
            "applianceSlug": self.appliance_slug,
            "modelFamily": self.model_family,
            "code": self.code,
            "title": self.title,
            "summary": self.summary,
            "symptom": self.symptom,
            "severity": self.severity,
            "causes": list(self.causes),
            "steps": list(self.steps),
            "tools": list(self.tools),
            "preventiveTips": list(self.preventive_tips),
            "estimatedFixTime": self.estimated_fix_time,
            "whenToStop": self.when_to_stop,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class SearchIndexItem:
    """The fields of an Entry needed for client-side search.

    This projection is the entire payload shipped to the browser.
    """

    slug: str
    title: str
    brand: str
    brand_slug: str
    appliance: str
    appliance_slug: str
    code: str
    summary: str
    severity: str

    @classmethod
    def from_entry(cls, entry: Entry) -> SearchIndexItem:
        return cls(
            slug=entry.slug,
            title=entry.title,
            brand=entry.brand,
            brand_slug=entry.brand_slug,
            appliance=entry.appliance,
            appliance_slug=entry.appliance_slug,
            code=entry.code,
            summary=entry.summary,
            severity=entry.severity,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "slug": self.slug,
            "title": self.title,
            "brand": self.brand,
            "brandSlug": self.brand_slug,
            "appliance": self.appliance,
            "applianceSlug": self.appliance_slug,
            "code": self.code,
            "summary": self.summary,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class SearchResult:
    """A de-duplicated search hit.

    Attributes:
        item: The first matching item of its (brand, appliance, code) group
        variant_count: Number of matched items collapsed into this group
    """

    item: SearchIndexItem
    variant_count: int = 1

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.item.to_dict())
        data["variantCount"] = self.variant_count
        return data
