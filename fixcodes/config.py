"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site identity, canonical URL and consent storage
- DataConfig: Dataset location
- BuildConfig: Output directory and build policies
- SearchConfig: Search index and result list settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml

DEFAULT_SITE_URL = "https://fixappliancecodes.com"


@dataclass
class SiteConfig:
    """Configuration for site identity.

    Attributes:
        name: Site name shown in the header, titles and JSON-LD
        base_url: Canonical origin; when unset, read from ``base_url_env``
        base_url_env: Environment variable holding the canonical origin
        contact_email: Address shown on the contact page
        copyright_year: Year shown in the footer
        consent_storage_key: localStorage key for the cookie-consent choice
    """

    name: str = "FixApplianceCodes.com"
    base_url: str | None = None
    base_url_env: str = "SITE_URL"
    contact_email: str = "flip2dip@gmail.com"
    copyright_year: int = 2026
    consent_storage_key: str = "fixcodes-consent"


@dataclass
class DataConfig:
    """Configuration for the input dataset.

    Attributes:
        path: Dataset JSON file written by ``fixcodes seed``
    """

    path: str = "data/error-codes.json"


@dataclass
class BuildConfig:
    """Configuration for site generation.

    Attributes:
        output_dir: Directory the static site is written to
        clean: Whether to delete the output directory before building
        duplicate_slugs: "error" to fail on slug collisions, "warn" to keep the last entry
        related_limit: Maximum related links on an entry page
        home_brand_limit: Number of brands listed as home page entry points
    """

    output_dir: str = "dist"
    clean: bool = True
    duplicate_slugs: str = "error"
    related_limit: int = 8
    home_brand_limit: int = 10


@dataclass
class SearchConfig:
    """Configuration for the search index and result list.

    Attributes:
        max_results: Maximum rows shown for a search
        embed_index: Embed the index in the home page instead of fetching it
        index_filename: Name of the standalone index artifact
        fallback_text: Guidance shown when nothing matches
    """

    max_results: int = 30
    embed_index: bool = True
    index_filename: str = "search-index.json"
    fallback_text: str = "No direct match. Try brand + code (example: Bosch E15)."


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file (kept out of the published site)
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    data: DataConfig = field(default_factory=DataConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "site": {
            "name": cfg.site.name,
            "base_url": cfg.site.base_url,
            "base_url_env": cfg.site.base_url_env,
            "contact_email": cfg.site.contact_email,
            "copyright_year": cfg.site.copyright_year,
            "consent_storage_key": cfg.site.consent_storage_key,
        },
        "data": {
            "path": cfg.data.path,
        },
        "build": {
            "output_dir": cfg.build.output_dir,
            "clean": cfg.build.clean,
            "duplicate_slugs": cfg.build.duplicate_slugs,
            "related_limit": cfg.build.related_limit,
            "home_brand_limit": cfg.build.home_brand_limit,
        },
        "search": {
            "max_results": cfg.search.max_results,
            "embed_index": cfg.search.embed_index,
            "index_filename": cfg.search.index_filename,
            "fallback_text": cfg.search.fallback_text,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        data=DataConfig(**data["data"]),
        build=BuildConfig(**data["build"]),
        search=SearchConfig(**data["search"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_site_url(cfg: SiteConfig) -> str:
    """Get the canonical origin from inline config, environment, or default.

    The result never ends with a slash so paths can be appended directly.
    """
    url = cfg.base_url or os.getenv(cfg.base_url_env) or DEFAULT_SITE_URL
    return url.rstrip("/")
