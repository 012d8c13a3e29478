"""
HTML page rendering with Jinja2.

Every page extends ``templates/base.html``, which provides the head
metadata (canonical URL, Open Graph, JSON-LD), the site header and footer
and the cookie-consent banner. Templates are autoescaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..config import AppConfig, get_site_url
from ..core.catalog import Catalog, related_entries
from ..core.entry import slug_label
from ..core.search import facet_options
from ..core.types import Entry

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class StaticPage:
    path: str
    title: str
    template: str


STATIC_PAGES = (
    StaticPage("about", "About FixApplianceCodes.com", "pages/about.html"),
    StaticPage("editorial-policy", "Editorial Policy", "pages/editorial_policy.html"),
    StaticPage("privacy", "Privacy Policy", "pages/privacy.html"),
    StaticPage("terms", "Terms of Use", "pages/terms.html"),
    StaticPage("contact", "Contact", "pages/contact.html"),
)


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["slug_label"] = slug_label
    # Keep dataset key order in embedded JSON.
    env.policies["json.dumps_kwargs"] = {"sort_keys": False, "ensure_ascii": False}
    return env


def build_faq(entry: Entry) -> list[dict[str, str]]:
    return [
        {
            "question": f"What does {entry.code} mean on {entry.brand} {entry.appliance}?",
            "answer": f"{entry.code} usually indicates: {entry.summary}.",
        },
        {
            "question": f"Can I keep using the appliance with {entry.code}?",
            "answer": f"Use caution. Severity is {entry.severity}. {entry.when_to_stop}",
        },
        {
            "question": "How long does this fix usually take?",
            "answer": f"Typical first-pass troubleshooting takes {entry.estimated_fix_time}.",
        },
    ]


class SiteRenderer:
    """Renders every page type of the site to HTML strings."""

    def __init__(self, cfg: AppConfig, env: Environment | None = None):
        if cfg.search.max_results < 0:
            raise ValueError(
                f"search.max_results must be zero or greater, got {cfg.search.max_results}"
            )
        self._cfg = cfg
        self._env = env or build_environment()
        self.site_url = get_site_url(cfg.site)

    def _render(
        self,
        template: str,
        *,
        title: str,
        description: str,
        canonical_path: str,
        json_ld: list[dict[str, Any]] | None = None,
        **context: Any,
    ) -> str:
        return self._env.get_template(template).render(
            site=self._cfg.site,
            site_url=self.site_url,
            title=title,
            description=description,
            canonical_url=f"{self.site_url}{canonical_path}",
            json_ld=json_ld or [],
            **context,
        )

    def render_home(self, catalog: Catalog) -> str:
        brands, appliances = facet_options(catalog.search_index)
        search_cfg = self._cfg.search
        brand_slugs = list(catalog.by_brand)[: self._cfg.build.home_brand_limit]
        return self._render(
            "home.html",
            title=f"{self._cfg.site.name} | Appliance Error Code Fix Guides",
            description=(
                "Find model-specific appliance error code fixes in seconds. High-intent "
                "troubleshooting pages for washers, dishwashers, dryers, AC units, "
                "refrigerators, and ovens."
            ),
            canonical_path="/",
            json_ld=[
                {
                    "@context": "https://schema.org",
                    "@type": "WebSite",
                    "name": self._cfg.site.name,
                    "url": f"{self.site_url}/",
                    "potentialAction": {
                        "@type": "SearchAction",
                        "target": f"{self.site_url}/?q={{search_term_string}}",
                        "query-input": "required name=search_term_string",
                    },
                }
            ],
            brands=brands,
            appliances=appliances,
            brand_groups=[(slug, len(catalog.by_brand[slug])) for slug in brand_slugs],
            appliance_groups=[(slug, len(items)) for slug, items in catalog.by_appliance.items()],
            search_index=[item.to_dict() for item in catalog.search_index],
            embed_index=search_cfg.embed_index,
            index_filename=search_cfg.index_filename,
            max_results=search_cfg.max_results,
            fallback_text=search_cfg.fallback_text,
        )

    def render_entry(self, catalog: Catalog, entry: Entry) -> str:
        faq = build_faq(entry)
        return self._render(
            "entry.html",
            title=entry.title,
            description=(
                f"{entry.summary} Fast troubleshooting steps, causes, and safety notes for "
                f"{entry.brand} {entry.appliance} {entry.model_family}."
            ),
            canonical_path=f"/{entry.slug}",
            json_ld=[
                {
                    "@context": "https://schema.org",
                    "@type": "Article",
                    "headline": entry.title,
                    "description": entry.summary,
                    "dateModified": entry.updated_at,
                    "author": {
                        "@type": "Organization",
                        "name": f"{self._cfg.site.name} Editorial Team",
                    },
                    "mainEntityOfPage": f"{self.site_url}/{entry.slug}",
                },
                {
                    "@context": "https://schema.org",
                    "@type": "FAQPage",
                    "mainEntity": [
                        {
                            "@type": "Question",
                            "name": item["question"],
                            "acceptedAnswer": {"@type": "Answer", "text": item["answer"]},
                        }
                        for item in faq
                    ],
                },
            ],
            entry=entry,
            faq=faq,
            related=related_entries(catalog, entry, self._cfg.build.related_limit),
        )

    def render_brand(self, brand_slug: str, entries: list[Entry]) -> str:
        label = slug_label(brand_slug)
        items = sorted(entries, key=lambda e: (e.appliance.casefold(), e.code.casefold()))
        return self._render(
            "group.html",
            title=f"{label} Error Code Guides",
            description=f"Browse {len(entries)} {label} troubleshooting pages by appliance and code.",
            canonical_path=f"/brands/{brand_slug}",
            heading=f"{label} error code guides",
            lede="Model-family pages with structured troubleshooting steps.",
            rows=[(entry, entry.code, slug_label(entry.appliance_slug)) for entry in items],
        )

    def render_appliance(self, appliance_slug: str, entries: list[Entry]) -> str:
        label = slug_label(appliance_slug)
        items = sorted(entries, key=lambda e: (e.brand.casefold(), e.code.casefold()))
        return self._render(
            "group.html",
            title=f"{label} Error Code Guides",
            description=f"Browse {len(entries)} {label} error code pages by brand and model family.",
            canonical_path=f"/appliances/{appliance_slug}",
            heading=f"{label} error code guides",
            lede="Brand and model-family specific troubleshooting pages.",
            rows=[(entry, entry.brand, entry.code) for entry in items],
        )

    def render_hub(self, kind: str, groups: dict[str, list[Entry]]) -> str:
        """Render the ``/brands`` or ``/appliances`` listing."""
        if kind == "brands":
            title, heading, noun = "All Brands", "All brands", "brands"
        elif kind == "appliances":
            title, heading, noun = "All Appliances", "All appliances", "appliance categories"
        else:
            raise ValueError("Unsupported hub kind. Use 'brands' or 'appliances'.")
        return self._render(
            "hub.html",
            title=title,
            description=f"Browse all {noun} available on {self._cfg.site.name}.",
            canonical_path=f"/{kind}",
            heading=heading,
            kind=kind,
            groups=[(slug, len(groups[slug])) for slug in sorted(groups)],
        )

    def render_static_page(self, page: StaticPage) -> str:
        return self._render(
            page.template,
            title=page.title,
            description=page.title,
            canonical_path=f"/{page.path}",
        )

    def render_not_found(self) -> str:
        return self._render(
            "not_found.html",
            title="Page not found",
            description="The page you requested does not exist.",
            canonical_path="/404",
        )
