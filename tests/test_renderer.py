import dataclasses
import json

import pytest

from fixcodes.config import AppConfig
from fixcodes.core.catalog import build_catalog
from fixcodes.input.seed import BRANDS, create_entry
from fixcodes.output.renderer import STATIC_PAGES, SiteRenderer, build_faq


def _sample_catalog(extra=()):
    samsung, lg, bosch = BRANDS[0], BRANDS[1], BRANDS[4]
    entries = [
        create_entry(lg, "washer", "Series 100", "OE", "Drain timeout detected"),
        create_entry(lg, "washer", "Series 200", "OE", "Drain timeout detected"),
        create_entry(bosch, "dishwasher", "Series 100", "E15", "Leak protection activated"),
        create_entry(samsung, "washer", "Series 100", "E1", "Water level pressure mismatch"),
        create_entry(lg, "dryer", "Series 100", "D80", "Restricted airflow warning"),
        *extra,
    ]
    return build_catalog(entries)


def _renderer(base_url: str = "https://example.com/") -> SiteRenderer:
    cfg = AppConfig()
    cfg.site.base_url = base_url
    return SiteRenderer(cfg)


def _embedded_index(html: str) -> list[dict]:
    marker = '<script id="search-index" type="application/json">'
    payload = html.split(marker, 1)[1].split("</script>", 1)[0]
    return json.loads(payload)


def test_home_embeds_search_index_in_order():
    catalog = _sample_catalog()
    html = _renderer().render_home(catalog)

    assert _embedded_index(html) == [item.to_dict() for item in catalog.search_index]
    assert '<link rel="canonical" href="https://example.com/" />' in html
    assert "https://example.com/?q={search_term_string}" in html


def test_home_lists_sorted_filter_options_and_entry_points():
    html = _renderer().render_home(_sample_catalog())

    brand_select = html.split('<select id="brandFilter">', 1)[1].split("</select>", 1)[0]
    assert brand_select.index('value="Bosch"') < brand_select.index('value="LG"')
    assert brand_select.index('value="LG"') < brand_select.index('value="Samsung"')
    assert '<a href="/brands/lg">Lg (3)</a>' in html
    assert '<a href="/appliances/washer">Washer (3)</a>' in html


def test_home_search_script_settings():
    html = _renderer().render_home(_sample_catalog())

    assert "const maxResults = 30;" in html
    assert '"No direct match. Try brand + code (example: Bosch E15)."' in html
    assert "q.addEventListener('input', runSearch);" in html


def test_home_can_fetch_index_instead_of_embedding():
    cfg = AppConfig()
    cfg.search.embed_index = False
    html = SiteRenderer(cfg).render_home(_sample_catalog())

    assert 'id="search-index"' not in html
    assert 'fetch("/search-index.json")' in html


def test_entry_page_sections_and_faq():
    catalog = _sample_catalog()
    entry = catalog.entries[0]
    html = _renderer().render_entry(catalog, entry)

    assert "<h1>LG Washer OE Error Code: Causes and Fixes</h1>" in html
    assert '<a href="/brands/lg">LG</a>' in html
    assert '<a href="/appliances/washer">Washer</a>' in html
    assert "Model family: Series 100" in html
    assert "What does OE mean on LG washer?" in html
    assert "OE usually indicates: Drain timeout detected." in html
    assert '"@type": "FAQPage"' in html
    # Related: same brand and appliance, not itself
    assert '<a href="/lg-washer-series200-oe">' in html
    assert '<a href="/lg-dryer-series100-d80">' not in html


def test_entry_page_escapes_text():
    base = create_entry(BRANDS[1], "oven", "Series 100", "F1", "Control key input fault")
    hostile = dataclasses.replace(base, title="Oven <script>alert(1)</script>")
    catalog = _sample_catalog(extra=[hostile])
    html = _renderer().render_entry(catalog, hostile)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_build_faq_uses_severity_and_fix_time():
    entry = _sample_catalog().entries[2]
    faq = build_faq(entry)

    assert len(faq) == 3
    assert f"Severity is {entry.severity}." in faq[1]["answer"]
    assert faq[2]["answer"] == "Typical first-pass troubleshooting takes 10-35 minutes."


def test_brand_page_sorted_by_appliance_then_code():
    catalog = _sample_catalog()
    html = _renderer().render_brand("lg", catalog.by_brand["lg"])

    assert "<h1>Lg error code guides</h1>" in html
    assert html.index("<strong>D80</strong> · Dryer") < html.index("<strong>OE</strong> · Washer")


def test_appliance_page_sorted_by_brand_then_code():
    catalog = _sample_catalog()
    html = _renderer().render_appliance("washer", catalog.by_appliance["washer"])

    assert "Browse 3 Washer error code pages" in html
    assert html.index("<strong>LG</strong>") < html.index("<strong>Samsung</strong>")


def test_hub_pages():
    catalog = _sample_catalog()
    renderer = _renderer()

    brands_html = renderer.render_hub("brands", catalog.by_brand)
    assert brands_html.index("/brands/bosch") < brands_html.index("/brands/lg")
    appliances_html = renderer.render_hub("appliances", catalog.by_appliance)
    assert '<a href="/appliances/dishwasher">Dishwasher (1)</a>' in appliances_html

    with pytest.raises(ValueError):
        renderer.render_hub("models", catalog.by_brand)


def test_static_pages_and_not_found():
    renderer = _renderer()
    contact = next(page for page in STATIC_PAGES if page.path == "contact")

    html = renderer.render_static_page(contact)
    assert "mailto:flip2dip@gmail.com" in html
    assert '<link rel="canonical" href="https://example.com/contact" />' in html

    not_found = renderer.render_not_found()
    assert "<h1>Page not found</h1>" in not_found


def test_layout_has_consent_banner_with_storage_key():
    cfg = AppConfig()
    cfg.site.consent_storage_key = "consent-test"
    html = SiteRenderer(cfg).render_not_found()

    assert 'id="consent-banner"' in html
    assert 'const storageKey = "consent-test";' in html


def test_renderer_rejects_negative_max_results():
    cfg = AppConfig()
    cfg.search.max_results = -5

    with pytest.raises(ValueError, match="search.max_results"):
        SiteRenderer(cfg)
