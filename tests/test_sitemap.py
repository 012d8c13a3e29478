from fixcodes.core.catalog import build_catalog
from fixcodes.input.seed import BRANDS, create_entry
from fixcodes.output.sitemap import collect_paths, render_robots, render_sitemap


def test_collect_paths_order():
    lg, bosch = BRANDS[1], BRANDS[4]
    catalog = build_catalog(
        [
            create_entry(lg, "washer", "Series 100", "OE", "Drain timeout detected"),
            create_entry(bosch, "dishwasher", "Series 100", "E15", "Leak protection activated"),
        ]
    )

    paths = collect_paths(catalog)

    assert paths[0] == "/"
    assert paths[1:8] == [
        "/about",
        "/privacy",
        "/terms",
        "/contact",
        "/editorial-policy",
        "/brands",
        "/appliances",
    ]
    assert paths[8:] == [
        "/brands/lg",
        "/brands/bosch",
        "/appliances/washer",
        "/appliances/dishwasher",
        "/lg-washer-series100-oe",
        "/bosch-dishwasher-series100-e15",
    ]


def test_render_sitemap_priorities():
    xml = render_sitemap("https://example.com", ["/", "/about"])

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<url><loc>https://example.com/</loc><changefreq>weekly</changefreq><priority>1.0</priority></url>" in xml
    assert "<loc>https://example.com/about</loc><changefreq>weekly</changefreq><priority>0.7</priority>" in xml
    assert xml.endswith("</urlset>")


def test_render_robots():
    assert render_robots("https://example.com") == (
        "User-agent: *\nAllow: /\nSitemap: https://example.com/sitemap.xml\n"
    )
