"""
FixCodes - static site generator for appliance error-code guides.

This package turns a JSON dataset of troubleshooting entries into a static
website: one page per error code, brand and appliance listings, a
client-side search index, sitemap and robots.txt.

Main entry point is the CLI via the `fixcodes` command.

Example:
    $ fixcodes seed
    $ fixcodes build -o dist/
"""

__all__ = ["__version__", "load_entries", "build_catalog", "search", "slugify"]
__version__ = "0.1.0"

from .core.catalog import build_catalog
from .core.entry import slugify
from .core.search import search
from .input.dataset import load_entries
