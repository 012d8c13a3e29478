"""Filesystem helpers for the static output directory."""

from __future__ import annotations

import json
from pathlib import Path
import shutil
from typing import Iterable

from ..core.types import SearchIndexItem

STATIC_DIR = Path(__file__).parent / "static"


def prepare_output_dir(output_dir: Path, clean: bool = True) -> None:
    """Create the output directory and copy packaged assets into it.

    Raises:
        ValueError: If cleaning would delete the working directory or one
            of its parents
    """
    if clean and output_dir.exists():
        resolved = output_dir.resolve()
        cwd = Path.cwd().resolve()
        if resolved == cwd or resolved in cwd.parents:
            raise ValueError(f"Refusing to clean {output_dir}: it contains the working directory")
        shutil.rmtree(output_dir)

    assets_dir = output_dir / "assets"
    assets_dir.mkdir(parents=True, exist_ok=True)
    for asset in sorted(STATIC_DIR.iterdir()):
        if asset.is_file():
            shutil.copyfile(asset, assets_dir / asset.name)


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_page(output_dir: Path, relative_path: str, html: str) -> Path:
    """Write a page as ``<relative_path>/index.html`` so it serves at ``/<relative_path>``."""
    relative_path = relative_path.strip("/")
    target = output_dir / relative_path / "index.html" if relative_path else output_dir / "index.html"
    return write_text(target, html)


def dump_search_index(items: Iterable[SearchIndexItem]) -> str:
    """Serialize the search index as a compact JSON array, in index order."""
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False, separators=(",", ":"))
