"""Dataset loading and seed generation."""

from .dataset import load_entries, parse_entries, parse_entry
from .seed import generate_entries, write_seed

__all__ = ["load_entries", "parse_entries", "parse_entry", "generate_entries", "write_seed"]
