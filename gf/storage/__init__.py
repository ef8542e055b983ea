"""Pattern storage: one JSON file per saved pattern."""

from .pattern_store import PatternStore, normalize_name, resolve_pattern_dir, validate_name

__all__ = [
    "PatternStore",
    "normalize_name",
    "resolve_pattern_dir",
    "validate_name",
]
