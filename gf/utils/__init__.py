"""
gf utility modules.

- Logging (stderr-only, loguru)
- Small string helpers (quoting, flag splitting)
"""

# Logger
from .logger import configure_logging, is_debug_enabled, logger

# Helpers
from .helpers import quote_pattern, split_flags, strip_suffix

__all__ = [
    "configure_logging",
    "is_debug_enabled",
    "logger",
    "quote_pattern",
    "split_flags",
    "strip_suffix",
]
