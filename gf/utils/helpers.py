"""Small, dependency-free helper functions used across the codebase."""

from __future__ import annotations

import json


def _escape_unprintable(ch: str) -> str:
    code = ord(ch)
    if code > 0xFFFF:
        return f"\\U{code:08x}"
    return f"\\u{code:04x}"


def quote_pattern(pattern: str) -> str:
    """Render a pattern as an unambiguous double-quoted string.

    Quotes and backslashes are escaped, as are control characters
    (``\\n``, ``\\t``, ``\\u001b``...) and anything else that would not be
    visible on a terminal: DEL, zero-width and line/paragraph separators,
    lone surrogates. Printable non-ASCII text is kept.
    """
    quoted = json.dumps(pattern, ensure_ascii=False)
    return "".join(
        ch if ch.isprintable() else _escape_unprintable(ch) for ch in quoted
    )


def split_flags(flags: str | None) -> list[str]:
    """Split an engine flags string on whitespace (no shell quoting)."""
    return flags.split() if flags else []


def strip_suffix(name: str, suffix: str) -> str:
    """Remove ``suffix`` from the end of ``name`` if present."""
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name
