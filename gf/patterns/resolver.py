"""Pattern resolution: turn a stored record into an engine invocation.

Stateless and free of I/O. The engine defaults to grep, flags pass through
untouched (splitting happens at spawn time), and the search string is the
record's single pattern or an ``(a|b|c)`` alternation of its patterns.
"""

from __future__ import annotations

from gf.constants import DEFAULT_ENGINE
from gf.types.core import PatternRecord, SearchCommand
from gf.types.errors import NoPatternContentError
from gf.utils.logger import logger


def resolve_engine(record: PatternRecord) -> str:
    """Engine named by the record, or the default engine."""
    return record.engine if record.engine is not None else DEFAULT_ENGINE


def resolve_pattern(record: PatternRecord, source: str, name: str | None = None) -> str:
    """Derive the final search string of a record.

    Args:
        record: Decoded pattern record.
        source: Path of the file the record came from, for error messages.
        name: Pattern name, for error context.

    Raises:
        NoPatternContentError: If the record has neither ``pattern`` nor a
            non-empty ``patterns``.
    """
    search_string = record.content.to_search_string()
    if search_string is None:
        raise NoPatternContentError(source, name=name)

    if record.has_conflicting_content:
        logger.warning(
            f"Pattern file '{source}' sets both 'pattern' and 'patterns'; "
            f"using 'pattern' and ignoring {len(record.patterns or [])} alternative(s)"
        )

    return search_string


def resolve(record: PatternRecord, source: str, name: str | None = None) -> SearchCommand:
    """Resolve a record into a SearchCommand."""
    return SearchCommand(
        engine=resolve_engine(record),
        flags=record.flags or "",
        pattern=resolve_pattern(record, source, name=name),
    )
