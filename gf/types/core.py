"""
Core types for gf.

PatternRecord mirrors the JSON stored on disk, one file per pattern.
SearchCommand is what a record resolves to: the engine to run, its flags
and the final pattern string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gf.utils.helpers import quote_pattern, split_flags


class PatternKind(str, Enum):
    """Which of the pattern fields of a record carries the search content."""

    SINGLE = "single"
    MULTIPLE = "multiple"
    NONE = "none"


@dataclass(frozen=True)
class PatternContent:
    """Tagged view over the ``pattern``/``patterns`` fields of a record."""

    kind: PatternKind
    patterns: tuple[str, ...] = ()

    def to_search_string(self) -> str | None:
        """Single pattern as-is, several as a ``(a|b|c)`` alternation group."""
        if self.kind is PatternKind.SINGLE:
            return self.patterns[0]
        if self.kind is PatternKind.MULTIPLE:
            return "(" + "|".join(self.patterns) + ")"
        return None


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class PatternRecord:
    """A saved pattern: engine flags, pattern(s) and the engine to run."""

    flags: str | None = None
    pattern: str | None = None
    patterns: list[str] | None = None
    engine: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PatternRecord:
        """Build a record from a decoded JSON document.

        Unknown keys are ignored and ``null`` counts as absent.

        Raises:
            ValueError: If the document is not an object or a field has the
                wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Pattern record must be a JSON object, got {type(data).__name__}"
            )

        patterns = data.get("patterns")
        if patterns is not None:
            if not isinstance(patterns, list) or not all(
                isinstance(p, str) for p in patterns
            ):
                raise ValueError("'patterns' must be a list of strings")
            patterns = list(patterns)

        return cls(
            flags=_optional_str(data, "flags"),
            pattern=_optional_str(data, "pattern"),
            patterns=patterns,
            engine=_optional_str(data, "engine"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary, omitting absent fields."""
        data: dict[str, Any] = {}
        if self.flags is not None:
            data["flags"] = self.flags
        if self.pattern is not None:
            data["pattern"] = self.pattern
        if self.patterns is not None:
            data["patterns"] = list(self.patterns)
        if self.engine is not None:
            data["engine"] = self.engine
        return data

    @property
    def content(self) -> PatternContent:
        """Search content of this record; ``pattern`` wins over ``patterns``."""
        if self.pattern is not None:
            return PatternContent(PatternKind.SINGLE, (self.pattern,))
        if self.patterns:
            return PatternContent(PatternKind.MULTIPLE, tuple(self.patterns))
        return PatternContent(PatternKind.NONE)

    @property
    def has_conflicting_content(self) -> bool:
        """True when both ``pattern`` and a non-empty ``patterns`` are set."""
        return self.pattern is not None and bool(self.patterns)


@dataclass(frozen=True)
class SearchCommand:
    """A fully resolved engine invocation."""

    engine: str
    flags: str
    pattern: str

    @property
    def flag_args(self) -> list[str]:
        """Flags as discrete arguments (whitespace split)."""
        return split_flags(self.flags)

    def argv(self, files: str, include_files: bool = True) -> list[str]:
        """Argument vector for spawning the engine.

        Args:
            files: Files argument to search.
            include_files: False when input is piped, so the engine reads stdin.
        """
        args = [self.engine, *self.flag_args, self.pattern]
        if include_files:
            args.append(files)
        return args

    def render(self, files: str) -> str:
        """Human-readable command line for dump mode."""
        parts = [self.engine]
        if self.flags:
            parts.append(self.flags)
        parts.append(quote_pattern(self.pattern))
        parts.append(files)
        return " ".join(parts)
