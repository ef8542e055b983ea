"""
Phase 4 Tests: Pattern Resolver

Engine defaulting, single vs. alternation pattern strings, flag
pass-through and rejection of records without content.
"""

import pytest

from gf.constants import DEFAULT_ENGINE
from gf.patterns import resolve, resolve_engine, resolve_pattern
from gf.types import NoPatternContentError, PatternRecord, SearchCommand

SOURCE = "/home/user/.gf/example.json"


class TestResolveEngine:

    def test_default_engine(self):
        assert resolve_engine(PatternRecord(pattern="x")) == DEFAULT_ENGINE == "grep"

    def test_record_engine(self):
        assert resolve_engine(PatternRecord(pattern="x", engine="rg")) == "rg"


class TestResolvePattern:

    def test_single_pattern(self):
        assert resolve_pattern(PatternRecord(pattern="search-pattern"), SOURCE) == "search-pattern"

    def test_alternation(self):
        record = PatternRecord(patterns=["a", "b", "c"])
        assert resolve_pattern(record, SOURCE) == "(a|b|c)"

    def test_single_element_alternation(self):
        assert resolve_pattern(PatternRecord(patterns=["only"]), SOURCE) == "(only)"

    def test_pattern_takes_precedence(self, log_messages):
        """'pattern' wins, and the ignored list is reported."""
        record = PatternRecord(pattern="x", patterns=["a", "b"])

        assert resolve_pattern(record, SOURCE) == "x"
        assert any("sets both 'pattern' and 'patterns'" in m for m in log_messages)

    def test_no_warning_for_plain_record(self, log_messages):
        resolve_pattern(PatternRecord(pattern="x"), SOURCE)
        assert not any("sets both" in m for m in log_messages)

    @pytest.mark.parametrize(
        "record",
        [PatternRecord(), PatternRecord(patterns=[]), PatternRecord(flags="-i", engine="rg")],
    )
    def test_no_content(self, record):
        with pytest.raises(NoPatternContentError) as exc_info:
            resolve_pattern(record, SOURCE, name="example")

        assert exc_info.value.user_message == f"Pattern file '{SOURCE}' contains no pattern(s)"
        assert exc_info.value.context.pattern_name == "example"


class TestResolve:

    def test_full_record(self):
        record = PatternRecord(flags="-Hnri", pattern="search-pattern", engine="rg")
        assert resolve(record, SOURCE) == SearchCommand(
            engine="rg", flags="-Hnri", pattern="search-pattern"
        )

    def test_flags_passed_verbatim(self):
        """Flags are not split or trimmed at this stage."""
        command = resolve(PatternRecord(flags=" -H  -n ", pattern="x"), SOURCE)
        assert command.flags == " -H  -n "

    def test_absent_flags_become_empty(self):
        assert resolve(PatternRecord(pattern="x"), SOURCE).flags == ""
