"""Tests for the pattern table and matcher.

Table order is part of the behavior (first match wins), so it is asserted directly.
"""

import re
from dataclasses import FrozenInstanceError

import pytest

from postplanner.models.schedule import PatternCategory
from postplanner.scheduling.evaluate import evaluate_now
from postplanner.scheduling.patterns import (
    PATTERN_TABLE,
    Pattern,
    build_pattern_table,
    match_pattern,
    normalize_input,
)


def _matched_name(text):
    found = match_pattern(normalize_input(text))
    return found[0].name if found else None


class TestPatternTable:
    """Test the structure of the ordered pattern table."""

    def test_table_order(self):
        """Specific shapes come before broad keyword shapes."""
        assert [p.name for p in PATTERN_TABLE] == [
            "in_minutes",
            "in_hours",
            "in_days",
            "in_weeks",
            "at_clock",
            "tomorrow",
            "tomorrow_at_clock",
            "weekday",
            "weekday_at_clock",
            "slash_date",
            "iso_date",
            "now",
            "this_evening",
            "this_morning",
            "this_afternoon",
            "next_week",
            "next_month",
        ]

    def test_rebuilding_gives_same_table(self):
        """Building the table is deterministic."""
        rebuilt = build_pattern_table()
        assert [(p.name, p.category) for p in rebuilt] == [(p.name, p.category) for p in PATTERN_TABLE]

    def test_patterns_are_immutable(self):
        """Pattern records cannot be modified after construction."""
        with pytest.raises(FrozenInstanceError):
            PATTERN_TABLE[0].name = "changed"

    def test_confidence_derived_from_category(self):
        """Each pattern's confidence follows its category."""
        by_name = {p.name: p for p in PATTERN_TABLE}
        assert by_name["iso_date"].confidence == 0.95
        assert by_name["at_clock"].confidence == 0.9
        assert by_name["in_hours"].confidence == 0.85
        assert by_name["weekday"].confidence == 0.8
        assert by_name["weekday_at_clock"].confidence == 0.8
        assert by_name["tomorrow"].confidence == 0.75
        assert by_name["next_month"].confidence == 0.6


class TestNormalizeInput:
    """Test normalize_input()."""

    def test_lowercases_and_trims(self):
        assert normalize_input("  Tomorrow  ") == "tomorrow"

    def test_collapses_whitespace(self):
        assert normalize_input("monday   at\t3pm") == "monday at 3pm"

    def test_drops_trailing_punctuation(self):
        assert normalize_input("next week!") == "next week"

    def test_empty(self):
        assert normalize_input("   ") == ""
        assert normalize_input(None) == ""


class TestMatchPattern:
    """Test match_pattern() first-match-wins behavior."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("in 30 minutes", "in_minutes"),
            ("in 5 mins", "in_minutes"),
            ("in 2 hours", "in_hours"),
            ("in 1 hr", "in_hours"),
            ("in 3 days", "in_days"),
            ("in 2 weeks", "in_weeks"),
            ("at 3:30pm", "at_clock"),
            ("at 9am", "at_clock"),
            ("today at 17:45", "at_clock"),
            ("tomorrow", "tomorrow"),
            ("tmrw", "tomorrow"),
            ("tomorrow at 3pm", "tomorrow_at_clock"),
            ("friday", "weekday"),
            ("next monday", "weekday"),
            ("thurs", "weekday"),
            ("monday at 3pm", "weekday_at_clock"),
            ("next monday at 9:30am", "weekday_at_clock"),
            ("fri 5:30pm", "weekday_at_clock"),
            ("12/25/2024", "slash_date"),
            ("12/25/2024 at 10am", "slash_date"),
            ("2024-12-25", "iso_date"),
            ("2024-12-25 10:00", "iso_date"),
            ("2024-12-25T10:00", "iso_date"),
            ("now", "now"),
            ("asap", "now"),
            ("immediately", "now"),
            ("tonight", "this_evening"),
            ("this evening", "this_evening"),
            ("this morning", "this_morning"),
            ("this afternoon", "this_afternoon"),
            ("next week", "next_week"),
            ("next month", "next_month"),
        ],
    )
    def test_matches_expected_pattern(self, text, expected):
        assert _matched_name(text) == expected

    def test_compound_phrase_not_swallowed_by_keyword(self):
        """'tomorrow at 3pm' keeps its clock time instead of matching bare 'tomorrow'."""
        pattern, match = match_pattern("tomorrow at 3pm")
        assert pattern.category == PatternCategory.NAMED_DAY_CLOCK
        assert match.group("hour") == "3"
        assert match.group("meridiem") == "pm"

    def test_next_month_not_claimed_by_weekday_alias(self):
        """'next month' contains 'mon' but is not a weekday phrase."""
        assert _matched_name("next month") == "next_month"

    @pytest.mark.parametrize(
        "text",
        ["banana", "", "post it tomorrow please", "in a while", "someday", "at noon"],
    )
    def test_unmatched_returns_none(self, text):
        assert match_pattern(normalize_input(text)) is None

    def test_first_matching_row_wins(self):
        """When several rows match, the earlier row in the table is returned."""
        catch_all = Pattern(
            name="catch_all",
            regex=re.compile(r".*"),
            category=PatternCategory.NOW,
            evaluate=evaluate_now,
        )
        pattern, _ = match_pattern("next month", [catch_all, *PATTERN_TABLE])
        assert pattern.name == "catch_all"

        pattern, _ = match_pattern("next month", [*PATTERN_TABLE, catch_all])
        assert pattern.name == "next_month"
