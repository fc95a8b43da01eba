"""Pattern table and matcher for schedule phrases.

The table is an explicit, ordered tuple of Pattern records. Order is part of
the behavior: the matcher returns the first row whose shape matches, so more
specific shapes must come before broader keyword shapes.

Each row is matched against the whole normalized phrase (re.fullmatch), never
a substring, so "tomorrow at 3pm" cannot be claimed by the bare "tomorrow" row
and "next month" cannot be claimed by the "mon" weekday alias.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional, Tuple

from postplanner.models.schedule import PatternCategory
from postplanner.scheduling import evaluate as ev
from postplanner.scheduling.errors import PatternTableError
from postplanner.scheduling.scoring import confidence_for

Evaluator = Callable[[re.Match, datetime], datetime]


@dataclass(frozen=True)
class Pattern:
    """One recognized phrase shape and the evaluator that resolves it."""

    name: str
    regex: re.Pattern
    category: PatternCategory
    evaluate: Evaluator

    @property
    def confidence(self) -> float:
        return confidence_for(self.category)

    def match(self, text: str) -> Optional[re.Match]:
        return self.regex.fullmatch(text)


# Shared fragments. Group names are what the evaluators read.
_CLOCK = r"(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>am|pm)?"
_OPTIONAL_AT = r"\s+(?:at\s+)?"
_WEEKDAY = (
    r"(?:(?:next|this|on)\s+)?"
    r"(?P<weekday>monday|mon|tuesday|tues|tue|wednesday|wed|thursday|thurs|thu"
    r"|friday|fri|saturday|sat|sunday|sun)"
)
_TOMORROW = r"(?:tomorrow|tmrw)"


def _rule(name: str, shape: str, category: PatternCategory, evaluate: Evaluator) -> Pattern:
    return Pattern(name=name, regex=re.compile(shape, re.I), category=category, evaluate=evaluate)


def build_pattern_table() -> Tuple[Pattern, ...]:
    """Build the ordered table (most to least specific)."""
    table = (
        # Relative offsets
        _rule("in_minutes", r"in\s+(?P<amount>\d+)\s*(?P<unit>minutes|minute|mins|min)",
              PatternCategory.RELATIVE_OFFSET, ev.evaluate_relative_offset),
        _rule("in_hours", r"in\s+(?P<amount>\d+)\s*(?P<unit>hours|hour|hrs|hr)",
              PatternCategory.RELATIVE_OFFSET, ev.evaluate_relative_offset),
        _rule("in_days", r"in\s+(?P<amount>\d+)\s*(?P<unit>days|day)",
              PatternCategory.RELATIVE_OFFSET, ev.evaluate_relative_offset),
        _rule("in_weeks", r"in\s+(?P<amount>\d+)\s*(?P<unit>weeks|week)",
              PatternCategory.RELATIVE_OFFSET, ev.evaluate_relative_offset),
        # Clock time today (rolls to tomorrow once passed)
        _rule("at_clock", r"(?:today\s+)?at\s+" + _CLOCK,
              PatternCategory.CLOCK_TIME, ev.evaluate_clock_time),
        # Named days
        _rule("tomorrow", _TOMORROW,
              PatternCategory.NAMED_DAY, ev.evaluate_tomorrow),
        _rule("tomorrow_at_clock", _TOMORROW + _OPTIONAL_AT + _CLOCK,
              PatternCategory.NAMED_DAY_CLOCK, ev.evaluate_tomorrow_clock),
        _rule("weekday", _WEEKDAY,
              PatternCategory.WEEKDAY, ev.evaluate_weekday),
        _rule("weekday_at_clock", _WEEKDAY + _OPTIONAL_AT + _CLOCK,
              PatternCategory.WEEKDAY_CLOCK, ev.evaluate_weekday_clock),
        # Explicit dates
        _rule("slash_date",
              r"(?:on\s+)?(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})"
              r"(?:" + _OPTIONAL_AT + _CLOCK + r")?",
              PatternCategory.SLASH_DATE, ev.evaluate_explicit_date),
        _rule("iso_date",
              r"(?:on\s+)?(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
              r"(?:(?:t|\s+(?:at\s+)?)" + _CLOCK + r")?",
              PatternCategory.ISO_DATE, ev.evaluate_explicit_date),
        # Keywords
        _rule("now", r"(?:right\s+)?now|immediately|asap",
              PatternCategory.NOW, ev.evaluate_now),
        _rule("this_evening", r"this\s+evening|tonight",
              PatternCategory.EVENING, ev.evaluate_evening),
        _rule("this_morning", r"this\s+morning",
              PatternCategory.MORNING, ev.evaluate_morning),
        _rule("this_afternoon", r"this\s+afternoon",
              PatternCategory.AFTERNOON, ev.evaluate_afternoon),
        _rule("next_week", r"next\s+week",
              PatternCategory.NEXT_WEEK, ev.evaluate_next_week),
        _rule("next_month", r"next\s+month",
              PatternCategory.NEXT_MONTH, ev.evaluate_next_month),
    )

    names = [pattern.name for pattern in table]
    if len(set(names)) != len(names):
        raise PatternTableError(f"Duplicate pattern names in table: {names}")
    return table


PATTERN_TABLE: Tuple[Pattern, ...] = build_pattern_table()


def normalize_input(text: str) -> str:
    """Lower-case, trim, collapse whitespace and drop trailing punctuation."""
    collapsed = " ".join((text or "").lower().split())
    return collapsed.rstrip(".!?").strip()


def match_pattern(
    text: str, table: Iterable[Pattern] = PATTERN_TABLE
) -> Optional[Tuple[Pattern, re.Match]]:
    """Return the first pattern (in table order) matching `text`, with its match.

    `text` is expected to be normalized already. Returns None when nothing matches.
    """
    for pattern in table:
        match = pattern.match(text)
        if match:
            return pattern, match
    return None
