"""Evaluators that turn a matched phrase into a candidate instant.

Every evaluator is a pure function of (match, now). The reference instant is
always supplied by the caller; nothing here reads a clock. Results carry
now's tzinfo and are computed in now's wall clock.

Rollover: when the literal reading of a phrase lands at or before now (a clock
time that already passed today, "this evening" at 20:00), the candidate moves
forward one day. Explicit calendar dates never roll over.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from postplanner.models.constants import (
    AFTERNOON_TIME,
    DEFAULT_DAY_TIME,
    EVENING_TIME,
    MORNING_TIME,
)
from postplanner.scheduling.errors import PatternTableError, ScheduleParseError


# Monday == 0, matching datetime.weekday()
_WEEKDAY_ALIASES = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1, "tues": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3, "thurs": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

_UNIT_DELTAS = {
    "min": "minutes", "mins": "minutes", "minute": "minutes", "minutes": "minutes",
    "hr": "hours", "hrs": "hours", "hour": "hours", "hours": "hours",
    "day": "days", "days": "days",
    "week": "weeks", "weeks": "weeks",
}

ONE_DAY = timedelta(days=1)


def weekday_index(alias: str) -> int:
    """Map a weekday name or abbreviation to datetime.weekday() numbering."""
    try:
        return _WEEKDAY_ALIASES[alias.lower()]
    except KeyError:
        raise PatternTableError(f"Weekday alias {alias!r} has no weekday index") from None


def to_24_hour(hour: int, minute: int = 0, meridiem: Optional[str] = None) -> Tuple[int, int]:
    """Normalize a clock reading to 24-hour (hour, minute).

    With am/pm the hour must be 1..12 ("12am" is midnight, "12pm" noon);
    without it the hour is read as 24-hour time.
    """
    if minute < 0 or minute > 59:
        raise ScheduleParseError(f"Invalid minute: {minute}")

    if meridiem:
        meridiem = meridiem.lower()
        if hour < 1 or hour > 12:
            raise ScheduleParseError(f"Invalid hour for {meridiem}: {hour}")
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
    elif hour < 0 or hour > 23:
        raise ScheduleParseError(f"Invalid hour: {hour}")

    return hour, minute


def _clock(match: re.Match, default: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
    raw_hour = match.group("hour")
    if raw_hour is None:
        if default is None:
            raise PatternTableError(f"Pattern {match.re.pattern!r} captured no hour")
        return default
    return to_24_hour(int(raw_hour), int(match.group("minute") or 0), match.group("meridiem"))


def at_time(day: datetime, hour: int, minute: int) -> datetime:
    """Same calendar day as `day`, at hour:minute:00."""
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def roll_forward(candidate: datetime, now: datetime) -> datetime:
    """Advance a candidate by one day if it is not strictly after now."""
    if candidate <= now:
        return candidate + ONE_DAY
    return candidate


def next_weekday(now: datetime, weekday: int) -> datetime:
    """Next occurrence of `weekday` strictly after now's date, at the default time.

    If now already falls on that weekday the result is seven days out, never today.
    """
    days_ahead = (weekday - now.weekday()) % 7 or 7
    return at_time(now + timedelta(days=days_ahead), *DEFAULT_DAY_TIME)


def evaluate_relative_offset(match: re.Match, now: datetime) -> datetime:
    """now + N units. N must be positive so the result is strictly after now."""
    unit = match.group("unit")
    try:
        field = _UNIT_DELTAS[unit]
    except KeyError:
        raise PatternTableError(f"Unit {unit!r} has no duration") from None

    try:
        amount = int(match.group("amount"))
    except ValueError as e:
        raise ScheduleParseError(f"Invalid amount: {e}") from e
    if amount <= 0:
        raise ScheduleParseError(f"Offset must be positive, got {amount} {unit}")

    try:
        return now + timedelta(**{field: amount})
    except OverflowError as e:
        raise ScheduleParseError(f"Offset too large: {amount} {unit}") from e


def evaluate_clock_time(match: re.Match, now: datetime) -> datetime:
    return roll_forward(at_time(now, *_clock(match)), now)


def evaluate_tomorrow(match: re.Match, now: datetime) -> datetime:
    return at_time(now + ONE_DAY, *DEFAULT_DAY_TIME)


def evaluate_tomorrow_clock(match: re.Match, now: datetime) -> datetime:
    return at_time(now + ONE_DAY, *_clock(match))


def evaluate_weekday(match: re.Match, now: datetime) -> datetime:
    return next_weekday(now, weekday_index(match.group("weekday")))


def evaluate_weekday_clock(match: re.Match, now: datetime) -> datetime:
    day = next_weekday(now, weekday_index(match.group("weekday")))
    return at_time(day, *_clock(match))


def evaluate_explicit_date(match: re.Match, now: datetime) -> datetime:
    """Exact calendar date (slash or ISO form). Past dates are returned as-is."""
    hour, minute = _clock(match, default=DEFAULT_DAY_TIME)
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            hour,
            minute,
            tzinfo=now.tzinfo,
        )
    except ValueError as e:
        raise ScheduleParseError(f"Invalid date: {e}") from e


def evaluate_now(match: re.Match, now: datetime) -> datetime:
    return now


def evaluate_evening(match: re.Match, now: datetime) -> datetime:
    return roll_forward(at_time(now, *EVENING_TIME), now)


def evaluate_morning(match: re.Match, now: datetime) -> datetime:
    return roll_forward(at_time(now, *MORNING_TIME), now)


def evaluate_afternoon(match: re.Match, now: datetime) -> datetime:
    return roll_forward(at_time(now, *AFTERNOON_TIME), now)


def evaluate_next_week(match: re.Match, now: datetime) -> datetime:
    return at_time(now + timedelta(days=7), *DEFAULT_DAY_TIME)


def evaluate_next_month(match: re.Match, now: datetime) -> datetime:
    """First day of the month after now's month, at the default time."""
    return at_time(now.replace(day=1) + relativedelta(months=1), *DEFAULT_DAY_TIME)
