"""Human-readable restatement of a resolved schedule instant."""

from datetime import datetime


def format_clock(instant: datetime) -> str:
    """Render the wall-clock time as 'h:mm AM/PM' (e.g. '3:05 PM')."""
    hour = instant.hour % 12 or 12
    suffix = "AM" if instant.hour < 12 else "PM"
    return f"{hour}:{instant.minute:02d} {suffix}"


def format_long_date(instant: datetime) -> str:
    """Render the date as 'Weekday, Mon D' (e.g. 'Monday, Jan 22')."""
    return f"{instant.strftime('%A, %b')} {instant.day}"


def format_interpretation(instant: datetime, now: datetime) -> str:
    """Restate `instant` relative to `now`.

    Minutes, hours and days are floored:
    - under an hour ahead: "In 45 minutes (10:45 AM)"
    - under a day ahead: "In 5 hours (3:00 PM)"
    - one whole day ahead: "Tomorrow at 9:00 AM"
    - anything else, including instants before now: "Monday, Jan 22 at 3:00 PM"
    """
    clock = format_clock(instant)
    diff_minutes = int((instant - now).total_seconds() // 60)
    diff_hours = diff_minutes // 60
    diff_days = diff_hours // 24

    if 0 <= diff_minutes < 60:
        return f"In {diff_minutes} minutes ({clock})"
    if 0 <= diff_hours < 24:
        return f"In {diff_hours} hours ({clock})"
    if diff_days == 1:
        return f"Tomorrow at {clock}"
    return f"{format_long_date(instant)} at {clock}"
