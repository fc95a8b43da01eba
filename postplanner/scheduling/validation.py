"""Schedule window validation.

Independent of parsing: a phrase can parse successfully (e.g. an explicit past
date) and still be rejected here.
"""

from datetime import datetime

from dateutil.relativedelta import relativedelta

from postplanner.models.constants import (
    MAX_SCHEDULE_AHEAD_YEARS,
    PAST_TIME_REASON,
    TOO_FAR_AHEAD_REASON,
)
from postplanner.models.schedule import Validity


def latest_schedule_time(now: datetime) -> datetime:
    """Same wall-clock moment one calendar year later (Feb 29 -> Feb 28)."""
    return now + relativedelta(years=MAX_SCHEDULE_AHEAD_YEARS)


def validate_schedule_time(instant: datetime, now: datetime) -> Validity:
    """Check that `instant` lies in the window (now, now + 1 year].

    Args:
        instant: Candidate schedule time
        now: Reference instant supplied by the caller

    Returns:
        Validity with a reason when the instant is rejected
    """
    if instant <= now:
        return Validity(valid=False, reason=PAST_TIME_REASON)

    if instant > latest_schedule_time(now):
        return Validity(valid=False, reason=TOO_FAR_AHEAD_REASON)

    return Validity(valid=True)
