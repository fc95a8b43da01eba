"""Constants for postplanner.

This module centralizes the fixed times and scores used by the schedule interpreter.
"""


# Default wall-clock times (hour, minute) for phrases without an explicit clock
DEFAULT_DAY_TIME = (9, 0)
MORNING_TIME = (8, 0)
AFTERNOON_TIME = (14, 0)
EVENING_TIME = (19, 0)

# Validity window: (now, now + MAX_SCHEDULE_AHEAD_YEARS]
MAX_SCHEDULE_AHEAD_YEARS = 1

# Confidence per pattern shape (fixed, not computed from match quality)
ISO_DATE_CONFIDENCE = 0.95
CLOCK_TIME_CONFIDENCE = 0.9
RELATIVE_OFFSET_CONFIDENCE = 0.85
WEEKDAY_CONFIDENCE = 0.8
NAMED_TIME_CONFIDENCE = 0.75
DEFAULT_CONFIDENCE = 0.6
NO_MATCH_CONFIDENCE = 0.0

# Messages
PARSE_FAILURE_MESSAGE = (
    'Could not parse the schedule time. Try formats like "tomorrow at 3pm", '
    '"in 2 hours", or "monday at 9:30am"'
)
UNPARSED_INTERPRETATION = "Unable to parse"
PAST_TIME_REASON = "Schedule time must be in the future"
TOO_FAR_AHEAD_REASON = "Schedule time cannot be more than 1 year in the future"
