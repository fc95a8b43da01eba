"""Natural-language schedule interpreter for postplanner."""

from postplanner.scheduling.interpreter import parse_schedule
from postplanner.scheduling.patterns import PATTERN_TABLE, Pattern, match_pattern, normalize_input
from postplanner.scheduling.scoring import confidence_for
from postplanner.scheduling.formatting import format_interpretation
from postplanner.scheduling.validation import validate_schedule_time
from postplanner.scheduling.suggestions import get_scheduling_suggestions, get_example_phrases
from postplanner.scheduling.errors import ScheduleParseError, PatternTableError

__all__ = [
    "parse_schedule",
    "PATTERN_TABLE",
    "Pattern",
    "match_pattern",
    "normalize_input",
    "confidence_for",
    "format_interpretation",
    "validate_schedule_time",
    "get_scheduling_suggestions",
    "get_example_phrases",
    "ScheduleParseError",
    "PatternTableError",
]
