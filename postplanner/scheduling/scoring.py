"""Confidence scoring for matched schedule phrases.

Confidence is a fixed value per pattern category: how unambiguous the phrase
shape is, not how well the text matched.
"""

from typing import Optional

from postplanner.models.constants import (
    CLOCK_TIME_CONFIDENCE,
    DEFAULT_CONFIDENCE,
    ISO_DATE_CONFIDENCE,
    NAMED_TIME_CONFIDENCE,
    NO_MATCH_CONFIDENCE,
    RELATIVE_OFFSET_CONFIDENCE,
    WEEKDAY_CONFIDENCE,
)
from postplanner.models.schedule import PatternCategory


_CATEGORY_CONFIDENCE = {
    PatternCategory.ISO_DATE: ISO_DATE_CONFIDENCE,
    PatternCategory.CLOCK_TIME: CLOCK_TIME_CONFIDENCE,
    PatternCategory.RELATIVE_OFFSET: RELATIVE_OFFSET_CONFIDENCE,
    PatternCategory.WEEKDAY: WEEKDAY_CONFIDENCE,
    PatternCategory.WEEKDAY_CLOCK: WEEKDAY_CONFIDENCE,
    PatternCategory.NAMED_DAY: NAMED_TIME_CONFIDENCE,
    PatternCategory.NAMED_DAY_CLOCK: NAMED_TIME_CONFIDENCE,
    PatternCategory.EVENING: NAMED_TIME_CONFIDENCE,
}


def confidence_for(category: Optional[PatternCategory]) -> float:
    """Get the confidence score for a pattern category.

    Args:
        category: Matched pattern category, or None when nothing matched

    Returns:
        Score in [0.0, 1.0]; 0.0 for no match, 0.6 for any category without
        a dedicated score
    """
    if category is None:
        return NO_MATCH_CONFIDENCE
    return _CATEGORY_CONFIDENCE.get(category, DEFAULT_CONFIDENCE)
