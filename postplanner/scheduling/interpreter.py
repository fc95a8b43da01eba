"""High-level interpretation of natural-language schedule phrases.

This module is the single entrypoint used by the /schedule/parse API.
It must be deterministic: the same (text, now) pair always yields the same
ParseResult. `now` is always supplied by the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from postplanner.models.constants import PARSE_FAILURE_MESSAGE
from postplanner.models.schedule import ParseResult
from postplanner.scheduling.errors import ScheduleParseError
from postplanner.scheduling.formatting import format_interpretation
from postplanner.scheduling.patterns import PATTERN_TABLE, Pattern, match_pattern, normalize_input

logger = logging.getLogger(__name__)


def parse_schedule(
    text: str,
    *,
    now: datetime,
    table: Iterable[Pattern] = PATTERN_TABLE,
) -> ParseResult:
    """Interpret a schedule phrase relative to `now`.

    Args:
        text: Raw user phrase, e.g. "tomorrow at 3pm"
        now: Reference instant; the result carries its tzinfo
        table: Ordered pattern table (first match wins)

    Returns:
        ParseResult. Unmatched or unresolvable phrases give a failed result
        with zero confidence; nothing is raised for user input.

    Note:
        The result is not checked against the scheduling window. Callers run
        validate_schedule_time() on the instant before accepting it.
    """
    normalized = normalize_input(text)
    if not normalized:
        return ParseResult.failed("Schedule input is required")

    found = match_pattern(normalized, table)
    if found is None:
        logger.debug(f"No schedule pattern matched {normalized!r}")
        return ParseResult.failed(PARSE_FAILURE_MESSAGE)

    pattern, match = found
    try:
        instant = pattern.evaluate(match, now)
    except ScheduleParseError as e:
        logger.debug(f"Pattern {pattern.name} matched {normalized!r} but could not resolve: {e}")
        return ParseResult.failed(f"{PARSE_FAILURE_MESSAGE} ({e})")

    logger.debug(f"Pattern {pattern.name} resolved {normalized!r} to {instant.isoformat()}")
    return ParseResult.succeeded(
        instant,
        confidence=pattern.confidence,
        interpretation=format_interpretation(instant, now),
        category=pattern.category,
    )
