"""Exceptions raised while interpreting schedule phrases."""


class ScheduleParseError(ValueError):
    """A phrase matched a known shape but does not denote a real instant.

    Example: "at 13pm" or "2/30/2024". The interpreter turns this into a failed
    ParseResult instead of letting it escape.
    """


class PatternTableError(RuntimeError):
    """The pattern table itself is inconsistent (a programming defect)."""
