"""Data models for postplanner."""

from postplanner.models.schedule import PatternCategory, ParseResult, Validity

__all__ = [
    "PatternCategory",
    "ParseResult",
    "Validity",
]
