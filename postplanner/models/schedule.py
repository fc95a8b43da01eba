"""Schedule interpretation models for postplanner.

ParseResult and Validity are deliberately separate values: a phrase can parse
into a concrete instant that is still not an acceptable schedule target.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from postplanner.models.constants import NO_MATCH_CONFIDENCE, UNPARSED_INTERPRETATION


class PatternCategory(str, Enum):
    """Shape of a recognized temporal expression."""

    RELATIVE_OFFSET = "relative_offset"
    CLOCK_TIME = "clock_time"
    NAMED_DAY = "named_day"
    NAMED_DAY_CLOCK = "named_day_clock"
    WEEKDAY = "weekday"
    WEEKDAY_CLOCK = "weekday_clock"
    SLASH_DATE = "slash_date"
    ISO_DATE = "iso_date"
    NOW = "now"
    EVENING = "evening"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NEXT_WEEK = "next_week"
    NEXT_MONTH = "next_month"


class ParseResult(BaseModel):
    """Outcome of interpreting one schedule phrase."""

    model_config = ConfigDict(frozen=True)

    success: bool
    instant: Optional[datetime] = Field(None, description="Resolved instant, present iff success")
    confidence: float = Field(NO_MATCH_CONFIDENCE, ge=0.0, le=1.0)
    interpretation: str = Field(UNPARSED_INTERPRETATION, description="Human-readable restatement")
    error: Optional[str] = Field(None, description="Failure message, present iff not success")
    category: Optional[PatternCategory] = Field(None, description="Matched pattern shape")

    @model_validator(mode="after")
    def _check_outcome(self) -> "ParseResult":
        if self.success:
            if self.instant is None or self.error is not None:
                raise ValueError("successful result needs an instant and no error")
            if self.confidence <= 0.0:
                raise ValueError("successful result needs a positive confidence")
        else:
            if self.instant is not None or not self.error:
                raise ValueError("failed result needs an error and no instant")
            if self.confidence != NO_MATCH_CONFIDENCE:
                raise ValueError("failed result must have zero confidence")
        return self

    @classmethod
    def succeeded(
        cls,
        instant: datetime,
        *,
        confidence: float,
        interpretation: str,
        category: Optional[PatternCategory] = None,
    ) -> "ParseResult":
        return cls(
            success=True,
            instant=instant,
            confidence=confidence,
            interpretation=interpretation,
            category=category,
        )

    @classmethod
    def failed(cls, error: str) -> "ParseResult":
        return cls(success=False, error=error)


class Validity(BaseModel):
    """Whether an instant is an admissible schedule target."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_reason(self) -> "Validity":
        if self.valid and self.reason is not None:
            raise ValueError("valid result cannot carry a reason")
        if not self.valid and not self.reason:
            raise ValueError("invalid result needs a reason")
        return self
