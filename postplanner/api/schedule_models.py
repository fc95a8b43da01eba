"""Request/response models for schedule endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ParseScheduleRequest(BaseModel):
    """Request model for natural-language schedule parsing."""
    input: str = Field(..., min_length=1, description="Schedule phrase, e.g. 'tomorrow at 3pm'")
    timezone: Optional[str] = Field(
        None, description="IANA time zone the phrase is read in (defaults to SCHEDULE_TIMEZONE)"
    )


class ParseScheduleResponse(BaseModel):
    """Response for schedule parsing.

    Success carries datetime/interpretation/confidence; failure (parse or
    validation) carries error and suggestions.
    """
    success: bool
    datetime: Optional[str] = Field(None, description="Resolved instant, ISO-8601 UTC")
    interpretation: Optional[str] = None
    confidence: Optional[float] = None
    error: Optional[str] = None
    suggestions: Optional[List[str]] = None


class SchedulingExample(BaseModel):
    input: str
    description: str


class SchedulingHelpResponse(BaseModel):
    """Response listing example schedule phrases."""
    suggestions: List[str]
    examples: List[SchedulingExample]
