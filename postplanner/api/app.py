"""FastAPI web application for postplanner."""

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, FastAPI, HTTPException, status

from postplanner import __version__
from postplanner.api.rate_limit import enforce_rate_limit
from postplanner.api.schedule_models import (
    ParseScheduleRequest,
    ParseScheduleResponse,
    SchedulingHelpResponse,
)
from postplanner.auth.dependencies import AuthenticatedUser, get_current_user
from postplanner.config import SCHEDULE_TIMEZONE
from postplanner.scheduling import (
    get_example_phrases,
    get_scheduling_suggestions,
    parse_schedule,
    validate_schedule_time,
)

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="postplanner API",
    description="Turns natural-language phrases into post schedule times",
    version=__version__,
)


def get_reference_now() -> datetime:
    """Reference instant for a request. The only clock read in the service."""
    return datetime.now(timezone.utc)


def _resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown time zone: {name}",
        ) from None


def _to_utc_iso(instant: datetime) -> str:
    return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/schedule/parse", response_model=SchedulingHelpResponse)
async def scheduling_help():
    """List example schedule phrases."""
    return SchedulingHelpResponse(
        suggestions=get_scheduling_suggestions(),
        examples=get_example_phrases(),
    )


@app.post(
    "/schedule/parse",
    response_model=ParseScheduleResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(enforce_rate_limit)],
)
async def parse_schedule_phrase(
    request: ParseScheduleRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    now: datetime = Depends(get_reference_now),
):
    """Parse a natural-language schedule phrase into a UTC instant.

    Parse failures and out-of-window instants both come back as
    success=false with suggestions; neither is an HTTP error.
    """
    local_now = now.astimezone(_resolve_timezone(request.timezone or SCHEDULE_TIMEZONE))

    try:
        result = parse_schedule(request.input, now=local_now)
    except Exception as e:
        logger.error(f"Failed to parse schedule for user {user.id}: {type(e).__name__}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to parse schedule",
        )

    if not result.success:
        return ParseScheduleResponse(
            success=False,
            error=result.error,
            interpretation=result.interpretation,
            confidence=result.confidence,
            suggestions=get_scheduling_suggestions(),
        )

    validity = validate_schedule_time(result.instant, local_now)
    if not validity.valid:
        logger.debug(f"Rejected schedule {result.instant.isoformat()} for user {user.id}: {validity.reason}")
        return ParseScheduleResponse(
            success=False,
            error=validity.reason,
            suggestions=get_scheduling_suggestions(),
        )

    return ParseScheduleResponse(
        success=True,
        datetime=_to_utc_iso(result.instant),
        interpretation=result.interpretation,
        confidence=result.confidence,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
