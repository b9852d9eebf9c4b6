"""GET /api/granola/meetings: browse meetings recorded by Granola."""

import structlog
from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import JSONResponse

from transcript_crm.errors import error_message
from transcript_crm.meetings.source import MeetingSource

from ..auth import verify_password

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/granola")

NO_SOURCE_HINT = "Make sure Granola desktop app is installed, or provide X-Granola-Token header"


def get_meeting_source(x_granola_token: str | None = Header(default=None)) -> MeetingSource:
    """Fresh source per request; the API fallback exists only with a token."""
    return MeetingSource.from_token(x_granola_token)


@router.get("/meetings")
async def list_meetings(
    limit: int = Query(default=50, ge=1, le=500),
    _auth: None = Depends(verify_password),
    source: MeetingSource = Depends(get_meeting_source),
):
    """Meeting summaries, newest first, without transcripts."""
    try:
        meetings = await source.list_meetings(limit)
    except Exception as e:
        logger.error("meetings.list_failed", error=error_message(e))
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to load meetings",
                "message": error_message(e),
                "hint": NO_SOURCE_HINT,
            },
        )
    finally:
        await source.close()

    return {"meetings": [m.to_summary() for m in meetings]}


@router.get("/meetings/{meeting_id}")
async def get_meeting(
    meeting_id: str,
    _auth: None = Depends(verify_password),
    source: MeetingSource = Depends(get_meeting_source),
):
    """One meeting including its transcript."""
    try:
        meeting = await source.get_meeting(meeting_id)
    except Exception as e:
        logger.error("meetings.get_failed", meeting_id=meeting_id, error=error_message(e))
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to load meeting", "message": error_message(e)},
        )
    finally:
        await source.close()

    if meeting is None:
        return JSONResponse(status_code=404, content={"error": "Meeting not found"})
    return {"meeting": meeting.to_dict()}
