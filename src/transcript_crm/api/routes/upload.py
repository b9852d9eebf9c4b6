"""POST /api/upload: process a transcript submitted from the operator form."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..auth import verify_password
from ..processing import process_payload

router = APIRouter(prefix="/api")


@router.post("/upload")
async def upload_transcript(
    request: Request,
    payload_data: dict[str, Any],
    _auth: None = Depends(verify_password),
):
    """Attendees may arrive as one comma-separated string."""
    return await process_payload(request, payload_data, source="upload")
