"""POST /api/exports: ticket description and one-click export links."""

import json
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from transcript_crm.exports import build_exports
from transcript_crm.models.extraction import ExtractedData
from transcript_crm.social_lookup import SocialLookup

from ..auth import verify_password

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api")


@router.post("/exports")
async def create_exports(
    request: Request,
    body: dict[str, Any],
    _auth: None = Depends(verify_password),
):
    """
    Body: {"extracted": <ExtractedData>, "creatorName": optional}.

    With a creator name, verified social profiles are looked up and added
    to the ticket description.
    """
    try:
        extracted = ExtractedData.model_validate(body.get("extracted") or {})
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid payload", "details": json.loads(e.json(include_url=False))},
        )

    profiles = []
    creator_name = (body.get("creatorName") or "").strip()
    if creator_name:
        lookup = await SocialLookup(request.app.state.openai).find_profiles(creator_name)
        profiles = lookup.profiles

    logger.info("exports.built", profile_count=len(profiles), has_title=bool(extracted.meeting_title))
    return build_exports(extracted, profiles)
