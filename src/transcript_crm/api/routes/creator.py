"""GET /api/creator/lookup: find a creator's social profiles."""

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from transcript_crm.social_lookup import SocialLookup

from ..auth import verify_password

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/creator")


@router.get("/lookup")
async def lookup_creator(
    request: Request,
    name: str | None = Query(default=None),
    _auth: None = Depends(verify_password),
):
    if not name or not name.strip():
        return JSONResponse(status_code=400, content={"error": "Missing required parameter: name"})

    logger.info("creator.lookup_received", name=name.strip())
    lookup = SocialLookup(request.app.state.openai)
    result = await lookup.find_profiles(name.strip())
    return result.to_dict()
