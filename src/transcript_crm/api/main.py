"""FastAPI application for the transcript-crm service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from transcript_crm.clients.hubspot_client import HubSpotClient
from transcript_crm.clients.openai_client import OpenAIClient

from .config import get_settings
from .routes.creator import router as creator_router
from .routes.exports import router as exports_router
from .routes.health import router as health_router
from .routes.meetings import router as meetings_router
from .routes.upload import router as upload_router
from .routes.webhook import router as webhook_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize persistent clients at startup, clean up at shutdown."""
    settings = get_settings()

    logger.info("lifespan.startup", hubspot_api_base=settings.HUBSPOT_API_BASE)

    # OpenAI: shared by extraction and social lookup
    openai = OpenAIClient(
        api_key=settings.OPENAI_API_KEY,
        chat_model=settings.OPENAI_CHAT_MODEL,
    )

    # HubSpot: one connection pool for all requests
    hubspot = HubSpotClient(
        access_token=settings.HUBSPOT_ACCESS_TOKEN,
        portal_id=settings.HUBSPOT_PORTAL_ID,
        base_url=settings.HUBSPOT_API_BASE,
    )

    # Store on app.state for request handlers
    app.state.openai = openai
    app.state.hubspot = hubspot

    logger.info("lifespan.ready")
    yield

    # Shutdown
    logger.info("lifespan.shutdown")
    await hubspot.close()
    await openai.close()


app = FastAPI(
    title="transcript-crm",
    description="Sales-call transcripts to HubSpot contacts, deals and call notes",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(upload_router)
app.include_router(webhook_router)
app.include_router(meetings_router)
app.include_router(creator_router)
app.include_router(exports_router)
