"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness only; upstream services are not probed."""
    return {"status": "ok"}
