"""POST /webhook: process a transcript pushed by an external tool."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..auth import verify_webhook_token
from ..processing import process_payload

router = APIRouter()


@router.post("/webhook")
async def receive_webhook(
    request: Request,
    payload_data: dict[str, Any],
    _auth: None = Depends(verify_webhook_token),
):
    return await process_payload(request, payload_data, source="webhook")
