"""Shared request handling for the transcript-processing endpoints."""

import json
from typing import Any

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from transcript_crm.models.payload import TranscriptPayload
from transcript_crm.pipeline.extractor import CallDataExtractor
from transcript_crm.pipeline.processor import TranscriptProcessor

logger = structlog.get_logger(__name__)


def build_processor(request: Request) -> TranscriptProcessor:
    """Per-request processor over the app's shared clients."""
    return TranscriptProcessor(
        extractor=CallDataExtractor(request.app.state.openai),
        crm=request.app.state.hubspot,
    )


async def process_payload(request: Request, payload_data: dict[str, Any], source: str) -> JSONResponse:
    """
    Validate a transcript payload, run the processor and pick the status code.

    200 when the run succeeded, 207 when it did not (the body still carries
    the full result), 400 for an invalid payload, 500 for an unexpected error.
    """
    log = logger.bind(source=source, trace_id=request.headers.get("x-request-id"))

    try:
        payload = TranscriptPayload.model_validate(payload_data)
    except ValidationError as e:
        log.warning("process.invalid_payload", error_count=e.error_count())
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid payload",
                "details": json.loads(e.json(include_url=False)),
            },
        )

    log.info("process.received", attendee_count=len(payload.attendees or []))

    try:
        processor = build_processor(request)
        result = await processor.process(payload, trace_id=request.headers.get("x-request-id"))
    except Exception as e:
        log.error("process.failed", error=str(e), error_type=type(e).__name__)
        return JSONResponse(
            status_code=500,
            content={"error": "Processing failed", "message": str(e)},
        )

    log.info(
        "process.complete",
        success=result.success,
        contact_count=len(result.hubspot.contacts),
        deal_id=result.hubspot.deal.id if result.hubspot.deal else None,
        error_count=len(result.errors),
    )
    return JSONResponse(status_code=200 if result.success else 207, content=result.to_dict())
