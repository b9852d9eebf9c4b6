"""
Granola HTTP API client.

Used when the desktop cache is unavailable and the caller supplied an
API token.
"""

import os
from typing import Any

import httpx

from ..config import config
from ..errors import MeetingSourceError
from ..logging import get_logger
from ..models.meeting import Meeting, Participant

logger = get_logger(__name__)

CLIENT_VERSION = '1.0.0'


def _to_meeting(document: dict[str, Any], transcript: str | None = None) -> Meeting:
    participants = [
        Participant(
            name=a.get('name') or (a.get('email') or '').split('@')[0] or 'Unknown',
            email=a.get('email'),
            is_host=a.get('is_organizer'),
        )
        for a in document.get('attendees') or []
    ]
    return Meeting(
        id=document['id'],
        title=document.get('title') or 'Untitled Meeting',
        date=document.get('meeting_starts_at') or document.get('created_at') or '',
        duration=document.get('duration_minutes'),
        participants=participants,
        transcript=transcript,
        summary=document.get('summary'),
    )


class GranolaApiClient:
    """
    Async Granola API client.

    Configuration via environment variables:
    - GRANOLA_API_BASE: API base URL (default: https://api.granola.ai)
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Granola API client.

        Args:
            token: Granola bearer token
            base_url: API base URL (defaults to GRANOLA_API_BASE)
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        if not token:
            raise ValueError('Granola API token is required')

        self.base_url = base_url or os.getenv('GRANOLA_API_BASE', config.GRANOLA_API_BASE)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                'Authorization': f"Bearer {token}",
                'Content-Type': 'application/json',
                'X-Client-Version': CLIENT_VERSION,
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, body: dict[str, Any]) -> httpx.Response:
        try:
            return await self._client.post(path, json=body)
        except httpx.TransportError as e:
            raise MeetingSourceError(f"Granola API unreachable: {e}", context={'path': path}) from e

    async def list_meetings(self, limit: int = 50) -> list[Meeting]:
        """
        Most recent documents.

        Raises:
            MeetingSourceError: Transport failure or non-2xx response
        """
        response = await self._post(
            '/v2/get-documents',
            {'limit': limit, 'offset': 0, 'include_last_viewed_panel': True},
        )
        if response.is_error:
            logger.error('granola_api.error', status=response.status_code, error=response.text)
            raise MeetingSourceError(
                f"Granola API error: {response.status_code}",
                context={'path': '/v2/get-documents'},
            )

        documents = response.json().get('documents') or []
        return [_to_meeting(doc) for doc in documents]

    async def get_meeting(self, meeting_id: str) -> Meeting | None:
        """One document plus its transcript. None when the document cannot be fetched."""
        response = await self._post('/v1/get-documents-batch', {'document_ids': [meeting_id]})
        if response.is_error:
            logger.warning('granola_api.document_unavailable', meeting_id=meeting_id, status=response.status_code)
            return None

        documents = response.json().get('documents') or []
        if not documents:
            return None

        transcript = None
        transcript_response = await self._post('/v1/get-document-transcript', {'document_id': meeting_id})
        if transcript_response.is_success:
            transcript = transcript_response.json().get('transcript')

        return _to_meeting(documents[0], transcript=transcript)
