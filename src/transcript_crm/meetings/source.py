"""
Composite meeting source: local cache first, API fallback.

Built per request by the HTTP layer. The API fallback exists only when
the caller supplied a Granola token.
"""

from __future__ import annotations

from ..errors import MeetingSourceError
from ..logging import get_logger
from ..models.meeting import Meeting
from .api_client import GranolaApiClient
from .cache import GranolaCacheReader

logger = get_logger(__name__)

NO_SOURCE_MESSAGE = (
    'No Granola data source available. Install the Granola desktop app or provide an API token.'
)


class MeetingSource:
    """Lists and fetches meetings from whichever source has them."""

    def __init__(
        self,
        cache: GranolaCacheReader | None = None,
        api: GranolaApiClient | None = None,
    ):
        self.cache = cache
        self.api = api

    @classmethod
    def from_token(cls, token: str | None = None) -> MeetingSource:
        """Default cache reader, plus an API client when a token is given."""
        return cls(GranolaCacheReader(), GranolaApiClient(token) if token else None)

    async def close(self) -> None:
        if self.api is not None:
            await self.api.close()

    async def list_meetings(self, limit: int = 50) -> list[Meeting]:
        """
        Meetings from the cache, or from the API when the cache has none.

        Raises:
            MeetingSourceError: Neither source produced meetings
        """
        if self.cache is not None:
            try:
                meetings = self.cache.list_meetings(limit)
            except MeetingSourceError as e:
                logger.debug('meeting_source.cache_unavailable', error=e.message)
            else:
                if meetings:
                    logger.info('meeting_source.listed', source='cache', count=len(meetings))
                    return meetings

        if self.api is not None:
            meetings = await self.api.list_meetings(limit)
            logger.info('meeting_source.listed', source='api', count=len(meetings))
            return meetings

        raise MeetingSourceError(NO_SOURCE_MESSAGE)

    async def get_meeting(self, meeting_id: str) -> Meeting | None:
        """The meeting with its transcript, or None when no source has it."""
        if self.cache is not None:
            try:
                meeting = self.cache.get_meeting(meeting_id)
            except MeetingSourceError as e:
                logger.debug('meeting_source.cache_unavailable', error=e.message)
            else:
                if meeting is not None:
                    return meeting

        if self.api is not None:
            return await self.api.get_meeting(meeting_id)

        return None
