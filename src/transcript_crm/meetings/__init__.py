"""
Meeting sources: Granola desktop cache and Granola API.
"""

from .api_client import GranolaApiClient
from .cache import GranolaCacheReader, join_transcript, merge_participants
from .source import MeetingSource

__all__ = [
    'GranolaApiClient',
    'GranolaCacheReader',
    'MeetingSource',
    'join_transcript',
    'merge_participants',
]
