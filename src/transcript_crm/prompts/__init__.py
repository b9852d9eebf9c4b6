"""
LLM prompts for the transcript-to-CRM pipeline.
"""

from .extract_call_data import (
    EXTRACTION_SCHEMA,
    build_extraction_messages,
)
from .social_lookup import (
    PLATFORMS_TO_SEARCH,
    build_social_lookup_messages,
)

__all__ = [
    # Call data extraction
    'EXTRACTION_SCHEMA',
    'build_extraction_messages',
    # Social lookup
    'PLATFORMS_TO_SEARCH',
    'build_social_lookup_messages',
]
