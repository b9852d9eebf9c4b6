"""
Pydantic models and result types for the transcript-to-CRM pipeline.
"""

from .crm import CrmContact, CrmDeal, NoteTarget
from .extraction import (
    CreativeInfo,
    DealStage,
    ExtractedContact,
    ExtractedData,
    ExtractedDeal,
    ManufacturingInfo,
    Sentiment,
)
from .meeting import Meeting, Participant
from .payload import TranscriptPayload
from .result import ContactSyncResult, CrmSyncSummary, DealSyncResult, ProcessingResult
from .social import SocialLookupResult, SocialProfile

__all__ = [
    # Input
    'TranscriptPayload',
    # Extraction
    'ExtractedContact',
    'ExtractedDeal',
    'ExtractedData',
    'DealStage',
    'Sentiment',
    'ManufacturingInfo',
    'CreativeInfo',
    # CRM records
    'CrmContact',
    'CrmDeal',
    'NoteTarget',
    # Results
    'ContactSyncResult',
    'DealSyncResult',
    'CrmSyncSummary',
    'ProcessingResult',
    # Meetings
    'Meeting',
    'Participant',
    # Social
    'SocialProfile',
    'SocialLookupResult',
]
