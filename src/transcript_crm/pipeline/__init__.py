"""
Transcript processing pipeline components.
"""

from .extractor import CallDataExtractor
from .notes import build_call_note
from .parsing import parse_json_response, parse_model_response, strip_code_fences
from .processor import TranscriptProcessor, reconcile_attendee_hints
from .resolver import (
    ChainedContactResolver,
    ContactResolver,
    EmailContactResolver,
    NameTokenContactResolver,
    default_resolver,
)

__all__ = [
    'CallDataExtractor',
    'TranscriptProcessor',
    'reconcile_attendee_hints',
    'build_call_note',
    'strip_code_fences',
    'parse_json_response',
    'parse_model_response',
    'ContactResolver',
    'EmailContactResolver',
    'NameTokenContactResolver',
    'ChainedContactResolver',
    'default_resolver',
]
