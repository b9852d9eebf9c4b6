"""
Transcript CRM Pipeline

Turns sales-call transcripts into HubSpot contacts, deals and call notes,
with OpenAI-powered extraction and best-effort partial-failure reporting.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .pipeline import (
    TranscriptProcessor,
    CallDataExtractor,
    ContactResolver,
    EmailContactResolver,
    NameTokenContactResolver,
    ChainedContactResolver,
    build_call_note,
)
from .models import (
    TranscriptPayload,
    ExtractedData,
    ProcessingResult,
)
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
    PipelineTimer,
)
from .errors import (
    TranscriptCrmError,
    PipelineError,
    ExtractionError,
    OpenAIError,
    CrmApiError,
    MeetingSourceError,
)

__all__ = [
    # Version
    '__version__',
    # Main Pipeline
    'TranscriptProcessor',
    # Components
    'CallDataExtractor',
    'ContactResolver',
    'EmailContactResolver',
    'NameTokenContactResolver',
    'ChainedContactResolver',
    'build_call_note',
    # Models
    'TranscriptPayload',
    'ExtractedData',
    'ProcessingResult',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    'PipelineTimer',
    # Errors
    'TranscriptCrmError',
    'PipelineError',
    'ExtractionError',
    'OpenAIError',
    'CrmApiError',
    'MeetingSourceError',
]
