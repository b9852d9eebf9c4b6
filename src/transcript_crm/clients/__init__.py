"""
External service clients for the transcript-to-CRM pipeline.
"""

from .crm import CrmClient
from .hubspot_client import HubSpotClient
from .openai_client import OpenAIClient

__all__ = [
    'CrmClient',
    'HubSpotClient',
    'OpenAIClient',
]
