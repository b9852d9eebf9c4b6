"""
Configuration management for the transcript-to-CRM pipeline.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)

_DEFAULT_GRANOLA_CACHE = Path.home() / 'Library' / 'Application Support' / 'Granola' / 'cache-v3.json'


class Config:
    """Configuration settings loaded from environment."""

    # OpenAI
    OPENAI_API_KEY: str = os.getenv('OPENAI_API_KEY', '')
    OPENAI_CHAT_MODEL: str = os.getenv('OPENAI_CHAT_MODEL', 'gpt-4.1-mini')
    OPENAI_MAX_TOKENS: int = int(os.getenv('OPENAI_MAX_TOKENS', '2000'))

    # HubSpot
    HUBSPOT_ACCESS_TOKEN: str = os.getenv('HUBSPOT_ACCESS_TOKEN', '')
    HUBSPOT_PORTAL_ID: str = os.getenv('HUBSPOT_PORTAL_ID', '')
    HUBSPOT_API_BASE: str = os.getenv('HUBSPOT_API_BASE', 'https://api.hubapi.com')
    HUBSPOT_TIMEOUT_SECONDS: float = float(os.getenv('HUBSPOT_TIMEOUT_SECONDS', '30'))

    # Granola meeting notes
    GRANOLA_CACHE_PATH: str = os.getenv('GRANOLA_CACHE_PATH', str(_DEFAULT_GRANOLA_CACHE))
    GRANOLA_API_BASE: str = os.getenv('GRANOLA_API_BASE', 'https://api.granola.ai')

    # Extraction
    INTERNAL_COMPANY_NAME: str = os.getenv('INTERNAL_COMPANY_NAME', 'our company')

    # Export targets
    JIRA_BASE_URL: str = os.getenv('JIRA_BASE_URL', '')
    JIRA_PROJECT_ID: str = os.getenv('JIRA_PROJECT_ID', '')
    JIRA_ISSUE_TYPE_ID: str = os.getenv('JIRA_ISSUE_TYPE_ID', '')
    TRELLO_THEMES_BOARD_ID: str = os.getenv('TRELLO_THEMES_BOARD_ID', '')
    TRELLO_ARTWORK_BOARD_ID: str = os.getenv('TRELLO_ARTWORK_BOARD_ID', '')

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_JSON: bool = os.getenv('LOG_JSON', 'false').lower() in ('1', 'true', 'yes')

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate that required configuration is present.

        Returns:
            List of missing required configuration keys
        """
        missing = []
        if not cls.OPENAI_API_KEY:
            missing.append('OPENAI_API_KEY')
        if not cls.HUBSPOT_ACCESS_TOKEN:
            missing.append('HUBSPOT_ACCESS_TOKEN')
        if not cls.HUBSPOT_PORTAL_ID:
            missing.append('HUBSPOT_PORTAL_ID')
        return missing


# Singleton config instance
config = Config()
