"""Configuration for the transcript-crm FastAPI service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    # Auth
    APP_PASSWORD: str

    # OpenAI
    OPENAI_API_KEY: str
    OPENAI_CHAT_MODEL: str = "gpt-4.1-mini"

    # HubSpot
    HUBSPOT_ACCESS_TOKEN: str
    HUBSPOT_PORTAL_ID: str
    HUBSPOT_API_BASE: str = "https://api.hubapi.com"


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
