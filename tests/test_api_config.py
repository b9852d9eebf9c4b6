"""Tests for API service configuration."""

import os
from unittest.mock import patch

import pydantic
import pytest

from transcript_crm.api.config import Settings


class TestApiConfig:
    def test_config_loads_from_env(self):
        env = {
            "APP_PASSWORD": "open-sesame",
            "OPENAI_API_KEY": "sk-test-key",
            "OPENAI_CHAT_MODEL": "gpt-4.1",
            "HUBSPOT_ACCESS_TOKEN": "pat-na1-123",
            "HUBSPOT_PORTAL_ID": "4242",
        }
        with patch.dict(os.environ, env, clear=False):
            settings = Settings()
            assert settings.APP_PASSWORD == "open-sesame"
            assert settings.OPENAI_API_KEY == "sk-test-key"
            assert settings.OPENAI_CHAT_MODEL == "gpt-4.1"
            assert settings.HUBSPOT_ACCESS_TOKEN == "pat-na1-123"
            assert settings.HUBSPOT_PORTAL_ID == "4242"

    def test_config_defaults(self):
        env = {
            "APP_PASSWORD": "open-sesame",
            "OPENAI_API_KEY": "sk-test",
            "HUBSPOT_ACCESS_TOKEN": "pat",
            "HUBSPOT_PORTAL_ID": "1",
        }
        with patch.dict(os.environ, env, clear=False):
            os.environ.pop("OPENAI_CHAT_MODEL", None)
            os.environ.pop("HUBSPOT_API_BASE", None)
            settings = Settings()
            assert settings.OPENAI_CHAT_MODEL == "gpt-4.1-mini"
            assert settings.HUBSPOT_API_BASE == "https://api.hubapi.com"

    def test_password_is_required(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk", "HUBSPOT_ACCESS_TOKEN": "pat", "HUBSPOT_PORTAL_ID": "1"}):
            os.environ.pop("APP_PASSWORD", None)
            with pytest.raises(pydantic.ValidationError):
                Settings()
