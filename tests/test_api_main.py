"""Tests for the FastAPI app startup/shutdown and route wiring."""

from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient


def _settings() -> MagicMock:
    return MagicMock(
        APP_PASSWORD="open-sesame",
        OPENAI_API_KEY="sk-test",
        OPENAI_CHAT_MODEL="gpt-4.1-mini",
        HUBSPOT_ACCESS_TOKEN="pat",
        HUBSPOT_PORTAL_ID="4242",
        HUBSPOT_API_BASE="https://api.hubapi.com",
    )


class TestAppRouteWiring:
    @patch("transcript_crm.api.main.get_settings")
    @patch("transcript_crm.api.main.HubSpotClient")
    @patch("transcript_crm.api.main.OpenAIClient")
    def test_lifespan_builds_and_closes_clients(self, mock_openai, mock_hubspot, mock_settings):
        mock_settings.return_value = _settings()
        mock_openai_instance = AsyncMock()
        mock_openai.return_value = mock_openai_instance
        mock_hubspot_instance = AsyncMock()
        mock_hubspot.return_value = mock_hubspot_instance

        from transcript_crm.api.main import app

        with TestClient(app) as client:
            resp = client.get("/health")
            assert resp.status_code == 200
            assert app.state.openai is mock_openai_instance
            assert app.state.hubspot is mock_hubspot_instance

        mock_hubspot.assert_called_once_with(
            access_token="pat",
            portal_id="4242",
            base_url="https://api.hubapi.com",
        )
        mock_openai.assert_called_once_with(api_key="sk-test", chat_model="gpt-4.1-mini")
        mock_hubspot_instance.close.assert_awaited_once()
        mock_openai_instance.close.assert_awaited_once()

    @patch("transcript_crm.api.main.get_settings")
    @patch("transcript_crm.api.main.HubSpotClient")
    @patch("transcript_crm.api.main.OpenAIClient")
    def test_upload_route_requires_auth(self, mock_openai, mock_hubspot, mock_settings):
        mock_settings.return_value = _settings()
        mock_openai.return_value = AsyncMock()
        mock_hubspot.return_value = AsyncMock()

        from transcript_crm.api.main import app

        with patch("transcript_crm.api.auth.get_settings", return_value=_settings()):
            with TestClient(app) as client:
                resp = client.post("/api/upload", json={"transcript": "hi"})
        assert resp.status_code == 401

    @patch("transcript_crm.api.main.get_settings")
    @patch("transcript_crm.api.main.HubSpotClient")
    @patch("transcript_crm.api.main.OpenAIClient")
    def test_all_routes_registered(self, mock_openai, mock_hubspot, mock_settings):
        mock_settings.return_value = _settings()
        mock_openai.return_value = AsyncMock()
        mock_hubspot.return_value = AsyncMock()

        from transcript_crm.api.main import app

        protected = [
            ("POST", "/api/upload"),
            ("POST", "/webhook"),
            ("GET", "/api/granola/meetings"),
            ("GET", "/api/granola/meetings/m1"),
            ("GET", "/api/creator/lookup?name=x"),
            ("POST", "/api/exports"),
        ]

        with patch("transcript_crm.api.auth.get_settings", return_value=_settings()):
            with TestClient(app) as client:
                assert client.get("/health").status_code == 200
                for method, url in protected:
                    json = {} if method == "POST" else None
                    resp = client.request(method, url, json=json)
                    assert resp.status_code == 401, url
