"""Tests for the /health endpoint."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from transcript_crm.api.routes.health import router


def _make_app() -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    return app


class TestHealthRoute:
    def test_health_ok(self):
        client = TestClient(_make_app())
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_needs_no_auth(self):
        client = TestClient(_make_app())
        response = client.get("/health", headers={"X-Password": "anything"})
        assert response.status_code == 200
