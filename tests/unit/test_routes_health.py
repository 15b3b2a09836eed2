"""
Unit tests for api/routes/health.py
"""
import pytest
from fastapi.testclient import TestClient

from api.main import app
from config.settings import settings


class TestHealthCheck:
    """Test GET /health."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_health_returns_200(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == settings.app_version
        assert isinstance(data["timestamp"], float)
