from unittest.mock import MagicMock, patch

from django.db import OperationalError


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_database_status(self, client):
        response = client.get("/health")
        data = response.json()
        assert data["services"]["database"]["status"] == "up"
        assert "response_time_ms" in data["services"]["database"]

    def test_health_check_returns_503_when_database_down(self, client):
        broken = MagicMock()
        broken.ensure_connection.side_effect = OperationalError("connection refused")
        with patch("modules.core.views.connections", {"default": broken}):
            response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["database"] == {"status": "down"}
