"""
Tests for health check endpoints.

These tests verify:
- Basic health endpoint returns 200
- Readiness check reports database connection status
"""

from unittest.mock import AsyncMock, patch


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_endpoint_returns_200_when_api_running(self, client):
        """Basic health check should return 200 if API is up."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_docs(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    def test_readiness_returns_healthy_when_mongodb_answers(self, client):
        """Readiness check should report healthy when MongoDB pings."""
        with patch("bookcatalog.routers.health.get_mongo_client") as mock_mongo:
            mock_mongo_client = AsyncMock()
            mock_mongo_client.admin.command = AsyncMock(return_value={"ok": 1})
            mock_mongo.return_value = mock_mongo_client

            response = client.get("/health/ready")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["checks"]["mongodb"] == "healthy"

    def test_readiness_answers_503_when_mongodb_is_unreachable(self, client):
        """Readiness should report degraded with 503 when MongoDB fails."""
        with patch("bookcatalog.routers.health.get_mongo_client") as mock_mongo:
            mock_mongo.side_effect = Exception("Connection refused")

            response = client.get("/health/ready")

            assert response.status_code == 503
            data = response.json()
            assert data["status"] == "degraded"
            assert "unhealthy" in data["checks"]["mongodb"]
            assert data["checks"]["api"] == "healthy"
