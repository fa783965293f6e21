"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint identifies the service."""
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["service"] == "Marketplace Profiles API"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data
        assert data["database"] is None

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "health-probe"})

        assert response.headers["x-request-id"] == "health-probe"
        assert response.headers["x-content-type-options"] == "nosniff"
