"""Integration tests for the health endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from httpx import AsyncClient


pytestmark = pytest.mark.integration


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health_returns_healthy(
        self, client: AsyncClient, api_prefix: str
    ) -> None:
        """Should return healthy status with version and environment."""
        response = await client.get(f"{api_prefix}/health")

        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.0.1-test"
        assert data["environment"] == "test"
        assert "timestamp" in data

    async def test_root_returns_service_info(self, client: AsyncClient) -> None:
        """Should describe the service at the root path."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "service": "test-app",
            "version": "0.0.1-test",
            "docs": "/docs",
        }
