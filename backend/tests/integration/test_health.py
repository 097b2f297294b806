"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from dashboard.infrastructure.dependencies import build_controller
from dashboard.main import create_app


async def _get_health(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get("/api/v1/health")


@pytest.mark.asyncio
async def test_health_reports_starting_before_controller_is_wired():
    response = await _get_health(create_app())

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "starting"
    assert data["store_revision"] is None
    assert "version" in data
    assert "environment" in data
    assert isinstance(data["backend_configured"], bool)


@pytest.mark.asyncio
async def test_health_reports_store_revision_once_seeded(snapshot):
    app = create_app()
    app.state.controller = build_controller(snapshot=snapshot)

    response = await _get_health(app)

    data = response.json()
    assert data["status"] == "healthy"
    assert data["store_revision"] == 0
