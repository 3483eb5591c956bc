"""Tests for the health check endpoint."""

from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from minicini.infrastructure.database import get_database


class _UnreachableDatabase:
    async def ping(self) -> bool:
        raise OperationalError("SELECT 1 AS ok", {}, ConnectionRefusedError("db is down"))


@pytest.mark.asyncio
async def test_health_check_returns_200(client):
    """Health endpoint should return 200 with status, db flag and timestamp."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["db"] is True
    assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_health_check_echoes_store_failure(app, client):
    app.dependency_overrides[get_database] = lambda: _UnreachableDatabase()
    try:
        response = await client.get("/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert "db is down" in data["message"]
