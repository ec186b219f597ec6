"""Cross-cutting tests for the FastAPI application.

Covers:
- lifespan creates and clears the dataset store
- CORS headers on responses
- request logging
- unhandled exceptions return the standard error format
- health endpoint
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from csvinsight.main import app, lifespan
from csvinsight.services.dataset_store import DatasetStore


class TestLifespan:
    @pytest.mark.asyncio
    async def test_store_created_and_cleared(self, table):
        async with lifespan(app):
            store = app.state.dataset_store
            assert isinstance(store, DatasetStore)
            store.create("a.csv", table)
            assert len(store) == 1
        assert len(store) == 0


class TestMiddleware:
    @pytest.mark.asyncio
    async def test_cors_headers(self, client):
        response = await client.get("/health", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    @pytest.mark.asyncio
    async def test_cors_preflight_allows_delete(self, client):
        response = await client.options(
            "/api/datasets/abc",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "DELETE",
            },
        )
        assert response.status_code == 200
        assert "DELETE" in response.headers["access-control-allow-methods"]

    @pytest.mark.asyncio
    async def test_request_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="csvinsight.main"):
            await client.get("/health")
        assert any("GET /health 200" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self, store):
        app.state.dataset_store = store
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        with patch.object(DatasetStore, "list", side_effect=RuntimeError("kaboom")):
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.get("/api/datasets")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "details": "kaboom"}


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_ok(self, client, dataset):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["datasets"] == 1
        assert isinstance(body["uptime_seconds"], (int, float))
