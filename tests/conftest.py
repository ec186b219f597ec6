"""Shared pytest fixtures for backend tests.

Provides:
- ``sample_csv``: small CSV text with three data rows
- ``table``: the parsed ``Table`` for ``sample_csv``
- ``store``: an empty ``DatasetStore``
- ``dataset``: ``sample_csv`` stored in ``store``
- ``mock_generate``: AsyncMock replacing the Gemini call
- ``client``: httpx.AsyncClient bound to the app, using ``store``
"""

from __future__ import annotations

import os

# Set required env vars before any app imports.
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
# Ensure CORS allows the test origin (overrides .env which may set production origins).
os.environ["CORS_ORIGINS"] = "http://localhost:5173"

from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from csvinsight.services.csv_parser import Table, parse  # noqa: E402
from csvinsight.services.dataset_store import DatasetStore  # noqa: E402

SAMPLE_CSV = "name,age,city\nAlice,30,Paris\nBob,25,Berlin\nCarol,41,Lisbon\n"


def make_table(row_count: int, column_count: int = 2) -> Table:
    """Return a table with *row_count* numbered rows."""
    headers = [f"col{c}" for c in range(column_count)]
    rows = [[f"r{r}c{c}" for c in range(column_count)] for r in range(row_count)]
    return Table(headers=headers, rows=rows)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def table(sample_csv) -> Table:
    return parse(sample_csv)


@pytest.fixture
def store() -> DatasetStore:
    return DatasetStore()


@pytest.fixture
def dataset(store, table):
    dataset_id = store.create("people.csv", table)
    return store.get(dataset_id)


@pytest.fixture
def mock_generate():
    """Patch ``llm_service.generate`` so no request reaches Gemini."""
    with patch(
        "csvinsight.services.llm_service.generate",
        new=AsyncMock(return_value='{"answer": "42"}'),
    ) as mock:
        yield mock


@pytest_asyncio.fixture
async def client(store):
    """httpx client for the FastAPI app backed by the ``store`` fixture."""
    from csvinsight.main import app

    app.state.dataset_store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
