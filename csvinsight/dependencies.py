"""FastAPI dependency injection functions."""

from __future__ import annotations

from fastapi import Request

from csvinsight.services.dataset_store import DatasetStore


def get_store(request: Request) -> DatasetStore:
    """Return the process-wide dataset store created in the app lifespan."""
    return request.app.state.dataset_store
