"""Health check endpoint."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from csvinsight.dependencies import get_store
from csvinsight.services.dataset_store import DatasetStore

router = APIRouter()

_start_time = time.monotonic()


@router.get("")
async def health_check(store: DatasetStore = Depends(get_store)):
    """Return process health and the number of stored datasets."""
    uptime = time.monotonic() - _start_time
    return {
        "status": "ok",
        "uptime_seconds": round(uptime, 1),
        "datasets": len(store),
        "version": "1.0.0",
    }
