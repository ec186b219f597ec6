"""Datasets router -- upload, list, inspect and delete CSV datasets.

Endpoints (all under /api):
- POST   /upload               -> upload_dataset (multipart file)
- GET    /datasets             -> list_datasets
- GET    /datasets/{dataset_id} -> get_dataset
- DELETE /datasets/{dataset_id} -> delete_dataset
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from csvinsight.config import get_settings
from csvinsight.dependencies import get_store
from csvinsight.models import (
    DatasetDetailResponse,
    DatasetListResponse,
    SuccessResponse,
    UploadResponse,
)
from csvinsight.services import analysis_service
from csvinsight.services.dataset_store import DatasetStore

router = APIRouter()

PREVIEW_ROWS = 5


# ---------------------------------------------------------------------------
# POST /api/upload
# ---------------------------------------------------------------------------


@router.post("/upload", status_code=201, response_model=UploadResponse)
async def upload_dataset(
    file: UploadFile = File(...),
    filename: str | None = Form(None),
    store: DatasetStore = Depends(get_store),
) -> UploadResponse:
    """Upload a CSV file and register it as a new dataset."""
    settings = get_settings()

    # 1. Validate file extension
    upload_name = file.filename or ""
    if upload_name and not upload_name.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only .csv files are supported")

    # 2. Validate file size
    max_size = settings.max_upload_size_mb * 1024 * 1024
    content = await file.read()
    if len(content) > max_size:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_size_mb}MB)",
        )

    # 3. Parse and store (MalformedInputError -> 400 via exception handler)
    dataset = analysis_service.ingest(store, content, filename or upload_name or None)
    table = dataset.table
    return UploadResponse(
        datasetId=dataset.id,
        filename=dataset.filename,
        rowCount=table.row_count,
        columnCount=table.column_count,
        headers=list(table.headers),
        preview=[list(row) for row in table.rows[:PREVIEW_ROWS]],
    )


# ---------------------------------------------------------------------------
# GET /api/datasets
# ---------------------------------------------------------------------------


@router.get("/datasets", response_model=DatasetListResponse)
async def list_datasets(store: DatasetStore = Depends(get_store)) -> DatasetListResponse:
    return DatasetListResponse(datasets=store.list())


@router.get("/datasets/{dataset_id}", response_model=DatasetDetailResponse)
async def get_dataset(
    dataset_id: str,
    store: DatasetStore = Depends(get_store),
) -> DatasetDetailResponse:
    dataset = store.get(dataset_id)
    return DatasetDetailResponse(
        **dataset.summary(),
        preview=[list(row) for row in dataset.table.rows[:PREVIEW_ROWS]],
    )


@router.delete("/datasets/{dataset_id}", response_model=SuccessResponse)
async def delete_dataset(
    dataset_id: str,
    store: DatasetStore = Depends(get_store),
) -> SuccessResponse:
    store.delete(dataset_id)
    return SuccessResponse()
