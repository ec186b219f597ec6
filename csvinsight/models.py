"""Pydantic request/response models for the CSV Insight REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class QueryRequest(BaseModel):
    """Body for ``POST /api/query``."""

    datasetId: str
    question: str = Field(..., min_length=1, max_length=10000)


class InsightsRequest(BaseModel):
    """Body for ``POST /api/insights``."""

    datasetId: str


class VisualizeRequest(BaseModel):
    """Body for ``POST /api/visualize``."""

    datasetId: str
    analysisGoal: str | None = None


class ChatRequest(BaseModel):
    """Body for ``POST /api/chat``."""

    datasetId: str
    message: str = Field(..., min_length=1, max_length=10000)
    context: str | None = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class DatasetSummary(BaseModel):
    id: str
    filename: str
    rowCount: int
    columnCount: int
    headers: list[str]
    uploadedAt: str


class DatasetListResponse(BaseModel):
    """Response for ``GET /api/datasets``."""

    datasets: list[DatasetSummary]


class DatasetDetailResponse(DatasetSummary):
    """Response for ``GET /api/datasets/{id}``: summary plus first rows."""

    preview: list[list[str]]


class UploadResponse(BaseModel):
    """Response for ``POST /api/upload``."""

    datasetId: str
    filename: str
    rowCount: int
    columnCount: int
    headers: list[str]
    preview: list[list[str]]


class QueryResponse(BaseModel):
    datasetId: str
    question: str
    answer: str


class InsightsResponse(BaseModel):
    datasetId: str
    insights: str


class VisualizeResponse(BaseModel):
    datasetId: str
    visualizations: str


class ChatResponse(BaseModel):
    datasetId: str
    answer: str
    context: str


class SuccessResponse(BaseModel):
    success: bool = True
