"""Analysis router -- model-backed operations on a stored dataset.

Endpoints (all under /api):
- POST /query     -> ad-hoc question
- POST /insights  -> full dataset analysis
- POST /visualize -> chart suggestions
- POST /chat      -> conversational turn with caller-carried context
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from csvinsight.dependencies import get_store
from csvinsight.models import (
    ChatRequest,
    ChatResponse,
    InsightsRequest,
    InsightsResponse,
    QueryRequest,
    QueryResponse,
    VisualizeRequest,
    VisualizeResponse,
)
from csvinsight.services import analysis_service
from csvinsight.services.dataset_store import DatasetStore

router = APIRouter()


@router.post("/query", response_model=QueryResponse)
async def query_dataset(
    body: QueryRequest,
    store: DatasetStore = Depends(get_store),
) -> QueryResponse:
    result = await analysis_service.run_query(store, body.datasetId, body.question)
    return QueryResponse(**result)


@router.post("/insights", response_model=InsightsResponse)
async def dataset_insights(
    body: InsightsRequest,
    store: DatasetStore = Depends(get_store),
) -> InsightsResponse:
    result = await analysis_service.run_insights(store, body.datasetId)
    return InsightsResponse(**result)


@router.post("/visualize", response_model=VisualizeResponse)
async def suggest_visualizations(
    body: VisualizeRequest,
    store: DatasetStore = Depends(get_store),
) -> VisualizeResponse:
    result = await analysis_service.run_visualize(store, body.datasetId, body.analysisGoal)
    return VisualizeResponse(**result)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    store: DatasetStore = Depends(get_store),
) -> ChatResponse:
    """Run one chat turn; the client must send back the returned context next time."""
    result = await analysis_service.run_chat(store, body.datasetId, body.message, body.context)
    return ChatResponse(**result)
