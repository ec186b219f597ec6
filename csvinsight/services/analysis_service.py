"""Analysis service: ingestion and the four model-backed operations.

Coordinates the dataset store, prompt builder and LLM service.  The store
lock is only held inside ``DatasetStore`` calls, so a slow model response
never blocks other requests' dataset operations.
"""

from __future__ import annotations

import logging

from csvinsight.services import csv_parser, llm_service, prompt_builder
from csvinsight.services.conversation import extend_context, resolve_context
from csvinsight.services.dataset_store import Dataset, DatasetStore

logger = logging.getLogger(__name__)


def ingest(store: DatasetStore, raw: bytes, filename: str | None = None) -> Dataset:
    """Decode and parse uploaded bytes, then register the table.

    Raises ``MalformedInputError`` if the file is not usable CSV.
    """
    table = csv_parser.parse(csv_parser.decode(raw))
    dataset_id = store.create(filename, table)
    return store.get(dataset_id)


async def run_query(store: DatasetStore, dataset_id: str, question: str) -> dict:
    dataset = store.get(dataset_id)
    logger.info("query on dataset %s", dataset_id)
    prompt = prompt_builder.build_query_prompt(dataset, question)
    answer = await llm_service.generate(prompt)
    return {"datasetId": dataset_id, "question": question, "answer": answer}


async def run_insights(store: DatasetStore, dataset_id: str) -> dict:
    dataset = store.get(dataset_id)
    logger.info("insights on dataset %s", dataset_id)
    prompt = prompt_builder.build_insights_prompt(dataset)
    insights = await llm_service.generate(prompt)
    return {"datasetId": dataset_id, "insights": insights}


async def run_visualize(
    store: DatasetStore,
    dataset_id: str,
    analysis_goal: str | None = None,
) -> dict:
    dataset = store.get(dataset_id)
    logger.info("visualize on dataset %s", dataset_id)
    prompt = prompt_builder.build_visualize_prompt(dataset, analysis_goal)
    visualizations = await llm_service.generate(prompt)
    return {"datasetId": dataset_id, "visualizations": visualizations}


async def run_chat(
    store: DatasetStore,
    dataset_id: str,
    message: str,
    context: str | None = None,
) -> dict:
    """Run one chat turn and return the reply with the extended transcript."""
    dataset = store.get(dataset_id)
    logger.info("chat on dataset %s", dataset_id)
    prior = resolve_context(context)
    prompt = prompt_builder.build_chat_prompt(dataset, message, prior)
    answer = await llm_service.generate(prompt)
    return {
        "datasetId": dataset_id,
        "answer": answer,
        "context": extend_context(prior, message, answer),
    }
