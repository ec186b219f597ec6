"""In-memory, thread-safe store of uploaded datasets.

A single ``DatasetStore`` instance lives on ``app.state`` for the lifetime of
the process.  Entries are only ever inserted fully built and are never
mutated; a re-upload produces a new id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from uuid import uuid4

from csvinsight.exceptions import NotFoundError
from csvinsight.services.csv_parser import Table

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "uploaded.csv"


@dataclass(frozen=True)
class Dataset:
    """One uploaded CSV and its metadata."""

    id: str
    filename: str
    table: Table
    uploaded_at: datetime

    def summary(self) -> dict:
        """Return the listing view of this dataset (camelCase keys)."""
        return {
            "id": self.id,
            "filename": self.filename,
            "rowCount": self.table.row_count,
            "columnCount": self.table.column_count,
            "headers": list(self.table.headers),
            "uploadedAt": self.uploaded_at.isoformat(),
        }


class DatasetStore:
    """Keyed repository of ``Dataset`` objects.

    Every operation takes the lock for the duration of the dictionary access
    only.  Callers receive immutable ``Dataset`` objects, so prompt building
    and model calls happen outside the lock.
    """

    def __init__(self) -> None:
        self._datasets: dict[str, Dataset] = {}
        self._lock = Lock()

    def create(self, filename: str | None, table: Table) -> str:
        """Register *table* under a fresh id and return the id."""
        dataset = Dataset(
            id=str(uuid4()),
            filename=filename or DEFAULT_FILENAME,
            table=table,
            uploaded_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._datasets[dataset.id] = dataset
        logger.info(
            "Stored dataset %s (%s, %d rows x %d columns)",
            dataset.id,
            dataset.filename,
            table.row_count,
            table.column_count,
        )
        return dataset.id

    def get(self, dataset_id: str) -> Dataset:
        """Return the dataset for *dataset_id* or raise ``NotFoundError``."""
        with self._lock:
            dataset = self._datasets.get(dataset_id)
        if dataset is None:
            raise NotFoundError("Dataset not found")
        return dataset

    def list(self) -> list[dict]:
        """Return summaries of all datasets in insertion order."""
        with self._lock:
            datasets = list(self._datasets.values())
        return [d.summary() for d in datasets]

    def delete(self, dataset_id: str) -> None:
        """Remove *dataset_id* or raise ``NotFoundError``."""
        with self._lock:
            removed = self._datasets.pop(dataset_id, None)
        if removed is None:
            raise NotFoundError("Dataset not found")
        logger.info("Deleted dataset %s", dataset_id)

    def clear(self) -> None:
        """Drop every dataset (process shutdown)."""
        with self._lock:
            self._datasets.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._datasets)

    def __contains__(self, dataset_id: object) -> bool:
        with self._lock:
            return dataset_id in self._datasets
