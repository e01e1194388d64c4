"""Repository layer for the prediction history log."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from lotto649.models.prediction import PredictionRecord


class PredictionHistoryRepository:
    """Newest-first log of generated predictions."""

    def __init__(self) -> None:
        self._records: deque[PredictionRecord] = deque()

    def prepend(self, record: PredictionRecord) -> PredictionRecord:
        self._records.appendleft(record)
        return record

    def list_all(self) -> Sequence[PredictionRecord]:
        return tuple(self._records)

    def latest(self) -> PredictionRecord | None:
        return self._records[0] if self._records else None

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()
