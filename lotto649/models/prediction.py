"""A generated prediction, as shown in the history list."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PredictionRecord:
    date: datetime
    prediction: tuple[int, ...]
