"""Business logic for weighted-random predictions.

Each number's weight is its historical count + 1, so a number that was never
drawn can still be predicted. Six distinct numbers are collected by
rejection sampling (a repeat is simply drawn again).
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from datetime import datetime, timezone

from lotto649.models.draw import MIN_NUMBER, PICK_COUNT
from lotto649.models.frequency import FrequencyEntry
from lotto649.models.prediction import PredictionRecord
from lotto649.state import AppState

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 1000


def weights_from_frequency(entries: Sequence[FrequencyEntry]) -> list[int]:
    return [int(e.count) + 1 for e in entries]


def weighted_index(weights: Sequence[float], rng: random.Random) -> int:
    """Pick an index with probability proportional to its weight.

    Draws ``r`` uniformly from [0, total) and returns the first index whose
    running cumulative weight exceeds ``r``.
    """

    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    total = sum(weights)
    if total <= 0:
        raise ValueError("total weight must be positive")

    r = rng.random() * total
    running = 0.0
    last_positive = 0
    for i, w in enumerate(weights):
        if w <= 0:
            continue
        running += w
        last_positive = i
        if r < running:
            return i

    # Float rounding on the final boundary.
    return last_positive


def sample_distinct(
    weights: Sequence[float],
    pick: int = PICK_COUNT,
    rng: random.Random | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> list[int]:
    """Weighted sample of ``pick`` distinct 1-based numbers, sorted ascending.

    Repeats are rejected and redrawn over the full weight array. After
    ``max_retries`` draws, whatever is still missing is drawn from the
    unchosen numbers only.
    """

    rng = rng or random.Random()
    if pick < 0:
        raise ValueError("pick must be non-negative")
    available = sum(1 for w in weights if w > 0)
    if pick > available:
        raise ValueError(f"cannot pick {pick} distinct numbers from {available} positive weights")

    chosen: set[int] = set()
    for _ in range(max(0, int(max_retries))):
        if len(chosen) >= pick:
            break
        chosen.add(weighted_index(weights, rng))

    if len(chosen) < pick:
        logger.warning(
            "Rejection sampling hit retry cap (%d) with %d/%d numbers; drawing the rest without replacement",
            max_retries,
            len(chosen),
            pick,
        )
        remaining = [i for i, w in enumerate(weights) if w > 0 and i not in chosen]
        while len(chosen) < pick:
            j = weighted_index([weights[i] for i in remaining], rng)
            chosen.add(remaining.pop(j))

    return sorted(i + MIN_NUMBER for i in chosen)


class PredictionService:
    """Generate predictions from the current frequency snapshot."""

    def __init__(self, max_retries: int = DEFAULT_MAX_RETRIES) -> None:
        self._max_retries = max_retries

    def generate(self, state: AppState) -> PredictionRecord:
        """Sample six numbers and prepend the result to the history log."""

        with state.lock:
            weights = weights_from_frequency(state.frequency)
            numbers = sample_distinct(weights, PICK_COUNT, rng=state.rng, max_retries=self._max_retries)
            record = PredictionRecord(date=datetime.now(timezone.utc), prediction=tuple(numbers))
            state.history.prepend(record)

        logger.info("Generated prediction %s", numbers)
        return record
