"""Business logic for per-number draw frequency."""

from __future__ import annotations

from collections.abc import Iterable

from lotto649.errors import ValidationError
from lotto649.models.draw import MAX_NUMBER, MIN_NUMBER, Draw
from lotto649.models.frequency import FrequencyEntry, FrequencySummary
from lotto649.state import AppState


def aggregate_frequency(draws: Iterable[Draw]) -> list[FrequencyEntry]:
    """Count main-number occurrences across ``draws``.

    Always returns one entry per number 1..49 in ascending order. Bonus
    numbers are not counted and anything outside 1..49 is skipped.
    """

    counts: dict[int, int] = {n: 0 for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
    for d in draws:
        for n in d.numbers:
            if MIN_NUMBER <= n <= MAX_NUMBER:
                counts[n] += 1

    return [FrequencyEntry(number=n, count=c) for n, c in counts.items()]


def recompute_frequency(state: AppState) -> list[FrequencyEntry]:
    """Rebuild the state's frequency snapshot from the full draw store."""

    with state.lock:
        state.frequency = aggregate_frequency(state.draws.list_all())
        return state.frequency


class FrequencyService:
    """Frequency summary with hot/cold buckets."""

    def summarize(self, draws: Iterable[Draw], *, hot_cold_size: int = 10) -> FrequencySummary:
        k = int(hot_cold_size)
        if not (1 <= k <= MAX_NUMBER):
            raise ValidationError(
                message="Invalid hot_cold_size",
                details={"k": [f"Must be within 1..{MAX_NUMBER}"]},
            )

        draws = list(draws)
        entries = aggregate_frequency(draws)
        values = [e.count for e in entries]

        ordered = sorted(entries, key=lambda e: (e.count, e.number))
        cold_numbers = [e.number for e in ordered[:k]]
        hot_numbers = [e.number for e in sorted(entries, key=lambda e: (-e.count, e.number))[:k]]

        return FrequencySummary(
            total_draws=len(draws),
            entries=entries,
            min_count=min(values),
            max_count=max(values),
            hot_numbers=hot_numbers,
            cold_numbers=cold_numbers,
        )
