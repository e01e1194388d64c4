"""In-memory application state.

One ``AppState`` per Flask app, held in ``app.extensions``. Every mutating
operation runs under ``AppState.lock`` so a threaded WSGI server still sees
each submission/prediction as a single atomic step.
"""

from __future__ import annotations

import random
from threading import RLock

from flask import Flask, current_app

from lotto649.models.draw import MAX_NUMBER, MIN_NUMBER
from lotto649.models.frequency import FrequencyEntry
from lotto649.repositories.draw_repository import DrawRepository
from lotto649.repositories.prediction_repository import PredictionHistoryRepository

STATE_KEY = "lotto_state"


def empty_frequency() -> list[FrequencyEntry]:
    return [FrequencyEntry(number=n, count=0) for n in range(MIN_NUMBER, MAX_NUMBER + 1)]


class AppState:
    """Draw store, current frequency snapshot, prediction history and the sampler's random source."""

    def __init__(
        self,
        draws: DrawRepository | None = None,
        history: PredictionHistoryRepository | None = None,
        seed: int | None = None,
    ) -> None:
        self.lock = RLock()
        self.rng = random.Random(seed)
        self.draws = draws or DrawRepository()
        self.history = history or PredictionHistoryRepository()
        self.frequency: list[FrequencyEntry] = empty_frequency()

    @property
    def prediction(self) -> tuple[int, ...]:
        latest = self.history.latest()
        return latest.prediction if latest is not None else ()

    def reset(self) -> None:
        with self.lock:
            self.draws.clear()
            self.history.clear()
            self.frequency = empty_frequency()


def init_state(app: Flask) -> AppState:
    """Create the app's state container."""

    state = AppState(seed=app.config.get("RANDOM_SEED"))
    app.extensions[STATE_KEY] = state
    return state


def get_state() -> AppState:
    """Get the current app's state."""

    state: AppState | None = current_app.extensions.get(STATE_KEY)
    if state is None:
        raise RuntimeError("Application state not initialized")
    return state
