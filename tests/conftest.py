from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lotto649 import create_app
from lotto649.models.draw import Draw
from lotto649.state import AppState


@pytest.fixture()
def app():
    app = create_app({"TESTING": True, "RANDOM_SEED": 1234, "LOG_LEVEL": "WARNING"})
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def state() -> AppState:
    return AppState(seed=7)


@pytest.fixture()
def make_draw():
    def _make(numbers, bonus=49):
        return Draw(date=datetime(2024, 1, 1, tzinfo=timezone.utc), numbers=tuple(numbers), bonus=bonus)

    return _make
