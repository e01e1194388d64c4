"""Display helpers shared by the HTML page and the JSON API."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

TIMESTAMP_FORMAT = "%b %d, %Y %H:%M"


def join_numbers(numbers: Iterable[int]) -> str:
    return ", ".join(str(int(n)) for n in numbers)


def format_timestamp(value: datetime) -> str:
    """Human-readable local-time timestamp, e.g. ``Oct 19, 2026 14:05``."""

    return value.astimezone().strftime(TIMESTAMP_FORMAT)


def format_prediction_line(date: datetime, numbers: Iterable[int]) -> str:
    return f"{format_timestamp(date)} - {join_numbers(numbers)}"
