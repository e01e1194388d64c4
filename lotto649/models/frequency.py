"""Derived frequency records (never stored on their own)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FrequencyEntry:
    number: int
    count: int


@dataclass(frozen=True)
class FrequencySummary:
    total_draws: int
    entries: list[FrequencyEntry]
    min_count: int
    max_count: int
    hot_numbers: list[int]
    cold_numbers: list[int]
