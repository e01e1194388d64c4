from __future__ import annotations

import pytest

from lotto649.errors import ValidationError
from lotto649.services.frequency_service import FrequencyService, aggregate_frequency, recompute_frequency


def test_empty_store_has_49_zero_entries():
    entries = aggregate_frequency([])

    assert [e.number for e in entries] == list(range(1, 50))
    assert all(e.count == 0 for e in entries)


def test_counts_main_numbers_only(make_draw):
    draws = [
        make_draw([1, 2, 3, 4, 5, 6], bonus=1),
        make_draw([1, 7, 8, 9, 10, 11], bonus=49),
    ]

    counts = {e.number: e.count for e in aggregate_frequency(draws)}

    assert counts[1] == 2
    assert counts[11] == 1
    assert counts[49] == 0
    assert sum(counts.values()) == 12


def test_aggregation_is_idempotent(make_draw):
    draws = [make_draw([3, 9, 14, 22, 35, 41]), make_draw([3, 4, 5, 6, 7, 8])]

    assert aggregate_frequency(draws) == aggregate_frequency(draws)


def test_out_of_range_numbers_are_skipped(make_draw):
    entries = aggregate_frequency([make_draw([0, 50, 1, 2, 3, 4])])

    assert len(entries) == 49
    assert sum(e.count for e in entries) == 4


def test_recompute_replaces_snapshot(state, make_draw):
    state.draws.append(make_draw([1, 2, 3, 4, 5, 6]))
    recompute_frequency(state)
    state.draws.append(make_draw([1, 2, 3, 4, 5, 6]))
    entries = recompute_frequency(state)

    assert entries is state.frequency
    assert entries[0].count == 2


def test_summary_hot_and_cold(make_draw):
    draws = [make_draw([7, 8, 9, 10, 11, 12]) for _ in range(3)]
    draws.append(make_draw([7, 13, 14, 15, 16, 17]))

    summary = FrequencyService().summarize(draws, hot_cold_size=3)

    assert summary.total_draws == 4
    assert summary.hot_numbers == [7, 8, 9]
    assert summary.cold_numbers == [1, 2, 3]
    assert summary.min_count == 0
    assert summary.max_count == 4


@pytest.mark.parametrize("k", [0, 50])
def test_summary_rejects_bad_bucket_size(k):
    with pytest.raises(ValidationError):
        FrequencyService().summarize([], hot_cold_size=k)
