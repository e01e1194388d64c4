from __future__ import annotations

import random
from collections import Counter

import pytest

from lotto649.services.frequency_service import aggregate_frequency, recompute_frequency
from lotto649.services.prediction_service import (
    PredictionService,
    sample_distinct,
    weighted_index,
    weights_from_frequency,
)


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def test_weights_are_count_plus_one(make_draw):
    weights = weights_from_frequency(aggregate_frequency([make_draw([7, 8, 9, 10, 11, 12])]))

    assert len(weights) == 49
    assert weights[6] == 2
    assert weights[0] == 1


def test_weighted_index_uses_first_interval_containing_draw():
    # total 4, r = 2.0 -> cumulative sums 1, 2, 3: first strictly above 2.0 is index 2
    assert weighted_index([1, 1, 1, 1], _FixedRandom(0.5)) == 2
    assert weighted_index([1, 1, 1, 1], _FixedRandom(0.0)) == 0


def test_weighted_index_never_picks_zero_weight():
    rng = random.Random(3)
    assert {weighted_index([0, 0, 5, 0], rng) for _ in range(50)} == {2}


@pytest.mark.parametrize("weights", [[0, 0, 0], [], [1, -1, 2]])
def test_weighted_index_rejects_unusable_weights(weights):
    with pytest.raises(ValueError):
        weighted_index(weights, random.Random(0))


def test_sample_returns_six_distinct_sorted_numbers():
    rng = random.Random(11)
    weights = [1] * 49

    for _ in range(200):
        numbers = sample_distinct(weights, 6, rng=rng)
        assert len(numbers) == 6
        assert len(set(numbers)) == 6
        assert numbers == sorted(numbers)
        assert all(1 <= n <= 49 for n in numbers)


@pytest.mark.parametrize("max_retries", [0, 3])
def test_sample_terminates_when_retry_cap_is_hit(max_retries):
    weights = [1_000_000] + [1] * 48

    numbers = sample_distinct(weights, 6, rng=random.Random(5), max_retries=max_retries)

    assert len(set(numbers)) == 6
    assert numbers == sorted(numbers)


def test_sample_rejects_impossible_pick():
    with pytest.raises(ValueError):
        sample_distinct([1, 1, 0], 3, rng=random.Random(0))


def test_uniform_weights_give_roughly_uniform_selection():
    rng = random.Random(42)
    trials = 3000
    counts = Counter()
    for _ in range(trials):
        counts.update(sample_distinct([1] * 49, 6, rng=rng))

    expected = trials * 6 / 49
    assert set(counts) == set(range(1, 50))
    assert all(0.65 * expected < c < 1.35 * expected for c in counts.values())


def test_frequent_number_gets_more_weight_and_more_picks(state, make_draw):
    for _ in range(10):
        state.draws.append(make_draw([7, 20, 21, 22, 23, 24], bonus=1))
    recompute_frequency(state)

    weights = weights_from_frequency(state.frequency)
    assert weights[7 - 1] > weights[1 - 1]

    service = PredictionService()
    picks = Counter()
    for _ in range(500):
        picks.update(service.generate(state).prediction)
    assert picks[7] > picks[1]


def test_generate_prepends_to_history(state):
    service = PredictionService()

    first = service.generate(state)
    second = service.generate(state)

    assert list(state.history.list_all()) == [second, first]
    assert state.prediction == second.prediction
    assert len(second.prediction) == 6
    assert second.date.tzinfo is not None
