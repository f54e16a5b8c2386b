"""
Tests for the uniform random number sources.
"""

import pytest

from weightedcategorical import NumpyRandomSource, RandomSource, ReplayRandomSource


def test_numpy_source_stays_in_unit_interval():
    source = NumpyRandomSource(seed=123)

    values = [source.next() for _ in range(1000)]

    assert all(0.0 <= v < 1.0 for v in values)
    assert isinstance(values[0], float)


def test_numpy_source_is_reproducible():
    first = NumpyRandomSource(seed=5)
    second = NumpyRandomSource(seed=5)

    assert [first.next() for _ in range(10)] == [second.next() for _ in range(10)]


def test_numpy_source_reseed():
    source = NumpyRandomSource(seed=1)
    head = [source.next() for _ in range(3)]

    source.reseed(1)

    assert source.seed == 1
    assert [source.next() for _ in range(3)] == head


def test_replay_source_cycles():
    source = ReplayRandomSource([0.1, 0.2])

    assert [source.next() for _ in range(5)] == [0.1, 0.2, 0.1, 0.2, 0.1]

    source.reset()
    assert source.next() == 0.1


@pytest.mark.parametrize("values", [[], [1.0], [0.5, -0.1]])
def test_replay_source_rejects_invalid_values(values):
    with pytest.raises(ValueError):
        ReplayRandomSource(values)


def test_random_source_is_abstract():
    with pytest.raises(TypeError):
        RandomSource()
