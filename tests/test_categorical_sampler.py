"""
Tests for CategoricalSampler and the Sampleable dispatch helpers.
"""

from collections import Counter

import pytest

from weightedcategorical import (
    CategoricalSampler,
    NotNormalizedError,
    NumpyRandomSource,
    ReplayRandomSource,
    Sampleable,
    WeightedDistribution,
    sample_all,
)


@pytest.mark.parametrize("count", [1, 2, 4, 8])
def test_uniform_fast_path_scales_random_value(count):
    """With r = i/N every equal-weight option i is returned exactly once."""
    values = [f"option_{i}" for i in range(count)]
    dist = WeightedDistribution()
    dist.set_options(values)
    source = ReplayRandomSource([i / count for i in range(count)])

    sampler = CategoricalSampler(dist, source)

    assert sampler.sample_many(count) == values


def test_uniform_fast_path_ignores_missing_table():
    dist = WeightedDistribution()
    dist.add_option("a")
    dist.add_option("b", 100.0)
    assert not dist.is_normalized

    sampler = CategoricalSampler(dist, ReplayRandomSource([0.49, 0.5]))

    assert sampler.sample_many(2) == ["a", "b"]


def test_weighted_path_uses_cumulative_lookup():
    dist = WeightedDistribution.from_options(["A", "B", "C"], [1, 1, 2])
    source = ReplayRandomSource([0.1, 0.25, 0.3, 0.5, 0.9])

    sampler = CategoricalSampler(dist, source)

    assert sampler.sample_many(5) == ["A", "B", "B", "C", "C"]


def test_weighted_path_never_returns_zero_weight_option():
    dist = WeightedDistribution.from_options(["A", "B", "C"], [1, 0, 1])
    sampler = CategoricalSampler(dist, NumpyRandomSource(seed=3))

    counts = Counter(sampler.sample_many(2000))

    assert counts["B"] == 0


def test_weighted_frequencies_converge_to_weights():
    dist = WeightedDistribution.from_options(["A", "B", "C"], [1, 1, 2])
    sampler = CategoricalSampler(dist, NumpyRandomSource(seed=0))

    n_samples = 20000
    counts = Counter(sampler.sample_many(n_samples))

    assert abs(counts["A"] / n_samples - 0.25) < 0.02
    assert abs(counts["B"] / n_samples - 0.25) < 0.02
    assert abs(counts["C"] / n_samples - 0.5) < 0.02


def test_sampling_weighted_distribution_before_normalization_fails():
    dist = WeightedDistribution(uniform=False)
    dist.add_option("a", 1.0)

    sampler = CategoricalSampler(dist, ReplayRandomSource([0.5]))

    with pytest.raises(NotNormalizedError):
        sampler.sample()

    dist.validate()
    assert sampler.sample() == "a"


def test_sampling_empty_distribution_fails():
    sampler = CategoricalSampler(WeightedDistribution(), ReplayRandomSource([0.5]))

    with pytest.raises(NotNormalizedError):
        sampler.sample()


def test_reconfiguration_leaves_no_residual_options():
    dist = WeightedDistribution.from_options(["old_a", "old_b"], [5, 1])
    sampler = CategoricalSampler(dist, NumpyRandomSource(seed=1))

    dist.set_weighted_options([("new_a", 1.0), ("new_b", 2.0)])

    assert set(sampler.sample_many(500)) <= {"new_a", "new_b"}


def test_same_seed_gives_same_samples():
    dist = WeightedDistribution.from_options(list("abcdef"), [1, 2, 3, 4, 5, 6])

    first = CategoricalSampler(dist, NumpyRandomSource(seed=42)).sample_many(50)
    second = CategoricalSampler(dist, NumpyRandomSource(seed=42)).sample_many(50)

    assert first == second


def test_default_random_source():
    dist = WeightedDistribution.from_options(["only"])
    sampler = CategoricalSampler(dist)

    assert isinstance(sampler.random_source, NumpyRandomSource)
    assert sampler.sample() == "only"


def test_sample_many_rejects_negative_count():
    sampler = CategoricalSampler(WeightedDistribution.from_options(["a"]))

    assert sampler.sample_many(0) == []
    with pytest.raises(ValueError):
        sampler.sample_many(-1)


def test_generic_dispatch_over_heterogeneous_parameters():
    """Samplers of different value types share one sampling entry point."""
    source = ReplayRandomSource([0.0, 0.75])
    parameters = {
        "color": CategoricalSampler(WeightedDistribution.from_options(["red", "blue"]), source),
        "count": CategoricalSampler(WeightedDistribution.from_options([1, 2], [1, 1]), source),
    }

    assert all(isinstance(p, Sampleable) for p in parameters.values())
    assert parameters["color"].sample_type is str
    assert parameters["count"].sample_type is int
    assert sample_all(parameters) == {"color": "red", "count": 2}


def test_sample_type_of_empty_distribution():
    sampler = CategoricalSampler(WeightedDistribution())

    assert sampler.sample_type is None


@pytest.mark.parametrize("start_uniform", [True, False])
def test_value_only_reconfiguration_samples_every_option(start_uniform):
    """After weighted options are replaced by plain values, r = i/N yields value i."""
    dist = WeightedDistribution(uniform=start_uniform)
    dist.set_weighted_options([("a", 1.0), ("b", 2.0)])
    dist.set_options(range(10))
    sampler = CategoricalSampler(dist, ReplayRandomSource([i / 10 for i in range(10)]))

    assert sampler.sample_many(10) == list(range(10))


def test_explicitly_weighted_equal_options_sample_every_option():
    dist = WeightedDistribution.from_options(list(range(10)), uniform=False)
    sampler = CategoricalSampler(dist, ReplayRandomSource([i / 10 for i in range(10)]))

    assert not dist.uniform
    assert sampler.sample_many(10) == list(range(10))
