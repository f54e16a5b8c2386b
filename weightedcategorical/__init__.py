"""weightedcategorical - Weighted categorical sampling with inverse-CDF lookup."""

from weightedcategorical.errors import (
    DistributionError,
    InvalidWeightError,
    InvalidTotalError,
    CountMismatchError,
    NotNormalizedError,
)
from weightedcategorical.random_source import (
    RandomSource,
    NumpyRandomSource,
    ReplayRandomSource,
)
from weightedcategorical.distribution import CategoryEntry, WeightedDistribution
from weightedcategorical.sampleable import Sampleable, sample_all
from weightedcategorical.samplers.categorical import CategoricalSampler
from weightedcategorical.samplers.index import CategoryIndexSampler
from weightedcategorical.samplers.factory import make_sampler, make_index_sampler

__version__ = "0.1.0"

__all__ = [
    "DistributionError",
    "InvalidWeightError",
    "InvalidTotalError",
    "CountMismatchError",
    "NotNormalizedError",
    "RandomSource",
    "NumpyRandomSource",
    "ReplayRandomSource",
    "CategoryEntry",
    "WeightedDistribution",
    "Sampleable",
    "sample_all",
    "CategoricalSampler",
    "CategoryIndexSampler",
    "make_sampler",
    "make_index_sampler",
]
