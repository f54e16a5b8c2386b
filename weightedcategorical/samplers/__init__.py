"""Sampler implementations for weightedcategorical."""

from weightedcategorical.samplers.config import SamplerConfig
from weightedcategorical.samplers.categorical import CategoricalSampler
from weightedcategorical.samplers.index import CategoryIndexSampler
from weightedcategorical.samplers.factory import (
    load_sampler_config,
    make_distribution,
    make_index_sampler,
    make_sampler,
)

__all__ = [
    "SamplerConfig",
    "CategoricalSampler",
    "CategoryIndexSampler",
    "load_sampler_config",
    "make_distribution",
    "make_index_sampler",
    "make_sampler",
]
