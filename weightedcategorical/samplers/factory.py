"""Factory functions for creating categorical samplers."""
import json
import logging
import os
from pathlib import Path
from typing import Optional

from weightedcategorical.distribution import WeightedDistribution
from weightedcategorical.random_source import NumpyRandomSource, RandomSource
from weightedcategorical.samplers.categorical import CategoricalSampler
from weightedcategorical.samplers.config import SamplerConfig
from weightedcategorical.samplers.index import CategoryIndexSampler

CONFIG_PATH_ENV_VAR = "CATEGORICAL_SAMPLER_CONFIG_PATH"


def load_sampler_config(config_path: Optional[str] = None) -> Optional[SamplerConfig]:
    """
    Read the options and weights for a categorical sampler from disk.

    An explicit path wins; otherwise the path is taken from the
    CATEGORICAL_SAMPLER_CONFIG_PATH environment variable. A missing, unreadable
    or invalid file is logged and yields None.

    Args:
        config_path: Location of a ``.json`` file, or None to use the environment.

    Returns:
        The parsed SamplerConfig, or None when there is nothing usable to read.

    A minimal file lists the options; weights, seed and num_samples are optional:
        {"options": ["red", "green", "blue"], "weights": [1.0, 1.0, 2.0], "seed": 42}
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if config_path is None:
        return None

    path = Path(config_path)
    if not path.is_file():
        logging.warning(f"No categorical sampler config at {path}")
        return None
    if path.suffix != ".json":
        logging.warning(f"Categorical sampler configs must be .json files, got {path.name}")
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logging.error(f"Could not parse {path} as JSON: {e}")
        return None
    except OSError as e:
        logging.error(f"Could not read {path}: {e}")
        return None

    if not isinstance(data, dict):
        logging.error(f"Expected a JSON object in {path}, got {type(data).__name__}")
        return None

    try:
        config = SamplerConfig.from_dict(data)
    except ValueError as e:
        logging.error(f"Rejected categorical sampler config {path}: {e}")
        return None

    logging.info(f"Using categorical sampler config {path} ({len(config.options)} options)")
    return config


def make_distribution(sampler_config: SamplerConfig) -> WeightedDistribution:
    """Build a normalized WeightedDistribution from a SamplerConfig."""
    return WeightedDistribution.from_options(
        sampler_config.options,
        weights=sampler_config.weights,
        uniform=sampler_config.is_uniform,
    )


def _resolve_config(
    sampler_config: Optional[SamplerConfig | dict],
    config_path: Optional[str],
) -> Optional[SamplerConfig]:
    if sampler_config is None:
        return load_sampler_config(config_path)

    if isinstance(sampler_config, dict):
        return SamplerConfig.from_dict(sampler_config)

    return sampler_config


def make_sampler(
    sampler_config: Optional[SamplerConfig | dict] = None,
    config_path: Optional[str] = None,
    random_source: Optional[RandomSource] = None,
) -> Optional[CategoricalSampler]:
    """
    Create a categorical sampler based on configuration.

    Args:
        sampler_config: SamplerConfig instance or dict. If dict, will be parsed into SamplerConfig.
                       If None, will try to load from config_path.
        config_path: Path to JSON config file. Only used if sampler_config is None.
        random_source: Source of uniform random numbers. If None, a NumpyRandomSource
                       seeded with the config's seed is used.

    Returns:
        The created sampler, or None if no sampler config was found.

    Raises:
        ValueError: If a dict config is invalid. There is no fallback weighting.
    """
    sampler_config = _resolve_config(sampler_config, config_path)
    if sampler_config is None:
        logging.info("No sampler config found. No categorical sampler created.")
        return None

    distribution = make_distribution(sampler_config)
    if random_source is None:
        random_source = NumpyRandomSource(sampler_config.seed)

    logging.info("Creating CategoricalSampler:")
    logging.info(f"  Options: {sampler_config.options}")
    if sampler_config.is_uniform:
        logging.info("  Using uniform weights")
    else:
        logging.info(f"  Custom weights: {sampler_config.weights}")
    if sampler_config.seed is not None:
        logging.info(f"  Seed: {sampler_config.seed}")

    return CategoricalSampler(distribution, random_source)


def make_index_sampler(
    sampler_config: Optional[SamplerConfig | dict] = None,
    config_path: Optional[str] = None,
) -> Optional[CategoryIndexSampler]:
    """
    Create a CategoryIndexSampler for a DataLoader based on configuration.

    Args:
        sampler_config: SamplerConfig instance or dict. If None, will try to load from config_path.
        config_path: Path to JSON config file. Only used if sampler_config is None.

    Returns:
        The created sampler, or None if no sampler config was found.
    """
    sampler_config = _resolve_config(sampler_config, config_path)
    if sampler_config is None:
        logging.info("No sampler config found. No category index sampler created.")
        return None

    distribution = make_distribution(sampler_config)
    sampler = CategoryIndexSampler(
        distribution,
        num_samples=sampler_config.num_samples,
        seed=sampler_config.seed,
    )
    logging.info(
        f"Creating CategoryIndexSampler over {len(distribution)} options, "
        f"{len(sampler)} samples per epoch"
    )
    return sampler
