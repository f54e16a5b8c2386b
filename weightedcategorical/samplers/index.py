from typing import Iterator

import torch.utils.data

from weightedcategorical.distribution import WeightedDistribution
from weightedcategorical.random_source import NumpyRandomSource
from weightedcategorical.samplers.categorical import CategoricalSampler


class CategoryIndexSampler(torch.utils.data.Sampler):
    """
    Yield category indices drawn from a weighted distribution.

    Each epoch draws ``num_samples`` indices with replacement, so a dataset
    whose items line up with the distribution's options is visited in
    proportion to the weights.

    Example:
        - Options: ["common", "rare"], weights [3.0, 1.0]
        - num_samples 4,000
        - About 3,000 yields of index 0 and 1,000 of index 1
    """

    def __init__(
        self,
        distribution: WeightedDistribution,
        num_samples: int | None = None,
        seed: int | None = None,
    ):
        """
        Initialize category index sampler.

        Args:
            distribution: The options and weights to draw indices from
            num_samples: Indices per epoch. If None, uses the number of options.
            seed: Random seed for reproducibility. The same seed replays the
                  same indices every epoch.
        """
        if num_samples is not None and num_samples <= 0:
            raise ValueError(f"num_samples must be positive, got {num_samples}")

        # Fail early instead of on the first epoch
        distribution.validate()

        self.distribution = distribution
        self.num_samples = num_samples or len(distribution)
        self.seed = seed

    def __iter__(self) -> Iterator[int]:
        """Iterate with weighted sampling, yielding category indices."""
        sampler = CategoricalSampler(self.distribution, NumpyRandomSource(self.seed))
        for _ in range(self.num_samples):
            yield sampler.sample_index()

    def __len__(self) -> int:
        return self.num_samples
