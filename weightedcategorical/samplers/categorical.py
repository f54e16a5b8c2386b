from typing import Generic, Optional, TypeVar

from weightedcategorical.distribution import WeightedDistribution
from weightedcategorical.errors import NotNormalizedError
from weightedcategorical.random_source import NumpyRandomSource, RandomSource
from weightedcategorical.sampleable import Sampleable

T = TypeVar("T")


class CategoricalSampler(Sampleable, Generic[T]):
    """
    Draw options from a WeightedDistribution, one per call.

    Uniform distributions scale the random number directly into an index.
    Weighted distributions map it through the cumulative table (inverse-CDF
    sampling), so long-run frequencies follow the normalized weights.

    Example:
        dist = WeightedDistribution.from_options(["A", "B", "C"], [1, 1, 2])
        sampler = CategoricalSampler(dist, NumpyRandomSource(seed=0))
        sampler.sample()  # "C" about half of the time
    """

    def __init__(
        self,
        distribution: WeightedDistribution[T],
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize categorical sampler.

        Args:
            distribution: The options and weights to sample from
            random_source: Source of uniform [0, 1) numbers. If None, an
                           unseeded NumpyRandomSource owned by this sampler is used.
        """
        self.distribution = distribution
        self.random_source = random_source if random_source is not None else NumpyRandomSource()

    def sample(self) -> T:
        """
        Generate a sample.

        Raises:
            NotNormalizedError: If the distribution is empty, or is weighted
                                and has not been normalized since its last change
        """
        return self.distribution.get_category(self.sample_index())

    def sample_index(self) -> int:
        """Draw the index of an option rather than the option itself."""
        dist = self.distribution
        count = len(dist)
        if count == 0:
            raise NotNormalizedError("Cannot sample from an empty distribution")
        if not dist.uniform and not dist.is_normalized:
            raise NotNormalizedError(
                "Weighted distribution must be validated before sampling"
            )

        random_value = self.random_source.next()
        if dist.uniform:
            index = min(int(random_value * count), count - 1)
        else:
            index = dist.index_for_cumulative_value(random_value)
        return index

    def sample_many(self, count: int) -> list[T]:
        """Generate count samples."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.sample() for _ in range(count)]

    @property
    def sample_type(self) -> type | None:
        if len(self.distribution) == 0:
            return None
        return type(self.distribution.get_category(0))

    def sample_generic(self):
        return self.sample()
