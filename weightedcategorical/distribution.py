"""
Weighted categorical distribution: ordered options, raw weights and the
cumulative probability table used for inverse-CDF sampling.
"""
import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Sequence, TypeVar

import numpy as np

from weightedcategorical.errors import (
    CountMismatchError,
    InvalidTotalError,
    InvalidWeightError,
    NotNormalizedError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class CategoryEntry(Generic[T]):
    """A categorical option paired with its raw (unnormalized) weight."""
    value: T
    weight: float


def build_cumulative_table(weights: Sequence[float]) -> np.ndarray:
    """
    Normalize raw weights into a cumulative probability table.

    Entry i holds the probability mass of categories 0..i inclusive, so the
    table is non-decreasing and ends at (approximately) 1.0. Equal weights
    produce the exact table (i + 1) / n, so a key of i / n always lands on
    category i.

    Args:
        weights: Raw non-negative, finite weights

    Returns:
        float64 array with the same length as weights

    Raises:
        InvalidWeightError: If any weight is negative, infinite or NaN
        InvalidTotalError: If the weights sum to zero or less, or overflow
    """
    raw = np.asarray(weights, dtype=np.float64)

    invalid = np.flatnonzero((raw < 0.0) | ~np.isfinite(raw))
    if invalid.size > 0:
        index = int(invalid[0])
        raise InvalidWeightError(index, float(raw[index]))

    total = float(raw.sum())
    if not (total > 0.0 and np.isfinite(total)):
        raise InvalidTotalError(total)

    count = len(raw)
    if np.all(raw == raw[0]):
        return np.arange(1, count + 1, dtype=np.float64) / count

    # Running sum of each weight's normalized share
    return np.cumsum(raw / total)


class WeightedDistribution(Generic[T]):
    """
    An ordered set of categorical options with relative weights.

    Insertion order defines the index of each option, and indices address
    both the raw weights and the cumulative table. In uniform mode every
    option is equally likely and samplers scale the random number straight
    into an index; otherwise the cumulative table governs sampling.

    Example:
        dist = WeightedDistribution()
        dist.set_weighted_options([("A", 1.0), ("B", 1.0), ("C", 2.0)])
        dist.cumulative  # array([0.25, 0.5 , 1.  ])

    Instances are not safe for mutation while other threads are sampling.
    """

    def __init__(self, uniform: bool = True):
        """
        Create an empty distribution.

        Args:
            uniform: Whether options are implicitly equal-weight
        """
        self._values: list[T] = []
        self._weights: list[float] = []
        self._cumulative: Optional[np.ndarray] = None
        self._uniform = uniform

    @classmethod
    def from_options(
        cls,
        values: Sequence[T],
        weights: Optional[Sequence[float]] = None,
        uniform: Optional[bool] = None,
    ) -> "WeightedDistribution[T]":
        """
        Build a normalized distribution from parallel lists.

        Args:
            values: Categorical options, in index order
            weights: Raw weights for each option. If None, options get equal weight.
            uniform: Uniform mode flag. Defaults to True exactly when weights is None.

        Raises:
            CountMismatchError: If weights and values differ in length
            InvalidWeightError: If any weight is negative, infinite or NaN
            InvalidTotalError: If the weights sum to zero or less
        """
        if weights is None:
            dist = cls()
            dist.set_options(values)
            if uniform is False:
                dist.uniform = False
            return dist

        if len(weights) != len(values):
            raise CountMismatchError(len(values), len(weights))

        dist = cls(uniform=False)
        dist.set_weighted_options(zip(values, weights))
        if uniform:
            dist.uniform = True
        return dist

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_options(self, values: Iterable[T]):
        """
        Replace all options with equally weighted values and normalize.

        Switches the distribution back into uniform mode. On failure the
        previous options, weights and mode are kept.

        Raises:
            InvalidTotalError: If values is empty
        """
        self._replace([(value, 1.0) for value in values])
        self._uniform = True

    def set_weighted_options(self, options: Iterable[tuple[T, float]]):
        """
        Replace all options with (value, weight) pairs and normalize.

        Switches the distribution out of uniform mode so the explicit
        weights govern sampling. On failure the previous options, weights
        and mode are kept.

        Raises:
            InvalidWeightError: If any weight is negative, infinite or NaN
            InvalidTotalError: If the weights sum to zero or less
        """
        self._replace([(value, float(weight)) for value, weight in options])
        self._uniform = False

    def _replace(self, entries: list[tuple[T, float]]):
        weights = [weight for _, weight in entries]
        cumulative = build_cumulative_table(weights)

        self._values = [value for value, _ in entries]
        self._weights = weights
        self._cumulative = cumulative
        logging.debug(f"Configured {len(entries)} categorical options")

    def add_option(self, value: T, weight: float = 1.0):
        """
        Append a single option.

        The cumulative table is discarded, so a non-uniform distribution
        must be validated again before it can be sampled.
        """
        self._values.append(value)
        self._weights.append(float(weight))
        self._cumulative = None

    @property
    def uniform(self) -> bool:
        return self._uniform

    @uniform.setter
    def uniform(self, value: bool):
        if value == self._uniform:
            return
        if not value and self._cumulative is None:
            # Leaving uniform mode needs a cumulative table; a failure keeps uniform mode
            self._cumulative = build_cumulative_table(self._weights)
        self._uniform = value

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def normalize(self):
        """
        Rebuild the cumulative table from the raw weights.

        The new table is only stored if every check passes, so a failure
        leaves the previous table untouched.

        Raises:
            InvalidWeightError: If any weight is negative, infinite or NaN (reports the index)
            InvalidTotalError: If the weights sum to zero or less
        """
        self._cumulative = build_cumulative_table(self._weights)
        logging.debug(f"Normalized {len(self._weights)} categorical weights")

    def validate(self):
        """
        Validate the categorical weights assigned to this distribution.

        Uniform distributions are always consistent, so this is a no-op
        for them. Otherwise the option and weight counts must agree and
        the weights are normalized again.

        Raises:
            CountMismatchError: If the weight and option counts differ
            InvalidWeightError: If any weight is negative, infinite or NaN
            InvalidTotalError: If the weights sum to zero or less
        """
        if self._uniform:
            return
        if len(self._weights) != len(self._values):
            raise CountMismatchError(len(self._values), len(self._weights))
        self.normalize()

    @property
    def is_normalized(self) -> bool:
        return self._cumulative is not None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def index_for_cumulative_value(self, key: float) -> int:
        """
        Find the option whose probability mass contains key.

        Binary search for the smallest index i with key <= cumulative[i].
        When key lands exactly on cumulative[mid] the following index is
        returned, because cumulative[i] is the exclusive upper bound of
        option i's mass.

        Args:
            key: Uniform random value in [0, 1)

        Returns:
            Index into the options

        Raises:
            NotNormalizedError: If there is no cumulative table
        """
        cumulative = self.cumulative
        last = len(cumulative) - 1

        low, high = 0, last
        while low <= high:
            mid = (low + high) // 2
            if key == cumulative[mid]:
                low = mid + 1
                break
            if key < cumulative[mid]:
                high = mid - 1
            else:
                low = mid + 1

        # Rounding can leave the table ending just below key
        return min(low, last)

    @property
    def cumulative(self) -> np.ndarray:
        """Copy of the cumulative probability table."""
        if self._cumulative is None:
            raise NotNormalizedError(
                "Distribution has not been normalized since it was last modified"
            )
        return self._cumulative.copy()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def categories(self) -> list[tuple[T, float]]:
        """All configured (value, raw weight) pairs, in index order."""
        return list(zip(self._values, self._weights))

    @property
    def entries(self) -> list[CategoryEntry[T]]:
        return [CategoryEntry(value, weight) for value, weight in self.categories]

    @property
    def values(self) -> list[T]:
        return list(self._values)

    @property
    def raw_weights(self) -> list[float]:
        return list(self._weights)

    @property
    def probabilities(self) -> np.ndarray:
        """
        Normalized probability of each option.

        Equal shares in uniform mode, otherwise the per-option differences
        of the cumulative table.
        """
        if self._uniform:
            count = len(self._values)
            return np.full(count, 1.0 / count) if count else np.zeros(0)
        return np.diff(self.cumulative, prepend=0.0)

    def get_category(self, index: int) -> T:
        return self._values[index]

    def get_probability(self, index: int) -> float:
        """Raw weight stored at index."""
        return self._weights[index]

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        mode = "uniform" if self._uniform else "weighted"
        return f"WeightedDistribution({mode}, categories={self.categories!r})"
