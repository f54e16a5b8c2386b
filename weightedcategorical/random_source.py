"""
Sources of uniform random numbers in the half-open interval [0, 1).

Samplers never reach for a process-wide generator. Each one is handed a
RandomSource, so a seeded or replayed source makes sampling reproducible.

Usage:
    source = NumpyRandomSource(seed=42)
    r = source.next()
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np


class RandomSource(ABC):
    """Supplies floats in [0, 1) on demand."""

    @abstractmethod
    def next(self) -> float:
        """Return the next uniform random number in [0, 1)."""
        pass


class NumpyRandomSource(RandomSource):
    """
    RandomSource backed by ``numpy.random.RandomState``.
    
    Thread safety is that of the underlying RandomState; share one instance
    across threads only with external locking.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Random seed for reproducibility. If None, draws are non-deterministic.
        """
        self._seed = seed
        self._rng = np.random.RandomState(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]):
        """Reseed the generator (None -> fresh non-deterministic state)."""
        self._seed = seed
        self._rng = np.random.RandomState(seed)

    def next(self) -> float:
        return float(self._rng.random_sample())


class ReplayRandomSource(RandomSource):
    """
    Replays a fixed sequence of values, wrapping around at the end.
    
    Useful for exact, deterministic sampling in tests.
    """

    def __init__(self, values: Sequence[float]):
        """
        Args:
            values: Non-empty sequence of floats, each in [0, 1)
            
        Raises:
            ValueError: If values is empty or any value is outside [0, 1)
        """
        if len(values) == 0:
            raise ValueError("ReplayRandomSource needs at least one value")
        for i, value in enumerate(values):
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Replay value at index {i} must be in [0, 1), got {value}")

        self._values = [float(v) for v in values]
        self._position = 0

    def next(self) -> float:
        value = self._values[self._position]
        self._position = (self._position + 1) % len(self._values)
        return value

    def reset(self):
        """Rewind to the start of the sequence."""
        self._position = 0
