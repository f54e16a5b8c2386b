"""Exceptions raised while configuring or sampling a weighted distribution."""


class DistributionError(Exception):
    """Base class for weighted distribution errors."""
    pass


class InvalidWeightError(DistributionError, ValueError):
    """Raised when a category has a negative or non-finite weight."""

    def __init__(self, index: int, weight: float):
        self.index = index
        self.weight = weight
        kind = "negative" if weight < 0 else "non-finite"
        super().__init__(f"Found {kind} probability at index {index}: {weight}")


class InvalidTotalError(DistributionError, ValueError):
    """Raised when the weights sum to zero or less."""

    def __init__(self, total: float):
        self.total = total
        super().__init__(f"Total probability must be greater than 0, got {total}")


class CountMismatchError(DistributionError, ValueError):
    """Raised when the number of weights differs from the number of categories."""

    def __init__(self, num_categories: int, num_weights: int):
        self.num_categories = num_categories
        self.num_weights = num_weights
        super().__init__(
            "Number of options must be equal to the number of probabilities "
            f"({num_categories} options, {num_weights} probabilities)"
        )


class NotNormalizedError(DistributionError, RuntimeError):
    """Raised when sampling from a distribution that has no cumulative table."""
    pass
