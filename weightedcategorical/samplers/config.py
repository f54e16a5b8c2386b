"""Configuration classes for categorical samplers."""
import math
from dataclasses import dataclass
from typing import Any, Optional

from weightedcategorical.errors import CountMismatchError, InvalidTotalError, InvalidWeightError


@dataclass
class SamplerConfig:
    """
    Configuration for categorical samplers.

    Attributes:
        options: Categorical values to sample from, in index order.
                 Example: ["red", "green", "blue"]
        type: Type of sampler (currently only "categorical" is supported)
        weights: Raw weight for each option, same length as options.
                 Weights are relative and need not sum to 1.
                 Example: [1.0, 1.0, 2.0] samples "blue" half of the time.
                 If None, all options are equally likely.
        uniform: Whether to sample options with equal probability regardless of weights.
                 If None, uniform exactly when no weights are given.
        seed: Random seed for reproducibility. If None, sampling is non-deterministic.
        num_samples: Indices per epoch for CategoryIndexSampler. If None, uses the number of options.
    """
    options: list[Any]
    type: str = "categorical"
    weights: Optional[list[float]] = None
    uniform: Optional[bool] = None
    seed: Optional[int] = None
    num_samples: Optional[int] = None

    @property
    def is_uniform(self) -> bool:
        if self.uniform is None:
            return self.weights is None
        return self.uniform

    @classmethod
    def from_dict(cls, data: dict) -> "SamplerConfig":
        """
        Create SamplerConfig from a dictionary.

        Args:
            data: Dictionary containing sampler configuration

        Returns:
            SamplerConfig instance

        Raises:
            ValueError: If required fields are missing or invalid. Weight
                        problems use the typed subclasses: InvalidWeightError for
                        a negative or non-finite weight, CountMismatchError when
                        weights and options differ in length, InvalidTotalError
                        when the weights do not sum to a positive finite total.
        """
        # Validate sampler type
        sampler_type = data.get("type", "categorical")
        if sampler_type != "categorical":
            raise ValueError(f"Unsupported sampler type: {sampler_type}. Only 'categorical' is supported.")

        options = data.get("options", None)
        if options is None:
            raise ValueError("options is required")
        if not isinstance(options, list):
            raise ValueError(f"options must be a list, got {type(options)}")
        if len(options) == 0:
            raise ValueError("options must not be empty")

        weights = data.get("weights", None)
        if weights is not None:
            if not isinstance(weights, list):
                raise ValueError(f"weights must be a list, got {type(weights)}")
            # bool is an int subclass but never a meaningful weight
            for i, weight in enumerate(weights):
                if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                    raise ValueError(f"Weight at index {i} must be numeric, got {type(weight)}")
                if weight < 0 or not math.isfinite(weight):
                    raise InvalidWeightError(i, weight)
            if len(weights) != len(options):
                raise CountMismatchError(len(options), len(weights))
            total = float(sum(weights))
            if not (total > 0 and math.isfinite(total)):
                raise InvalidTotalError(total)

        uniform = data.get("uniform", None)
        if uniform is not None and not isinstance(uniform, bool):
            raise ValueError(f"uniform must be a bool, got {type(uniform)}")

        seed = data.get("seed", None)
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, int):
                raise ValueError(f"seed must be an int, got {type(seed)}")
            if seed < 0:
                raise ValueError(f"seed must be non-negative, got {seed}")

        num_samples = data.get("num_samples", None)
        if num_samples is not None:
            if isinstance(num_samples, bool) or not isinstance(num_samples, int):
                raise ValueError(f"num_samples must be an int, got {type(num_samples)}")
            if num_samples <= 0:
                raise ValueError(f"num_samples must be positive, got {num_samples}")

        return cls(
            options=options,
            type=sampler_type,
            weights=[float(w) for w in weights] if weights is not None else None,
            uniform=uniform,
            seed=seed,
            num_samples=num_samples,
        )
