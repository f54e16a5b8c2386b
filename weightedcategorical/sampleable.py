from abc import ABC, abstractmethod
from typing import Any, Mapping


class Sampleable(ABC):
    """
    Anything that can produce a sample without the caller knowing its type.

    Lets heterogeneous collections of parameters (categorical or otherwise)
    be sampled through one entry point.
    """

    @property
    @abstractmethod
    def sample_type(self) -> type | None:
        """The type of value produced by sample_generic(), if known."""
        pass

    @abstractmethod
    def sample_generic(self) -> Any:
        """Generate one sample."""
        pass


def sample_all(parameters: Mapping[str, Sampleable]) -> dict[str, Any]:
    """
    Draw one sample from each named parameter.

    Parameters are sampled in mapping order, so a shared random source
    advances deterministically.

    Args:
        parameters: Mapping of parameter name to Sampleable

    Returns:
        Dict mapping each name to its sample
    """
    return {name: parameter.sample_generic() for name, parameter in parameters.items()}
