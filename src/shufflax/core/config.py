"""Configuration dataclasses for Shufflax components.

This module provides typed configuration classes:
- ShuffleConfig: Which index source backs the shuffle engine and how it copies
- VerificationConfig: How many trials a distribution check runs and its limits

All configs use dataclass with __post_init__ validation for fail-fast configuration errors.
"""

import numbers
from dataclasses import asdict, dataclass
from typing import Any

from shufflax.core.errors import InvalidTrialCountError


def validate_trial_count(trials) -> int:
    """Check that ``trials`` is an integer of at least 1.

    Args:
        trials: Requested number of verification trials.

    Returns:
        The trial count as a plain ``int``.

    Raises:
        InvalidTrialCountError: If the count is not integral or is less than 1.
    """
    if isinstance(trials, bool) or not isinstance(trials, numbers.Integral):
        raise InvalidTrialCountError(trials)
    if trials < 1:
        raise InvalidTrialCountError(trials)
    return int(trials)


@dataclass
class ShuffleConfig:
    """Configuration for the shuffle engine.

    Attributes:
        source: Registered index source name ("python", "system", "numpy", "jax")
        seed: Optional integer seed for reproducible shuffling
        deep_copy: Whether elements are deep-copied before permuting
        stream_name: RNG stream name used by the JAX-backed source
    """

    source: str = "python"
    seed: int | None = None
    deep_copy: bool = True
    stream_name: str = "shuffling"

    def __post_init__(self):
        """Validate configuration after initialization.

        Raises:
            ValueError: If configuration is invalid.
        """
        if not isinstance(self.source, str) or not self.source:
            raise ValueError(f"source must be a non-empty string, got {self.source!r}")

        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)
        ):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")

        if not isinstance(self.deep_copy, bool):
            raise ValueError(f"deep_copy must be a boolean, got {self.deep_copy!r}")

        if not self.stream_name:
            raise ValueError("stream_name must not be empty")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a TOML-compatible dict (None values dropped)."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class VerificationConfig:
    """Configuration for a distribution verification run.

    Attributes:
        trials: Number of shuffles to tabulate (at least 1)
        num_batches: Number of independent batches (1 runs serially)
        timeout: Optional wall-clock limit in seconds
        tolerance: Accepted share deviation from uniform, in percentage points
    """

    trials: int = 100_000
    num_batches: int = 1
    timeout: float | None = None
    tolerance: float = 1.0

    def __post_init__(self):
        """Validate configuration after initialization.

        Raises:
            InvalidTrialCountError: If trials is not a positive integer.
            ValueError: If any other field is invalid.
        """
        self.trials = validate_trial_count(self.trials)

        if self.num_batches < 1:
            raise ValueError(f"num_batches must be positive, got {self.num_batches}")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a TOML-compatible dict (None values dropped)."""
        return {k: v for k, v in asdict(self).items() if v is not None}
