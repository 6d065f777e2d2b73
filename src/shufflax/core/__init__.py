"""Core interfaces, configuration and errors for Shufflax."""

from shufflax.core.config import ShuffleConfig, VerificationConfig
from shufflax.core.errors import (
    InvalidBoundError,
    InvalidTrialCountError,
    ScriptExhaustedError,
)
from shufflax.core.index_source import IndexSource, validate_bound

__all__ = [
    "IndexSource",
    "validate_bound",
    "ShuffleConfig",
    "VerificationConfig",
    "InvalidBoundError",
    "InvalidTrialCountError",
    "ScriptExhaustedError",
]
