"""Shufflax: unbiased shuffling with statistical verification.

Shufflax provides a Fisher-Yates shuffle engine driven by an injectable
random index source (Python, NumPy, JAX or OS entropy backends), and a
distribution verifier that runs a shuffle many times and measures how
evenly its outputs spread over all permutations.
"""

# Core interfaces and errors
from shufflax.core.config import ShuffleConfig, VerificationConfig
from shufflax.core.errors import InvalidBoundError, InvalidTrialCountError
from shufflax.core.index_source import IndexSource

# Shuffle engine
from shufflax.engine import (
    FisherYatesShuffler,
    StepEvent,
    StepObserver,
    StepwiseShuffle,
    shuffle,
)

# Index sources
from shufflax.sources import (
    JaxIndexSource,
    NumpyIndexSource,
    PythonIndexSource,
    ScriptedIndexSource,
    SystemIndexSource,
)

# Verification
from shufflax.verification import (
    DistributionReport,
    canonical_key,
    merge_reports,
    verify,
    verify_parallel,
)

__version__ = "0.1.0"

__all__ = [
    # Core operations
    "shuffle",
    "verify",
    "verify_parallel",
    # Engine
    "FisherYatesShuffler",
    "StepwiseShuffle",
    "StepEvent",
    "StepObserver",
    # Index sources
    "IndexSource",
    "PythonIndexSource",
    "SystemIndexSource",
    "NumpyIndexSource",
    "JaxIndexSource",
    "ScriptedIndexSource",
    # Verification
    "DistributionReport",
    "canonical_key",
    "merge_reports",
    # Configuration
    "ShuffleConfig",
    "VerificationConfig",
    # Errors
    "InvalidBoundError",
    "InvalidTrialCountError",
]
