"""Error types raised by Shufflax components.

All argument-validation errors derive from ``ValueError`` so callers that
already guard configuration mistakes with ``except ValueError`` keep working.
"""


class InvalidBoundError(ValueError):
    """Raised when an index source is asked for a draw with ``bound < 1``."""

    def __init__(self, bound):
        self.bound = bound
        super().__init__(f"bound must be a positive integer, got {bound!r}")


class InvalidTrialCountError(ValueError):
    """Raised when a verification run is requested with ``trials < 1``."""

    def __init__(self, trials):
        self.trials = trials
        super().__init__(f"trials must be a positive integer, got {trials!r}")


class ScriptExhaustedError(RuntimeError):
    """Raised when a scripted index source has no draws left."""

    pass
