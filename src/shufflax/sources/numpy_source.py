"""Index source backed by NumPy's ``Generator`` API."""

import numpy as np

from shufflax.config.registry import register_index_source
from shufflax.core.index_source import IndexSource


@register_index_source("numpy")
class NumpyIndexSource(IndexSource):
    """PCG64 index source using ``numpy.random.default_rng``.

    Args:
        seed: Optional integer seed for reproducible draws.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def _draw(self, bound: int) -> int:
        # Generator.integers uses Lemire's bounded method, unbiased for any bound
        return int(self._rng.integers(bound))

    def reset(self, seed: int | None = None) -> None:
        """Re-seed the generator (with the original seed unless one is given)."""
        if seed is not None:
            self.seed = seed
        self._rng = np.random.default_rng(self.seed)

    def __repr__(self) -> str:
        return f"NumpyIndexSource(seed={self.seed!r})"
