"""Index sources backed by Python's ``random`` module."""

import random

from shufflax.config.registry import register_index_source
from shufflax.core.index_source import IndexSource


@register_index_source("python")
class PythonIndexSource(IndexSource):
    """Mersenne Twister index source (the default backend).

    Uses ``random.Random.randrange``, which rejects out-of-range bits rather
    than reducing modulo ``bound``, so draws carry no modulo bias.

    Args:
        seed: Optional integer seed for reproducible draws. ``None`` seeds from
            the operating system.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)  # nosec B311

    def _draw(self, bound: int) -> int:
        return self._rng.randrange(bound)

    def reset(self, seed: int | None = None) -> None:
        """Re-seed the generator (with the original seed unless one is given)."""
        if seed is not None:
            self.seed = seed
        self._rng = random.Random(self.seed)  # nosec B311

    def __repr__(self) -> str:
        return f"PythonIndexSource(seed={self.seed!r})"


@register_index_source("system")
class SystemIndexSource(IndexSource):
    """Index source drawing from the operating system's entropy pool.

    Cannot be seeded; ``reset`` is a no-op.
    """

    def __init__(self):
        self._rng = random.SystemRandom()

    def _draw(self, bound: int) -> int:
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return "SystemIndexSource()"
