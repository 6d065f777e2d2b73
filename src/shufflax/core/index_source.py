"""Base module for random index sources in Shufflax.

An index source is the only place randomness enters the system. Every
shuffle and every verification run draws through an ``IndexSource`` instance
that is passed in explicitly, which keeps the algorithms deterministic under
test (see ``shufflax.sources.scripted``) and lets callers swap backends.
"""

import numbers
from abc import ABC, abstractmethod

from shufflax.core.errors import InvalidBoundError


def validate_bound(bound) -> int:
    """Check that ``bound`` is an integer of at least 1.

    Args:
        bound: Exclusive upper limit of a draw.

    Returns:
        The bound as a plain ``int``.

    Raises:
        InvalidBoundError: If the bound is not integral or is less than 1.
    """
    if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
        raise InvalidBoundError(bound)
    if bound < 1:
        raise InvalidBoundError(bound)
    return int(bound)


class IndexSource(ABC):
    """Produces integers uniformly distributed over ``[0, bound)``.

    Subclasses implement ``_draw`` and may assume a validated ``bound >= 2``.
    The public ``next`` method handles validation and the trivial single-value
    range, which never consumes randomness.

    Examples:
        class ConstantZero(IndexSource):
            def _draw(self, bound):
                return 0

        ConstantZero().next(5)  # -> 0
    """

    def next(self, bound: int) -> int:
        """Draw one index from ``{0, 1, ..., bound - 1}``.

        Args:
            bound: Exclusive upper limit, at least 1.

        Returns:
            A uniformly distributed index.

        Raises:
            InvalidBoundError: If ``bound < 1``.
        """
        bound = validate_bound(bound)
        if bound == 1:
            return 0
        return self._draw(bound)

    @abstractmethod
    def _draw(self, bound: int) -> int:
        """Backend-specific draw for ``bound >= 2``."""

    def reset(self, seed: int | None = None) -> None:
        """Restart the random stream.

        Stateless or unseeded sources ignore this.

        Args:
            seed: Optional seed overriding the one given at construction.
        """
        pass
