"""Deterministic index sources for tests and replays.

``ScriptedIndexSource`` replays a fixed list of draws so a shuffle produces
an exact, known output. ``RecordingIndexSource`` wraps any other source and
keeps a log of every ``(bound, value)`` pair it served, which makes the call
sequence of two runs directly comparable.
"""

from collections.abc import Iterable

from shufflax.core.errors import ScriptExhaustedError
from shufflax.core.index_source import IndexSource


class ScriptedIndexSource(IndexSource):
    """Returns pre-scripted indices in order.

    Draws with ``bound == 1`` are answered with 0 by the base class and do
    not consume a scripted value.

    Args:
        indices: The values to return, in draw order.

    Examples:
        source = ScriptedIndexSource([1, 0, 1])
        FisherYatesShuffler(source).shuffle(["A", "B", "C", "D"])
        # -> ["C", "D", "A", "B"]
    """

    def __init__(self, indices: Iterable[int]):
        self._script = list(indices)
        self._position = 0
        self.bounds: list[int] = []

    @property
    def remaining(self) -> int:
        """Number of scripted draws not yet consumed."""
        return len(self._script) - self._position

    def _draw(self, bound: int) -> int:
        if self._position >= len(self._script):
            raise ScriptExhaustedError(
                f"Scripted index source exhausted after {len(self._script)} draws"
            )
        value = self._script[self._position]
        if not 0 <= value < bound:
            raise ValueError(
                f"Scripted draw #{self._position} is {value}, outside [0, {bound})"
            )
        self._position += 1
        self.bounds.append(bound)
        return value

    def reset(self, seed: int | None = None) -> None:
        """Rewind to the start of the script."""
        self._position = 0
        self.bounds = []


class RecordingIndexSource(IndexSource):
    """Delegates to another source and records every draw.

    Args:
        inner: The source that actually produces the indices.
    """

    def __init__(self, inner: IndexSource):
        self.inner = inner
        self.calls: list[tuple[int, int]] = []

    def _draw(self, bound: int) -> int:
        value = self.inner.next(bound)
        self.calls.append((bound, value))
        return value

    def reset(self, seed: int | None = None) -> None:
        """Reset the wrapped source and clear the log."""
        self.inner.reset(seed)
        self.calls = []
