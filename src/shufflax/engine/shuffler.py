"""Fisher-Yates shuffle engine for Shufflax.

This module provides the unbiased permutation used by every other component.
The loop walks positions from the end of the working copy towards the front;
position ``i`` is filled with an element drawn uniformly from the ``i + 1``
candidates not yet placed, which gives exactly ``n!`` equally likely draw
paths for ``n`` elements, one per permutation.

Two ways to run it share the same internal generator, so they consume the
index source identically and produce identical results:
- ``FisherYatesShuffler.shuffle`` runs to completion and notifies observers
- ``FisherYatesShuffler.steps`` yields one StepEvent per iteration, letting a
  caller pace the shuffle (e.g. for visualization) between steps
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Callable, Generic, TypeVar

from shufflax.core.index_source import IndexSource
from shufflax.engine.events import StepEvent
from shufflax.engine.observers import ObserverRegistry, StepCallback, StepObserver
from shufflax.sources.python_source import PythonIndexSource
from shufflax.utils.sequence_utils import clone_items, rebuild_sequence

T = TypeVar("T")

_default_source: IndexSource | None = None


def default_source() -> IndexSource:
    """Return the process-wide unseeded source used when none is injected."""
    global _default_source
    if _default_source is None:
        _default_source = PythonIndexSource()
    return _default_source


def _fisher_yates(
    items: list[Any], source: IndexSource, snapshot: bool
) -> Iterator[StepEvent | None]:
    """Permute ``items`` in place, yielding after every swap.

    Yields a StepEvent when ``snapshot`` is True, otherwise None, so callers
    without observers skip the per-step copy of the working list.
    """
    for i in range(len(items) - 1, 0, -1):
        j = source.next(i + 1)
        before = tuple(items) if snapshot else None
        items[i], items[j] = items[j], items[i]
        yield StepEvent(i, j, before) if snapshot else None


class FisherYatesShuffler:
    """Unbiased shuffle engine with an injected index source.

    Args:
        source: Index source to draw from. Defaults to the shared unseeded
            PythonIndexSource from ``default_source()``.
        observers: Optional observers (StepObserver instances or callables)
            notified synchronously after every swap.
        deep_copy: Whether elements are deep-copied before permuting.
        copier: Optional per-element copy function used instead of
            ``copy.deepcopy``.

    Examples:
        shuffler = FisherYatesShuffler(PythonIndexSource(seed=7))
        shuffled = shuffler.shuffle([1, 2, 3, 4])
    """

    def __init__(
        self,
        source: IndexSource | None = None,
        *,
        observers: Iterable[StepObserver | StepCallback] | None = None,
        deep_copy: bool = True,
        copier: Callable[[Any], Any] | None = None,
    ):
        self.source = source if source is not None else default_source()
        self.deep_copy = deep_copy
        self.copier = copier
        self.observers = ObserverRegistry()
        for observer in observers or ():
            self.observers.register(observer)

    def _clone(self, sequence: Sequence[T]) -> list[T]:
        return clone_items(sequence, deep=self.deep_copy, copier=self.copier)

    def shuffle(self, sequence: Sequence[T]) -> Sequence[T]:
        """Return a uniformly random permutation of ``sequence``.

        The input is never modified. Sequences of length 0 or 1 come back as
        an unchanged copy without touching the index source.

        Args:
            sequence: Sequence to permute.

        Returns:
            A new sequence of the same container type holding the permuted
            (copied) elements.
        """
        items = self._clone(sequence)
        notify = bool(self.observers)
        for event in _fisher_yates(items, self.source, snapshot=notify):
            if notify:
                self.observers.notify(event)
        return rebuild_sequence(sequence, items)

    __call__ = shuffle

    def steps(self, sequence: Sequence[T]) -> "StepwiseShuffle[T]":
        """Prepare a step-by-step shuffle of ``sequence``.

        Registered observers are notified as each step is consumed, exactly as
        in ``shuffle``.

        Args:
            sequence: Sequence to permute.

        Returns:
            A StepwiseShuffle to iterate over.
        """
        return StepwiseShuffle(self, sequence)


class StepwiseShuffle(Generic[T]):
    """Iterable shuffle that yields control after every swap.

    Iterating yields one StepEvent per Fisher-Yates iteration (``n - 1``
    events for ``n > 1``). Once exhausted, ``result`` holds the permuted
    sequence. A StepwiseShuffle can be iterated only once.
    """

    def __init__(self, shuffler: FisherYatesShuffler, sequence: Sequence[T]):
        self._shuffler = shuffler
        self._sequence = sequence
        self._result: Sequence[T] | None = None
        self._iterator: Iterator[StepEvent] | None = None

    def __iter__(self) -> Iterator[StepEvent]:
        if self._iterator is not None:
            raise RuntimeError("StepwiseShuffle can only be iterated once")
        self._iterator = self._run()
        return self._iterator

    def _run(self) -> Iterator[StepEvent]:
        items = self._shuffler._clone(self._sequence)
        for event in _fisher_yates(items, self._shuffler.source, snapshot=True):
            self._shuffler.observers.notify(event)
            yield event
        self._result = rebuild_sequence(self._sequence, items)

    @property
    def done(self) -> bool:
        """True once every step has been consumed."""
        return self._result is not None

    @property
    def result(self) -> Sequence[T]:
        """The permuted sequence.

        Raises:
            RuntimeError: If iteration has not finished yet.
        """
        if self._result is None:
            raise RuntimeError("Shuffle has not finished; consume all steps first")
        return self._result

    def run(self) -> Sequence[T]:
        """Consume any remaining steps and return the result."""
        remaining = self._iterator if self._iterator is not None else iter(self)
        for _ in remaining:
            pass
        return self.result


def shuffle(
    sequence: Sequence[T],
    source: IndexSource | None = None,
    observer: StepObserver | StepCallback | None = None,
) -> Sequence[T]:
    """Shuffle a sequence with a one-off FisherYatesShuffler.

    Args:
        sequence: Sequence to permute; left unmodified.
        source: Optional index source. Defaults to ``default_source()``.
        observer: Optional observer notified after every swap.

    Returns:
        A new, uniformly permuted sequence of the same container type.
    """
    observers = [observer] if observer is not None else None
    return FisherYatesShuffler(source, observers=observers).shuffle(sequence)
