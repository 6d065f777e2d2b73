"""Deliberately biased shuffles used as negative controls.

A verifier that cannot tell these apart from FisherYatesShuffler is not
measuring anything. Neither function is ever used by the shuffle engine.

Both draw from an injected IndexSource, like the engine does, so their bias
comes from the algorithm and not from the randomness backend.
"""

from collections.abc import Sequence
from functools import cmp_to_key
from typing import TypeVar

from shufflax.core.index_source import IndexSource
from shufflax.engine.shuffler import default_source
from shufflax.utils.sequence_utils import clone_items, rebuild_sequence

T = TypeVar("T")


def naive_shuffle(sequence: Sequence[T], source: IndexSource | None = None) -> Sequence[T]:
    """Swap every position with one drawn from the full range ``[0, n)``.

    Produces ``n**n`` equally likely draw paths, which cannot map evenly onto
    ``n!`` permutations for ``n >= 3``.
    """
    source = source if source is not None else default_source()
    items = clone_items(sequence)
    n = len(items)
    for i in range(n):
        j = source.next(n)
        items[i], items[j] = items[j], items[i]
    return rebuild_sequence(sequence, items)


def comparator_sort_shuffle(
    sequence: Sequence[T], source: IndexSource | None = None
) -> Sequence[T]:
    """Sort with a comparator that answers -1 or +1 at random.

    The outcome depends on which comparisons the sort algorithm happens to
    make, so permutations reached with fewer comparisons are over-represented.
    """
    source = source if source is not None else default_source()
    items = clone_items(sequence)

    def random_sign(a, b) -> int:
        return 1 if source.next(2) else -1

    return rebuild_sequence(sequence, sorted(items, key=cmp_to_key(random_sign)))


BASELINES = {
    "naive": naive_shuffle,
    "comparator": comparator_sort_shuffle,
}
