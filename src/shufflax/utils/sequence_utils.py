"""Utility functions for copying and rebuilding sequences.

The shuffle engine permutes a plain Python list of elements. These helpers
turn an arbitrary input sequence into an independent working list and turn
the permuted list back into the input's container type:
- Type checking utilities (is_array, is_jax_array)
- Copying (clone_items) with deep-copy semantics by default
- Rebuilding (rebuild_sequence) for list, tuple, str, numpy and JAX arrays
"""

import copy
from collections.abc import Sequence
from typing import Any, Callable

import jax
import jax.numpy as jnp
import numpy as np


def is_array(x: Any) -> bool:
    """Check if x is a JAX or numpy array.

    Args:
        x: Value to check

    Returns:
        True if x is a JAX or numpy array, False otherwise
    """
    return isinstance(x, jax.Array | np.ndarray)


def is_jax_array(x: Any) -> bool:
    """Check if x is a JAX array."""
    return isinstance(x, jax.Array)


def clone_items(
    sequence: Sequence[Any],
    *,
    deep: bool = True,
    copier: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """Copy a sequence into an independent list of elements.

    Arrays are copied to host memory and split along axis 0, so the returned
    rows never alias the caller's buffer. Object-dtype arrays hold references,
    so their rows get the same deep copy (or ``copier``) as other sequences.
    For other sequences the whole element list is deep-copied in a single
    ``copy.deepcopy`` call, which also preserves sharing between elements of
    the copy without sharing anything with the input.

    Args:
        sequence: Input sequence (list, tuple, str, array or other sequence).
        deep: Whether to deep-copy elements. Ignored for numeric arrays.
        copier: Optional per-element copy function. Takes precedence over
            ``deep``; ignored for numeric arrays.

    Returns:
        A new list holding copies of the elements.

    Raises:
        ValueError: If an array input is zero-dimensional.
    """
    if is_array(sequence):
        host = np.array(sequence, copy=True)
        if host.ndim == 0:
            raise ValueError("Cannot shuffle a zero-dimensional array")
        if host.dtype != object:
            return list(host)
        sequence = list(host)

    if copier is not None:
        return [copier(item) for item in sequence]

    items = list(sequence)
    return copy.deepcopy(items) if deep else items


def rebuild_sequence(original: Sequence[Any], items: list[Any]) -> Sequence[Any]:
    """Rebuild a permuted element list as the container type of ``original``.

    Args:
        original: The sequence the elements were copied from.
        items: Permuted elements.

    Returns:
        ``items`` as a list, tuple, str, numpy array or JAX array, matching
        ``original``. Unknown sequence types come back as a list.
    """
    if is_array(original):
        dtype = np.dtype(original.dtype)
        if dtype == object:
            # np.array would merge equal-length list elements into a new axis
            host = np.empty(original.shape, dtype=object)
            for index, item in enumerate(items):
                host[index] = item
            return host
        host = np.array(items, dtype=dtype).reshape(original.shape)
        if is_jax_array(original):
            return jnp.asarray(host)
        return host

    if isinstance(original, str):
        return "".join(items)

    if isinstance(original, tuple):
        return tuple(items)

    return items
