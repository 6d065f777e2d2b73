"""Canonical keys for bucketing shuffle outcomes."""

import dataclasses
from collections.abc import Hashable, Mapping, Set
from typing import Any

import numpy as np

from shufflax.utils.sequence_utils import is_array


def _freeze(value: Any) -> Hashable:
    """Convert a (possibly nested, possibly mutable) value to a hashable one."""
    if isinstance(value, np.generic):
        return value.item()
    if is_array(value):
        return _freeze(np.asarray(value).tolist())
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Mapping):
        return tuple((_freeze(k), _freeze(v)) for k, v in value.items())
    if isinstance(value, Set):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = tuple(
            (f.name, _freeze(getattr(value, f.name))) for f in dataclasses.fields(value)
        )
        return (type(value).__qualname__, fields)
    try:
        hash(value)
    except TypeError:
        return _freeze_unhashable(value)
    return value


def _freeze_unhashable(value: Any) -> Hashable:
    """Value-based key for an object that defines equality but not hashing."""
    name = type(value).__qualname__
    if hasattr(value, "__dict__"):
        return (name, _freeze(vars(value)))
    return (name, repr(value))


def canonical_key(sequence: Any) -> tuple:
    """Order-preserving, hashable key for a sequence's contents.

    Two sequences holding equal elements in the same order get equal keys,
    whatever their container type or how they were built: ``[1, 2]``,
    ``(1, 2)`` and ``np.array([1, 2])`` all map to ``(1, 2)``. Strings map to
    a tuple of their characters. Dataclass instances and other unhashable
    elements are keyed by their type name and field values.

    Args:
        sequence: A shuffled sequence.

    Returns:
        Tuple of hashable element values.
    """
    if isinstance(sequence, str):
        return tuple(sequence)
    if is_array(sequence):
        return tuple(_freeze(np.asarray(sequence).tolist()))
    return tuple(_freeze(item) for item in sequence)


def format_key(key: tuple) -> str:
    """Render a canonical key for tables and logs."""
    return "[" + ", ".join(str(part) for part in key) + "]"
