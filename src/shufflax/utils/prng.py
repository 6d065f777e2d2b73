"""PRNG handling utilities for Shufflax.

This module provides utilities for managing JAX random number generation,
focusing on compatibility with Flax NNX and JAX's functional paradigm.

Key Utilities:
    create_rngs: Creates `flax.nnx.Rngs` objects with multiple named streams
                 derived from a single master seed.

Usage Note:
    The JAX-backed index source draws one fresh key per index from its
    stream (e.g., `rngs["shuffling"]()`), so a fixed seed replays the exact
    same sequence of draws.
"""

import flax.nnx as nnx
import jax

# Standard stream names for consistency
DEFAULT_RNG_STREAMS = ["shuffling", "default"]


def create_rngs(seed: int | None = None, streams: list[str] | None = None) -> nnx.Rngs:
    """Create an Rngs object with the specified streams.

    For simple cases, you can use nnx.Rngs directly:
        rngs = nnx.Rngs(42)  # Single default stream
        rngs = nnx.Rngs(shuffling=0)  # Named stream

    Args:
        seed: Optional seed for PRNG. Defaults to 0.
        streams: List of stream names. Defaults to DEFAULT_RNG_STREAMS.

    Returns:
        An nnx.Rngs object with keys for each stream.
    """
    if streams is None:
        streams = DEFAULT_RNG_STREAMS

    seed = seed if seed is not None else 0
    key = jax.random.key(seed)
    keys = jax.random.split(key, len(streams))
    return nnx.Rngs(**{name: keys[i] for i, name in enumerate(streams)})
