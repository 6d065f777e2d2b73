"""Index source backed by JAX's counter-based PRNG.

Each draw splits a fresh key off a named ``flax.nnx.Rngs`` stream, so the
sequence of indices is a pure function of the stream's seed and the number
of draws made so far.
"""

import flax.nnx as nnx
import jax
import jax.numpy as jnp

from shufflax.config.registry import register_index_source
from shufflax.core.index_source import IndexSource
from shufflax.utils.prng import create_rngs

# jax.random.randint works in int32 unless jax_enable_x64 is set
_MAX_BOUND = int(jnp.iinfo(jnp.int32).max)


@register_index_source("jax")
class JaxIndexSource(IndexSource):
    """Index source drawing from an ``nnx.Rngs`` stream.

    Args:
        seed: Optional seed used to build the stream when ``rngs`` is not given.
            Defaults to 0, matching ``create_rngs``.
        rngs: Optional existing Rngs object to draw from.
        stream_name: Name of the stream to draw keys from.

    Raises:
        ValueError: If ``rngs`` does not contain ``stream_name``.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        rngs: nnx.Rngs | None = None,
        stream_name: str = "shuffling",
    ):
        self.seed = seed
        self.stream_name = stream_name
        if rngs is None:
            rngs = create_rngs(seed=seed, streams=[stream_name])
        if stream_name not in rngs:
            raise ValueError(f"Rngs object has no stream named '{stream_name}'")
        self.rngs = rngs
        self._base_key = self.rngs[self.stream_name].key.get_value()

    def _draw(self, bound: int) -> int:
        if bound > _MAX_BOUND:
            raise ValueError(f"bound {bound} exceeds the int32 range supported by jax.random")
        key = self.rngs[self.stream_name]()
        return int(jax.random.randint(key, (), 0, bound))

    def reset(self, seed: int | None = None) -> None:
        """Restart the stream from its original key, or from a new seed."""
        if seed is not None:
            self.seed = seed
            self.rngs = create_rngs(seed=seed, streams=[self.stream_name])
            self._base_key = self.rngs[self.stream_name].key.get_value()
        else:
            self.rngs = nnx.Rngs(**{self.stream_name: self._base_key})

    def __repr__(self) -> str:
        return f"JaxIndexSource(seed={self.seed!r}, stream_name={self.stream_name!r})"
