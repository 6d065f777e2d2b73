"""Index source registry for Shufflax.

This module provides a registry of random index source backends, allowing a
source to be selected by name from configuration or the command line.
Built-in sources register themselves when ``shufflax.sources`` is imported.
"""

import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable

from shufflax.core.config import ShuffleConfig
from shufflax.core.index_source import IndexSource

if TYPE_CHECKING:
    from shufflax.engine.shuffler import FisherYatesShuffler

logger = logging.getLogger(__name__)

# Type alias for index source constructors
IndexSourceFactory = Callable[..., IndexSource]

# Populated by the @register_index_source decorator
_INDEX_SOURCE_REGISTRY: dict[str, IndexSourceFactory] = {}


def register_index_source(name: str) -> Callable[[IndexSourceFactory], IndexSourceFactory]:
    """Decorator registering an index source constructor under ``name``.

    Args:
        name: Name used in configuration (``[shuffle] source = "<name>"``).

    Returns:
        Decorator that registers and returns the constructor unchanged.

    Raises:
        ValueError: If another constructor is already registered under ``name``.
    """

    def decorator(factory: IndexSourceFactory) -> IndexSourceFactory:
        existing = _INDEX_SOURCE_REGISTRY.get(name)
        if existing is not None and existing is not factory:
            raise ValueError(f"Index source '{name}' is already registered")
        _INDEX_SOURCE_REGISTRY[name] = factory
        return factory

    return decorator


def _load_builtin_sources() -> None:
    import shufflax.sources  # noqa: F401


def get_index_source_factory(name: str) -> IndexSourceFactory:
    """Look up a registered index source constructor.

    Args:
        name: Registered source name.

    Returns:
        The constructor.

    Raises:
        KeyError: If no source is registered under ``name``.
    """
    _load_builtin_sources()
    if name not in _INDEX_SOURCE_REGISTRY:
        available = ", ".join(sorted(_INDEX_SOURCE_REGISTRY))
        raise KeyError(f"Unknown index source '{name}'. Available: {available}")
    return _INDEX_SOURCE_REGISTRY[name]


def is_index_source_registered(name: str) -> bool:
    """Check whether ``name`` is a registered index source."""
    _load_builtin_sources()
    return name in _INDEX_SOURCE_REGISTRY


def list_index_sources() -> list[str]:
    """Return the sorted names of all registered index sources."""
    _load_builtin_sources()
    return sorted(_INDEX_SOURCE_REGISTRY)


def create_index_source(name: str, seed: int | None = None, **kwargs: Any) -> IndexSource:
    """Instantiate a registered index source.

    Keyword arguments the constructor does not accept are dropped, so a
    single call site can pass e.g. ``stream_name`` regardless of backend.
    A seed given to an unseedable source is ignored with a warning.

    Args:
        name: Registered source name.
        seed: Optional seed.
        **kwargs: Extra constructor arguments.

    Returns:
        A new index source.
    """
    factory = get_index_source_factory(name)

    target = factory.__init__ if inspect.isclass(factory) else factory
    params = inspect.signature(target).parameters
    accepted = {k: v for k, v in kwargs.items() if k in params}

    if "seed" in params:
        accepted["seed"] = seed
    elif seed is not None:
        logger.warning("Index source '%s' does not accept a seed; ignoring seed=%s", name, seed)

    return factory(**accepted)


def create_shuffler(config: ShuffleConfig) -> "FisherYatesShuffler":
    """Build a shuffle engine from a ShuffleConfig.

    Args:
        config: Validated shuffle configuration.

    Returns:
        A FisherYatesShuffler drawing from the configured source.
    """
    from shufflax.engine.shuffler import FisherYatesShuffler

    source = create_index_source(config.source, seed=config.seed, stream_name=config.stream_name)
    return FisherYatesShuffler(source, deep_copy=config.deep_copy)
