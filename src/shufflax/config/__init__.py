"""Configuration management for Shufflax.

This package provides utilities for loading, validating, and managing
configuration for shuffle and verification runs.
"""

from shufflax.config.environment import (
    apply_environment_overrides,
    get_env_value,
)
from shufflax.config.loaders import deep_merge_dict, load_settings, load_toml, save_toml
from shufflax.config.registry import (
    create_index_source,
    create_shuffler,
    get_index_source_factory,
    is_index_source_registered,
    list_index_sources,
    register_index_source,
)


__all__ = [
    # Loaders
    "load_toml",
    "save_toml",
    "deep_merge_dict",
    "load_settings",
    # Environment
    "apply_environment_overrides",
    "get_env_value",
    # Registry
    "register_index_source",
    "get_index_source_factory",
    "is_index_source_registered",
    "list_index_sources",
    "create_index_source",
    "create_shuffler",
]
