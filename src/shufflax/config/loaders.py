"""TOML configuration loading and saving utilities.

This module provides functions for loading and saving TOML configuration files
holding the ``[shuffle]`` and ``[verification]`` settings of a Shufflax run.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Union

import tomli_w  # type: ignore

from shufflax.config.environment import apply_environment_overrides
from shufflax.core.config import ShuffleConfig, VerificationConfig

logger = logging.getLogger(__name__)

SHUFFLE_SECTION = "shuffle"
VERIFICATION_SECTION = "verification"


def load_toml(config_path: Union[str, Path]) -> dict[str, Any]:
    """Load a TOML configuration file.

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Dictionary containing the parsed TOML configuration

    Raises:
        FileNotFoundError: If the configuration file does not exist
        tomllib.TOMLDecodeError: If the configuration file is invalid TOML
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def save_toml(config: dict[str, Any], config_path: Union[str, Path]) -> None:
    """Save a configuration dictionary to a TOML file.

    Args:
        config: Dictionary containing the configuration to save
        config_path: Path to save the TOML configuration file

    Raises:
        OSError: If the file cannot be written
    """
    config_path = Path(config_path)

    # Create parent directories if they don't exist
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with config_path.open("wb") as f:
        tomli_w.dump(config, f)


def deep_merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries.

    Values from ``override`` take precedence. Nested dictionaries are merged
    recursively; neither input is modified.

    Args:
        base: Base dictionary to merge into
        override: Dictionary with values that override the base

    Returns:
        A new dictionary containing the merged values
    """
    result = base.copy()

    for key, override_value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
            result[key] = deep_merge_dict(result[key], override_value)
        else:
            result[key] = override_value

    return result


def load_settings(
    config_path: Union[str, Path, None] = None,
    *,
    use_environment: bool = True,
) -> tuple[ShuffleConfig, VerificationConfig]:
    """Build validated shuffle and verification configs.

    Defaults are overlaid with the TOML file (if given) and then with
    ``SHUFFLAX_``-prefixed environment variables (if enabled), e.g.
    ``SHUFFLAX_VERIFICATION__TRIALS=5000``.

    Args:
        config_path: Optional path to a TOML file with ``[shuffle]`` and
            ``[verification]`` tables.
        use_environment: Whether to apply environment overrides.

    Returns:
        Tuple of (ShuffleConfig, VerificationConfig).

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ValueError: If a section is not a table or a value fails validation.
    """
    raw: dict[str, Any] = {SHUFFLE_SECTION: {}, VERIFICATION_SECTION: {}}

    if config_path is not None:
        raw = deep_merge_dict(raw, load_toml(config_path))
        logger.info("Loaded configuration from %s", config_path)

    if use_environment:
        raw = apply_environment_overrides(raw)

    for section in (SHUFFLE_SECTION, VERIFICATION_SECTION):
        if not isinstance(raw.get(section), dict):
            raise ValueError(f"[{section}] must be a table, got {raw.get(section)!r}")

    try:
        shuffle_config = ShuffleConfig(**raw[SHUFFLE_SECTION])
        verification_config = VerificationConfig(**raw[VERIFICATION_SECTION])
    except TypeError as e:
        # Unknown keys surface as TypeError from the dataclass constructor
        raise ValueError(f"Invalid configuration: {e}") from e

    return shuffle_config, verification_config
