"""Environment variable integration for configuration.

This module provides utilities for integrating environment variables with
configuration files, allowing for environment-specific overrides.
"""

import os
from typing import Any

ENV_PREFIX = "SHUFFLAX_"


def get_env_value(env_var: str, default: Any = None, prefix: str = ENV_PREFIX) -> str | None:
    """Get a value from an environment variable.

    Args:
        env_var: The name of the environment variable (without prefix)
        default: Default value to return if the environment variable is not set
        prefix: Prefix to apply to the environment variable name

    Returns:
        The environment variable value, or the default if not set
    """
    return os.environ.get(f"{prefix}{env_var}", default)


def apply_environment_overrides(
    config: dict[str, Any], prefix: str = ENV_PREFIX, separator: str = "__"
) -> dict[str, Any]:
    """Apply environment variable overrides to a configuration dictionary.

    Environment variables override nested configuration values by naming
    convention. To override ``config["verification"]["trials"]`` set
    ``SHUFFLAX_VERIFICATION__TRIALS``. Variables without the separator (such as
    ``SHUFFLAX_LOG_LEVEL``) are not configuration paths and are ignored.

    Args:
        config: The configuration dictionary to apply overrides to
        prefix: Prefix for environment variables to consider
        separator: Separator used to indicate nested keys

    Returns:
        A copy of the configuration with environment overrides applied
    """
    result = {k: (dict(v) if isinstance(v, dict) else v) for k, v in config.items()}

    env_vars = {k: v for k, v in os.environ.items() if k.startswith(prefix)}

    for env_name, env_value in sorted(env_vars.items()):
        config_path = env_name[len(prefix) :]
        if separator not in config_path:
            continue

        keys = [k.lower() for k in config_path.split(separator) if k]
        if not keys:
            continue

        _set_nested_value(result, keys, _convert_value(env_value))

    return result


def _convert_value(value: str) -> Any:
    """Convert an environment string to bool, None, int, float or str.

    Args:
        value: The string value to convert

    Returns:
        The converted value
    """
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if lowered in ("none", "null"):
        return None

    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return value


def _set_nested_value(config: dict[str, Any], keys: list[str], value: Any) -> None:
    """Set a value in a nested dictionary using a list of keys.

    Args:
        config: The dictionary to modify
        keys: List of keys indicating the path to the value
        value: The value to set
    """
    if len(keys) == 1:
        config[keys[0]] = value
        return

    current_key = keys[0]
    if current_key not in config or not isinstance(config[current_key], dict):
        config[current_key] = {}
    else:
        config[current_key] = dict(config[current_key])

    _set_nested_value(config[current_key], keys[1:], value)
