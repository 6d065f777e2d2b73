"""Shufflax random index sources.

Importing this package registers the built-in backends ("python", "system",
"numpy", "jax") with the index source registry.
"""

from shufflax.sources.jax_source import JaxIndexSource
from shufflax.sources.numpy_source import NumpyIndexSource
from shufflax.sources.python_source import PythonIndexSource, SystemIndexSource
from shufflax.sources.scripted import RecordingIndexSource, ScriptedIndexSource


__all__ = [
    # Registered backends
    "JaxIndexSource",
    "NumpyIndexSource",
    "PythonIndexSource",
    "SystemIndexSource",
    # Deterministic test sources
    "RecordingIndexSource",
    "ScriptedIndexSource",
]
