"""Shufflax utilities module.

This module exposes common utility submodules for working with:
- Random number generation (`prng`)
- Sequence copying and rebuilding (`sequence_utils`)
"""

from . import prng, sequence_utils

__all__ = ["prng", "sequence_utils"]
