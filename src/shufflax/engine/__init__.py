"""Shufflax shuffle engine.

This module provides the Fisher-Yates shuffle, its step events and the
observer interfaces used to watch it run.
"""

from shufflax.engine.events import StepEvent
from shufflax.engine.observers import (
    CallbackObserver,
    LoggingStepObserver,
    ObserverRegistry,
    StepObserver,
    StepRecorder,
)
from shufflax.engine.shuffler import (
    FisherYatesShuffler,
    StepwiseShuffle,
    default_source,
    shuffle,
)


__all__ = [
    "FisherYatesShuffler",
    "StepwiseShuffle",
    "default_source",
    "shuffle",
    "StepEvent",
    # Observers
    "StepObserver",
    "CallbackObserver",
    "ObserverRegistry",
    "StepRecorder",
    "LoggingStepObserver",
]
