"""Observer system for shuffle step notifications.

This module implements the observer pattern for per-step shuffle events.
Observers are called synchronously from inside the shuffle loop; they must
not draw from the shuffler's index source or mutate the event.
"""

import logging
from typing import Callable

from shufflax.engine.events import StepEvent

StepCallback = Callable[[StepEvent], None]


class StepObserver:
    """Base class for step observers.

    Step observers receive a notification for every iteration of the
    Fisher-Yates loop.
    """

    def on_step(self, event: StepEvent) -> None:
        """Handle one shuffle step.

        Args:
            event: The step that was just applied.
        """
        raise NotImplementedError("Subclasses must implement on_step()")


class CallbackObserver(StepObserver):
    """Adapts a plain callable to the StepObserver interface."""

    def __init__(self, callback: StepCallback):
        self.callback = callback

    def on_step(self, event: StepEvent) -> None:
        self.callback(event)

    def __eq__(self, other) -> bool:
        return isinstance(other, CallbackObserver) and other.callback == self.callback

    def __hash__(self) -> int:
        return hash(self.callback)


def as_observer(observer: StepObserver | StepCallback) -> StepObserver:
    """Wrap callables so both forms can be registered.

    Raises:
        TypeError: If ``observer`` is neither a StepObserver nor callable.
    """
    if isinstance(observer, StepObserver):
        return observer
    if callable(observer):
        return CallbackObserver(observer)
    raise TypeError(f"Observer must be a StepObserver or callable, got {type(observer).__name__}")


class ObserverRegistry:
    """Registry of observers notified on every shuffle step."""

    def __init__(self):
        """Initialize a new, empty ObserverRegistry."""
        self._observers: list[StepObserver] = []

    def register(self, observer: StepObserver | StepCallback) -> StepObserver:
        """Register an observer.

        Args:
            observer: StepObserver instance or callable taking a StepEvent.

        Returns:
            The registered StepObserver (the wrapper for callables).
        """
        wrapped = as_observer(observer)
        if wrapped not in self._observers:
            self._observers.append(wrapped)
        return wrapped

    def unregister(self, observer: StepObserver | StepCallback) -> bool:
        """Unregister an observer.

        Args:
            observer: Observer (or callable) to unregister.

        Returns:
            True if the observer was found and removed, False otherwise.
        """
        wrapped = as_observer(observer)
        if wrapped in self._observers:
            self._observers.remove(wrapped)
            return True
        return False

    def notify(self, event: StepEvent) -> None:
        """Notify all observers of a step.

        Args:
            event: The step that was just applied.
        """
        for observer in self._observers:
            observer.on_step(event)

    def clear(self) -> None:
        """Remove all registered observers."""
        self._observers = []

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)


class StepRecorder(StepObserver):
    """Collects every step event it sees, in order."""

    def __init__(self):
        self.events: list[StepEvent] = []

    def on_step(self, event: StepEvent) -> None:
        self.events.append(event)

    @property
    def swaps(self) -> list[tuple[int, int]]:
        """The ``(i, j)`` pairs seen so far."""
        return [(e.current_index, e.chosen_index) for e in self.events]

    def clear(self) -> None:
        self.events = []


class LoggingStepObserver(StepObserver):
    """Logs each shuffle step.

    Args:
        logger: Logger to write to. Defaults to this module's logger.
        level: Logging level for step messages.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_step(self, event: StepEvent) -> None:
        if event.is_swap:
            self.logger.log(
                self.level,
                "step i=%d j=%d swap %r <-> %r",
                event.current_index,
                event.chosen_index,
                event.state_before[event.current_index],
                event.state_before[event.chosen_index],
            )
        else:
            self.logger.log(self.level, "step i=%d no swap needed", event.current_index)
