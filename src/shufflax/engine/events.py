"""Step events emitted by the shuffle engine."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StepEvent:
    """One iteration of the Fisher-Yates loop.

    Attributes:
        current_index: Position ``i`` being finalized.
        chosen_index: Position ``j`` drawn from ``[0, i]``.
        state_before: Snapshot of the working copy before the swap.
    """

    current_index: int
    chosen_index: int
    state_before: tuple[Any, ...]

    @property
    def is_swap(self) -> bool:
        """False when ``i == j``, i.e. the element is already in place."""
        return self.current_index != self.chosen_index

    @property
    def state_after(self) -> tuple[Any, ...]:
        """Snapshot of the working copy after the swap."""
        state = list(self.state_before)
        i, j = self.current_index, self.chosen_index
        state[i], state[j] = state[j], state[i]
        return tuple(state)

    def describe(self) -> str:
        """One-line human-readable description of the step."""
        if not self.is_swap:
            return f"i={self.current_index}: no swap needed"
        return f"i={self.current_index}: swap with j={self.chosen_index}"
