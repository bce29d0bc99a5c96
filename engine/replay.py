"""
replay.py — Step-Index Playback Cursor
======================================
Wraps a finished trace (a tuple of TraceSteps) with next / prev / goto
navigation.  The trace is already fully materialised, so the cursor
never runs an algorithm and holds no timing; the game's own timer
decides when to call next_step().

State:
    index -1 means "before the first step" (nothing highlighted yet).
"""

from typing import Optional, Sequence

from algorithms.step import TraceStep


class Replay:
    """
    Attributes:
        steps       : The trace being replayed.
        current_idx : Index into `steps` currently displayed (-1 = none).
    """

    def __init__(self, steps: Sequence[TraceStep]):
        self.steps:       Sequence[TraceStep] = tuple(steps)
        self.current_idx: int                 = -1

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.steps):
            return False
        self.current_idx += 1
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the first step."""
        if self.current_idx <= 0:
            return False
        self.current_idx -= 1
        return True

    def goto_step(self, idx: int) -> bool:
        if 0 <= idx < len(self.steps):
            self.current_idx = idx
            return True
        return False

    def rewind(self) -> None:
        self.current_idx = -1

    def jump_to_end(self) -> None:
        self.current_idx = len(self.steps) - 1

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[TraceStep]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def is_finished(self) -> bool:
        return self.current_idx == len(self.steps) - 1

    def __len__(self) -> int:
        return len(self.steps)
