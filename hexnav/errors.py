"""Exceptions raised by the navigation engine."""

from __future__ import annotations

from .cells import Key


class PathNotFound(LookupError):
    """Raised when the goal cannot be reached from the start."""

    def __init__(self, start: Key, goal: Key) -> None:
        super().__init__(f"no path available from {start} to {goal}")
        self.start = start
        self.goal = goal
