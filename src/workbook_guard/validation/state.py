"""Progress and cancellation state shared between a run and its observers."""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger(__name__)

ProgressListener = Callable[[int], None]


def percent_complete(completed: int, total: int) -> int:
    """Whole-number percentage, rounding halves up."""
    if total <= 0:
        return 0
    return math.floor(completed / total * 100 + 0.5)


@dataclass
class ValidationState:
    """Observable progress (0-100) and a cancellation flag.

    One instance is shared by reference between the engine and the
    embedding application: the engine writes progress, the application
    reads it (or subscribes with ``on_progress``) and may call ``cancel``
    at any time, from any thread.

    Attributes:
        progress: Percentage of completed steps
    """

    progress: int = 0
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)
    _listeners: List[ProgressListener] = field(default_factory=list, repr=False)

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Request the running validation to stop at its next checkpoint."""
        logger.debug("Validation cancellation requested")
        self._cancelled.set()
        self.set_progress(0)

    def reset(self) -> None:
        """Clear the cancellation flag and progress at the start of a run."""
        self._cancelled.clear()
        self.set_progress(0)

    def set_progress(self, value: int) -> None:
        self.progress = max(0, min(100, value))
        for listener in list(self._listeners):
            listener(self.progress)

    def on_progress(self, listener: ProgressListener) -> Callable[[], None]:
        """Register a callback invoked with every progress update.

        Returns a function that removes the callback again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class ProgressTracker:
    """Counts completed steps of one run and publishes the percentage."""

    def __init__(self, state: ValidationState, total_steps: int) -> None:
        self.state = state
        self.total_steps = total_steps
        self.completed_steps = 0

    def advance(self) -> int:
        if self.completed_steps < self.total_steps:
            self.completed_steps += 1
        percent = percent_complete(self.completed_steps, self.total_steps)
        self.state.set_progress(percent)
        return percent
