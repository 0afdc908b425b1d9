"""
Debounced deferred work.
A Debouncer keeps at most one pending DeferredTask; scheduling again cancels
the previous one, so only the last call in a burst ever runs. Time comes
from an injectable clock and tasks only fire from poll(), which the main
loop calls once per frame.
"""
import time
from typing import Callable


class DeferredTask:
    """A callback due at a point in time that can be cancelled before then."""

    def __init__(self, due_at: float, callback: Callable[[], None]):
        """Initialize a deferred task.

        Args:
            due_at: Clock reading at which the task becomes due
            callback: Work to run
        """
        self._due_at: float = due_at
        self._callback: Callable[[], None] = callback
        self._cancelled: bool = False
        self._done: bool = False

    @property
    def due_at(self) -> float:
        return self._due_at

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def cancel(self) -> None:
        """Stop the task from running. No effect once it has run."""
        if not self._done:
            self._cancelled = True

    def is_due(self, now: float) -> bool:
        return not self._cancelled and not self._done and now >= self._due_at

    def run(self) -> None:
        """Run the callback once."""
        if self._cancelled or self._done:
            return
        self._done = True
        self._callback()

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"DeferredTask(due_at={self._due_at:.3f}, cancelled={self._cancelled}, done={self._done})"


class Debouncer:
    """Run the latest scheduled callback after a quiet period."""

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        """Initialize the debouncer.

        Args:
            delay: Seconds of inactivity before the pending task runs
            clock: Returns the current time in seconds
        """
        self._delay: float = delay
        self._clock: Callable[[], float] = clock
        self._pending: DeferredTask | None = None

    @property
    def pending(self) -> DeferredTask | None:
        """Get the task waiting to run, if any."""
        return self._pending

    def schedule(self, callback: Callable[[], None]) -> DeferredTask:
        """Cancel any pending task and schedule callback after the delay."""
        self.cancel()
        self._pending = DeferredTask(self._clock() + self._delay, callback)
        return self._pending

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def poll(self) -> bool:
        """Run the pending task if its time has come.

        Returns:
            True if a task ran during this call
        """
        task = self._pending
        if task is None or not task.is_due(self._clock()):
            return False
        self._pending = None
        task.run()
        return True

    def flush(self) -> bool:
        """Run the pending task now, regardless of its due time."""
        task = self._pending
        if task is None:
            return False
        self._pending = None
        task.run()
        return True
