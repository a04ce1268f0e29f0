"""
Deferred calls for the game engine.

The engine never sleeps. When it has to wait (computer "thinking",
pause between rounds) it hands a callback to a scheduler. Front ends
plug in their own event loop; DeferredScheduler is a plain queue
that a loop polls, and that tests can drive by hand.
"""

import heapq
import itertools
import time
from typing import Callable, List, Tuple


class DeferredScheduler:
    """
    A queue of callbacks ordered by the time they are due.

    Usage:
        scheduler = DeferredScheduler()
        scheduler.call_later(1.0, engine.computer_turn)
        ...
        scheduler.run_due()    # call this from your main loop
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the scheduler.

        Args:
            clock: Returns the current time in seconds.
        """
        self.clock = clock
        self._queue: List[Tuple[float, int, Callable, tuple]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable, *args):
        """
        Run callback(*args) once, `delay` seconds from now.

        Calls due at the same time run in the order they were scheduled.
        """
        due = self.clock() + max(0.0, delay)
        heapq.heappush(self._queue, (due, next(self._counter), callback, args))

    @property
    def pending(self) -> int:
        """Number of calls still waiting."""
        return len(self._queue)

    def next_due(self) -> float:
        """When the next call is due, or inf if nothing is queued."""
        return self._queue[0][0] if self._queue else float('inf')

    def run_due(self) -> int:
        """
        Run every call that is due by now.

        Returns:
            Number of calls that ran.
        """
        ran = 0
        now = self.clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, callback, args = heapq.heappop(self._queue)
            callback(*args)
            ran += 1
        return ran

    def run_next(self) -> bool:
        """
        Run the earliest queued call without waiting for it.

        Returns:
            False if nothing was queued.
        """
        if not self._queue:
            return False

        _, _, callback, args = heapq.heappop(self._queue)
        callback(*args)
        return True

    def run_all(self, limit: int = 1000) -> int:
        """
        Run queued calls (including ones they schedule) until none remain.

        Args:
            limit: Stop after this many calls.

        Returns:
            Number of calls that ran.
        """
        ran = 0
        while ran < limit and self.run_next():
            ran += 1
        return ran
