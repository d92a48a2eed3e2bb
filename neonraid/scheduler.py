"""Delayed callbacks driven by the game's virtual clock."""

import heapq
import itertools
from typing import Callable, List, Tuple

from neonraid.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class EventScheduler:
    """Runs callbacks once the virtual clock reaches their due time.

    The clock only moves when advance() is called, so timed transitions are
    reproducible: a test can step the game frame by frame and know exactly
    when a delayed effect applies.
    """

    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> float:
        """Schedule a callback to run after `delay_ms` of virtual time.

        Args:
            delay_ms: Delay from the current virtual time
            callback: Callable taking no arguments

        Returns:
            The virtual time the callback is due
        """
        due = self.now_ms + delay_ms
        # The counter keeps callbacks with equal due times in scheduling order
        heapq.heappush(self._queue, (due, next(self._counter), callback))
        return due

    def advance(self, dt_ms: float) -> int:
        """Move the clock forward and run every callback that became due.

        Returns:
            Number of callbacks run
        """
        self.now_ms += dt_ms
        ran = 0
        while self._queue and self._queue[0][0] <= self.now_ms:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran

    def clear(self) -> None:
        """Discard every pending callback without running it."""
        if self._queue:
            logger.debug("Discarding %d pending scheduled events", len(self._queue))
        self._queue = []
