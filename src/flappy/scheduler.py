"""
scheduler.py: Fire-once deferred tasks on a real-time clock.

Tasks are never cancelled. Callers that can go stale check their own
snapshot when the task fires.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class DeferredTask:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[DeferredTask] = []
        self._counter = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None]) -> DeferredTask:
        task = DeferredTask(self.clock() + delay, next(self._counter), callback)
        heapq.heappush(self._queue, task)
        return task

    def run_due(self, now: Optional[float] = None) -> int:
        """Runs every task whose time has come, oldest first. Never blocks."""
        if now is None:
            now = self.clock()
        ran = 0
        while self._queue and self._queue[0].due <= now:
            task = heapq.heappop(self._queue)
            task.callback()
            ran += 1
        return ran
