"""
loop.py: Fixed-cadence update clock, decoupled from the draw rate.
"""

from typing import Callable

from .constants import TICK_TIME
from .logger import get_logger

log = get_logger(__name__)


class FixedStepLoop:
    """
    Accumulates real elapsed time and runs whole fixed steps out of it.
    Draws can happen between calls at any rate; only steps move the simulation.
    """

    def __init__(self, step: Callable[[], None], tick_time: float = TICK_TIME, max_steps: int = 5):
        self.step = step
        self.tick_time = tick_time
        self.max_steps = max_steps
        self.accumulator = 0.0
        self.ticks = 0

    def advance(self, elapsed: float) -> int:
        """Feeds elapsed seconds in. Returns how many steps ran."""
        self.accumulator += elapsed
        ran = 0
        while self.accumulator >= self.tick_time:
            if ran == self.max_steps:
                # Stalled too long (window drag, debugger): drop the backlog.
                log.debug("Dropping %.3fs of simulation backlog", self.accumulator)
                self.accumulator = 0.0
                break
            self.accumulator -= self.tick_time
            self.step()
            ran += 1
        self.ticks += ran
        return ran
