"""
physics_pipes.py: Pipe spawning, scrolling, eviction, collision and scoring.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .constants import PIPE_EVICT_COUNT, PIPE_WINDOW_CAPACITY
from .data_models import Bird, Pipe, SimulationConfig
from .logger import get_logger

log = get_logger(__name__)


def overlaps_column(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    return (bird.x + config.radius_x > pipe.x and
            bird.x - config.radius_x < pipe.x + config.pipe_w)


def hits_top_pipe(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    return (overlaps_column(bird, pipe, config) and
            bird.y + config.radius_y > pipe.y and
            bird.y - config.radius_y < pipe.y + config.pipe_h)


def hits_bottom_pipe(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    bottom_y = pipe.bottom_y(config)
    return (overlaps_column(bird, pipe, config) and
            bird.y + config.radius_y > bottom_y and
            bird.y - config.radius_y < bottom_y + config.pipe_h)


def hits_ceiling(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    """Leaving through the top of the screen inside a pipe column is a hit."""
    return overlaps_column(bird, pipe, config) and bird.y <= 0


def collides(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    return (hits_top_pipe(bird, pipe, config) or
            hits_bottom_pipe(bird, pipe, config) or
            hits_ceiling(bird, pipe, config))


def has_passed(bird: Bird, pipe: Pipe, config: SimulationConfig) -> bool:
    """True once the pipe's trailing edge is strictly behind the bird."""
    return pipe.x + config.pipe_w < bird.x - config.radius_x


@dataclass
class PipeWindow:
    """
    The ordered pipes currently alive, oldest first.
    Capacity, not position, governs eviction.
    """
    pipes: List[Pipe] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)
    capacity: int = PIPE_WINDOW_CAPACITY

    def __len__(self) -> int:
        return len(self.pipes)

    def __iter__(self):
        return iter(self.pipes)

    def reset(self):
        self.pipes = []

    def spawn(self, config: SimulationConfig) -> Pipe:
        """Appends a pipe at the right edge with an upward-biased gap."""
        offset = config.max_upward_offset * (self.rng.random() + 1)
        pipe = Pipe(x=float(config.width), y=offset)
        self.pipes.append(pipe)

        if len(self.pipes) == self.capacity:
            del self.pipes[:PIPE_EVICT_COUNT]
            log.debug("Evicted %d oldest pipes", PIPE_EVICT_COUNT)
        return pipe

    def step(self, bird: Bird, config: SimulationConfig, frames: int) -> tuple[bool, int]:
        """
        One Playing tick: spawn on cadence, test collisions, scroll, score.
        Returns (collided, pipes newly scored). A pipe that passes the bird
        scores even on the tick the bird hits something.
        """
        if frames % config.spawn_interval == 0:
            self.spawn(config)

        collided = any(collides(bird, pipe, config) for pipe in self.pipes)

        for pipe in self.pipes:
            pipe.x -= config.pipe_speed

        scored = 0
        for pipe in self.pipes:
            if not pipe.scored and has_passed(bird, pipe, config):
                pipe.scored = True
                scored += 1
        return collided, scored
