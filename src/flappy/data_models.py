"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    BIRD_H_RATIO, BIRD_RADIUS_X_RATIO, BIRD_RADIUS_Y_RATIO, BIRD_REST_Y_RATIO,
    BIRD_W_RATIO, BIRD_X_RATIO, FOREGROUND_ASPECT, FOREGROUND_W_RATIO,
    FOREGROUND_Y_RATIO, GRAVITY_RATIO, JUMP_RATIO, MEDAL_THRESHOLDS,
    PIPE_GAP_RATIO, PIPE_H_RATIO, PIPE_SPAWN_INTERVAL_TICKS,
    PIPE_SPAWN_RANGE_RATIO, PIPE_SPEED_RATIO, PIPE_W_RATIO,
    VIEWPORT_ASPECT, VIEWPORT_MARGIN,
)


class RunState(Enum):
    HOME = "home"
    GET_READY = "get_ready"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Sound(Enum):
    """Named events the presentation layer turns into audio."""
    FLAP = "flap"
    HIT = "hit"
    DIE = "die"
    POINT = "point"
    SWOOSH = "swoosh"


class Medal(Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


def medal_for(score: int) -> Optional[Medal]:
    """Returns the medal earned by a final score, or None below ten points."""
    for threshold, name in MEDAL_THRESHOLDS:
        if score >= threshold:
            return Medal(name)
    return None


def viewport_for_display(display_height: int) -> tuple[int, int]:
    """Fits the portrait playfield into a display of the given height."""
    height = display_height - VIEWPORT_MARGIN
    width = int(height * VIEWPORT_ASPECT) - VIEWPORT_MARGIN
    return width, height


@dataclass(frozen=True)
class SimulationConfig:
    """Every size-derived simulation value. Rebuilt from scratch on resize."""
    width: float
    height: float

    gravity: float
    jump: float
    bird_x: float
    bird_rest_y: float
    bird_w: float
    bird_h: float
    radius_x: float
    radius_y: float

    pipe_w: float
    pipe_h: float
    pipe_gap: float
    pipe_speed: float
    spawn_interval: int
    spawn_range: float

    foreground_y: float
    foreground_w: float
    foreground_h: float

    @classmethod
    def from_viewport(cls, width: float, height: float) -> "SimulationConfig":
        foreground_w = width * FOREGROUND_W_RATIO
        return cls(
            width=width,
            height=height,
            gravity=height * GRAVITY_RATIO,
            jump=height * JUMP_RATIO,
            bird_x=width * BIRD_X_RATIO,
            bird_rest_y=height * BIRD_REST_Y_RATIO,
            bird_w=width * BIRD_W_RATIO,
            bird_h=height * BIRD_H_RATIO,
            radius_x=width * BIRD_RADIUS_X_RATIO,
            radius_y=height * BIRD_RADIUS_Y_RATIO,
            pipe_w=width * PIPE_W_RATIO,
            pipe_h=height * PIPE_H_RATIO,
            pipe_gap=height * PIPE_GAP_RATIO,
            pipe_speed=width * PIPE_SPEED_RATIO,
            spawn_interval=PIPE_SPAWN_INTERVAL_TICKS,
            spawn_range=height * PIPE_SPAWN_RANGE_RATIO,
            foreground_y=height * FOREGROUND_Y_RATIO,
            foreground_w=foreground_w,
            foreground_h=foreground_w * FOREGROUND_ASPECT,
        )

    @property
    def max_upward_offset(self) -> float:
        """Highest a pipe may be lifted above y=0 (always negative)."""
        return -self.spawn_range

    @property
    def foreground_speed(self) -> float:
        return self.pipe_speed


@dataclass
class Bird:
    """The bird. x is fixed for the whole run; pipes move instead."""
    x: float = 0.0
    y: float = 0.0
    velocity: float = 0.0
    rotation: float = 0.0       # degrees, positive tilts the beak down
    frame: int = 0


@dataclass
class Pipe:
    """A pipe pair. y is the top pipe's top edge, usually above the screen."""
    x: float
    y: float
    scored: bool = False

    def bottom_y(self, config: SimulationConfig) -> float:
        """Top edge of the bottom pipe, derived from the top pipe and the gap."""
        return self.y + config.pipe_h + config.pipe_gap


@dataclass
class Foreground:
    x: float = 0.0


@dataclass
class Scoreboard:
    current: int = 0
    best: int = 0
    new_best: bool = False

    def reset(self):
        self.current = 0
        self.new_best = False

    def add_point(self) -> bool:
        """Counts one cleared pipe. Returns True when it set a new best."""
        self.current += 1
        if self.current > self.best:
            self.best = self.current
            self.new_best = True
            return True
        return False
