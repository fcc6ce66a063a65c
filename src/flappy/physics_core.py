"""
physics_core.py: The bird's fixed-step motion model and ground contact.
"""

from .constants import (
    BIRD_ANIMATION_FRAMES, BIRD_FLAP_PERIOD, BIRD_FLAP_PERIOD_READY,
    FALLING_ROTATION, RISING_ROTATION,
)
from .data_models import Bird, RunState, SimulationConfig


class BirdPhysics:
    """
    Deterministic per-tick physics for the bird.
    Holds no state of its own; every call mutates the Bird it is given.
    """

    def reset(self, bird: Bird, config: SimulationConfig):
        bird.x = config.bird_x
        bird.y = config.bird_rest_y
        bird.velocity = 0.0
        bird.rotation = 0.0
        bird.frame = 0

    def flap(self, bird: Bird, config: SimulationConfig):
        """Replaces the velocity with one upward impulse, whatever it was."""
        bird.velocity = -config.jump

    def apply_gravity(self, bird: Bird, config: SimulationConfig):
        bird.velocity += config.gravity
        bird.y += bird.velocity

    def hold_at_rest(self, bird: Bird, config: SimulationConfig):
        bird.y = config.bird_rest_y
        bird.velocity = 0.0
        bird.rotation = 0.0

    def tilt(self, bird: Bird, config: SimulationConfig):
        # Two-state tilt: nose down once falling at a full flap's speed.
        if bird.velocity >= config.jump:
            bird.rotation = FALLING_ROTATION
            bird.frame = 0
        else:
            bird.rotation = RISING_ROTATION

    def animate(self, bird: Bird, state: RunState, frames: int):
        period = BIRD_FLAP_PERIOD_READY if state is RunState.GET_READY else BIRD_FLAP_PERIOD
        if frames % period == 0:
            bird.frame = (bird.frame + 1) % BIRD_ANIMATION_FRAMES

    def land(self, bird: Bird, config: SimulationConfig) -> bool:
        """Clamps the bird onto the foreground. Returns True on contact."""
        ground = config.foreground_y - config.bird_h / 2
        if bird.y >= ground:
            bird.y = ground
            return True
        return False

    def update(self, bird: Bird, config: SimulationConfig, state: RunState, frames: int) -> bool:
        """
        Advances the bird by one tick for the given run state.
        Returns True when the bird is touching the ground.
        """
        self.animate(bird, state, frames)

        if state is RunState.GET_READY:
            self.hold_at_rest(bird, config)
            return False
        if state is RunState.HOME:
            return False

        self.apply_gravity(bird, config)
        grounded = self.land(bird, config)
        self.tilt(bird, config)
        return grounded
