import random

import pytest

from flappy.data_models import RunState, SimulationConfig
from flappy.game_state import Game

WIDTH, HEIGHT = 400, 800


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FixedRandom:
    """Stands in for random.Random with a constant draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def config():
    return SimulationConfig.from_viewport(WIDTH, HEIGHT)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def game(clock, sounds):
    g = Game(WIDTH, HEIGHT, rng=random.Random(1234), clock=clock)
    g.on_sound(sounds.append)
    return g


@pytest.fixture
def playing(game, sounds):
    """A game that has just flapped into Playing, away from the spawn cadence."""
    game.start()
    game.primary_action()
    assert game.state is RunState.PLAYING
    game.frames = 1
    sounds.clear()
    return game
