"""Single-screen Flappy Bird arcade game on a fixed-step simulation core."""

from .data_models import RunState, Sound
from .game_state import Game

__all__ = ["Game", "RunState", "Sound"]
