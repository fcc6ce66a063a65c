"""
game_state.py: The simulation context and the run state machine.

Home -> GetReady -> Playing -> GameOver, then GetReady (restart) or Home.
"""

import math
import random
import time
from typing import Callable, List, Optional

from .buttons import Control
from .constants import DIE_SOUND_DELAY
from .data_models import (
    Bird, Foreground, RunState, Scoreboard, SimulationConfig, Sound,
)
from .logger import get_logger
from .physics_core import BirdPhysics
from .physics_pipes import PipeWindow
from .scheduler import Scheduler

log = get_logger(__name__)

SoundListener = Callable[[Sound], None]


class Game:
    """
    Owns every piece of simulation state. Subsystems receive what they
    need from here on each call instead of holding references back.
    """

    def __init__(
        self,
        width: float,
        height: float,
        best_score: int = 0,
        on_new_best: Optional[Callable[[int], None]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state = RunState.HOME
        self.paused = False
        self.mute = False
        self.night = False
        self.frames = 0
        self.run_id = 0

        self.physics = BirdPhysics()
        self.bird = Bird()
        self.pipes = PipeWindow(rng=rng or random.Random())
        self.foreground = Foreground()
        self.score = Scoreboard(best=best_score)
        self.scheduler = Scheduler(clock)

        self.on_new_best = on_new_best
        self._listeners: List[SoundListener] = []

        self.resize(width, height)

    # ----------------- Wiring -----------------

    def on_sound(self, listener: SoundListener):
        self._listeners.append(listener)

    def emit(self, sound: Sound):
        for listener in self._listeners:
            listener(sound)

    def resize(self, width: float, height: float):
        """Recomputes every size-derived value. Safe to call mid-run."""
        self.config = SimulationConfig.from_viewport(width, height)
        self.foreground.x = 0.0
        self.bird.x = self.config.bird_x
        self.bird.y = self.config.bird_rest_y
        log.debug("Viewport resized to %.0fx%.0f", width, height)

    def _set_state(self, state: RunState):
        log.info("%s -> %s", self.state.value, state.value)
        self.state = state

    # ----------------- Transitions -----------------

    def start(self):
        """Home's start control."""
        if self.state is not RunState.HOME:
            return
        self._set_state(RunState.GET_READY)
        self.emit(Sound.SWOOSH)

    def primary_action(self):
        """Tap, click or space: begins a run from GetReady, flaps while Playing."""
        if self.state is RunState.GET_READY:
            self._flap()
            self._set_state(RunState.PLAYING)
        elif self.state is RunState.PLAYING and not self.paused:
            self._flap()

    def _flap(self):
        self.physics.flap(self.bird, self.config)
        self.emit(Sound.FLAP)

    def toggle_pause(self):
        if self.state is not RunState.PLAYING:
            return
        self.paused = not self.paused
        log.info("Paused" if self.paused else "Resumed")

    def toggle_mute(self):
        if self.state is not RunState.HOME:
            return
        self.mute = not self.mute
        self.emit(Sound.SWOOSH)

    def toggle_night(self):
        self.night = not self.night

    def restart(self):
        if self.state is not RunState.GAME_OVER:
            return
        self._reset_run()
        self._set_state(RunState.GET_READY)
        self.emit(Sound.SWOOSH)

    def go_home(self):
        if self.state is not RunState.GAME_OVER:
            return
        self._reset_run()
        self._set_state(RunState.HOME)
        self.emit(Sound.SWOOSH)

    def _reset_run(self):
        self.pipes.reset()
        self.physics.reset(self.bird, self.config)
        self.score.reset()
        self.paused = False
        self.run_id += 1

    def click(self, control: Optional[Control]):
        """Applies a click that has already been resolved against the hit-boxes."""
        if self.state is RunState.HOME:
            if control is Control.MUTE:
                self.toggle_mute()
            elif control is Control.NIGHT:
                self.toggle_night()
                self.emit(Sound.SWOOSH)
            elif control is Control.START:
                self.start()
        elif self.state is RunState.GET_READY:
            self.primary_action()
        elif self.state is RunState.PLAYING:
            if control is Control.PAUSE:
                self.toggle_pause()
            else:
                self.primary_action()
        elif self.state is RunState.GAME_OVER:
            if control is Control.RESTART:
                self.restart()
            elif control is Control.HOME:
                self.go_home()

    def game_over(self, cause: str):
        """Ends a Playing run: "hit" now, "die" after a real-time delay."""
        if self.state is not RunState.PLAYING:
            return
        log.info("Run over (%s) with score %d", cause, self.score.current)
        self._set_state(RunState.GAME_OVER)
        self.emit(Sound.HIT)

        expected = (RunState.GAME_OVER, self.run_id)
        self.scheduler.call_later(DIE_SOUND_DELAY, lambda: self._die_if_current(expected))

    def _die_if_current(self, expected: tuple):
        # A restart or home click may have moved on before the delay elapsed.
        if (self.state, self.run_id) != expected:
            log.debug("Dropped stale die event for run %d", expected[1])
            return
        self.emit(Sound.DIE)

    # ----------------- Tick -----------------

    def tick(self):
        """One fixed simulation step. Frozen entirely while paused."""
        if self.paused:
            return

        grounded = self.physics.update(self.bird, self.config, self.state, self.frames)
        if grounded:
            self.game_over("ground")

        if self.state is not RunState.GAME_OVER:
            self._scroll_foreground()

        if self.state is RunState.PLAYING:
            collided, scored = self.pipes.step(self.bird, self.config, self.frames)
            for _ in range(scored):
                self._score_point()
            if collided:
                self.game_over("pipe")

        self.frames += 1

    def _scroll_foreground(self):
        # Wraps within (-w/2, 0]; the two drawn copies hide the seam.
        half = self.config.foreground_w / 2
        self.foreground.x = math.fmod(self.foreground.x - self.config.foreground_speed, half)

    def _score_point(self):
        new_best = self.score.add_point()
        self.emit(Sound.POINT)
        if new_best:
            log.debug("New best score: %d", self.score.best)
            if self.on_new_best:
                self.on_new_best(self.score.best)
