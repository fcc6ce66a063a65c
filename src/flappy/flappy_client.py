"""
flappy_client.py

pygame presentation around the simulation core: rendering, audio,
input translation and the main loop.
"""

import math
import random
from enum import Enum, auto
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pygame

from .buttons import ButtonLayout, Control
from .constants import (
    DAY_SKY, DB_FILE, DEFAULT_DISPLAY_HEIGHT, DIGIT_SPRITE_SIZE, DIGIT_SPRITE_X,
    DIGIT_SPRITE_Y, FALLBACK_COLORS, LOGO_BOB_RATIO, MEDAL_SHINE_FRAMES,
    MEDAL_SHINE_PERIOD, NIGHT_SKY, RENDER_FPS, SOUND_FILES, SPRITE_SHEET,
    SPRITES, VIEWPORT_ASPECT, WHITE,
)
from .data_models import RunState, Sound, medal_for, viewport_for_display
from .game_state import Game
from .logger import get_logger
from .loop import FixedStepLoop
from .score_db import ScoreStore

log = get_logger(__name__)

Rect = Tuple[float, float, float, float]


# ----------------- Input -----------------

class Signal(Enum):
    PRIMARY = auto()
    PAUSE = auto()
    NIGHT = auto()
    CLICK = auto()
    QUIT = auto()


KEY_SIGNALS = {
    pygame.K_SPACE: Signal.PRIMARY,
    pygame.K_p: Signal.PAUSE,
    pygame.K_n: Signal.NIGHT,
    pygame.K_ESCAPE: Signal.QUIT,
}


def translate(event: pygame.event.Event) -> Optional[Signal]:
    """Maps a raw pygame event to the abstract signal the core understands."""
    if event.type == pygame.QUIT:
        return Signal.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_SIGNALS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return Signal.CLICK
    return None


def dispatch(game: Game, layout: ButtonLayout, event: pygame.event.Event) -> bool:
    """Applies one event to the game. Returns False when the player quits."""
    signal = translate(event)
    if signal is Signal.QUIT:
        return False
    if signal is Signal.PRIMARY:
        game.primary_action()
    elif signal is Signal.PAUSE:
        game.toggle_pause()
    elif signal is Signal.NIGHT:
        game.toggle_night()
    elif signal is Signal.CLICK:
        x, y = event.pos
        game.click(layout.hit(game.state, x, y))
    return True


# ----------------- Audio -----------------

class SoundPlayer:
    """Plays the game's sound events. Each clip restarts if already playing."""

    def __init__(self, game: Game, assets_dir: Optional[Path]):
        self.game = game
        self.clips: Dict[Sound, pygame.mixer.Sound] = {}

        if assets_dir is None:
            log.warning("No assets directory given; audio disabled")
            return
        try:
            pygame.mixer.init()
        except pygame.error as e:
            log.warning("Audio disabled: %s", e)
            return

        for sound in Sound:
            path = assets_dir / "audio" / SOUND_FILES[sound.value]
            try:
                self.clips[sound] = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError) as e:
                log.warning("Sound %s unavailable: %s", path, e)

    def __call__(self, sound: Sound):
        if self.game.mute:
            return
        clip = self.clips.get(sound)
        if clip is None:
            return
        clip.stop()
        clip.play()


# ----------------- Rendering -----------------

class Renderer:
    """
    Draws the game from the sprite sheet when one is available,
    falling back to flat coloured shapes without one.
    """

    def __init__(self, screen: pygame.Surface, game: Game, layout: ButtonLayout,
                 assets_dir: Optional[Path]):
        self.screen = screen
        self.game = game
        self.layout = layout
        self.sheet = self._load_sheet(assets_dir)

        # Home logo bob
        self.logo_offset = 0.0
        self.logo_rising = True

        # Medal sparkle
        self.shine_frame = 0
        self.shine_positions: List[Tuple[float, float]] = []

    @staticmethod
    def _load_sheet(assets_dir: Optional[Path]) -> Optional[pygame.Surface]:
        if assets_dir is None:
            return None
        path = assets_dir / "img" / SPRITE_SHEET
        try:
            return pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, FileNotFoundError) as e:
            log.warning("Sprite sheet %s unavailable, drawing shapes: %s", path, e)
            return None

    def resize(self, screen: pygame.Surface, layout: ButtonLayout):
        self.screen = screen
        self.layout = layout
        self.shine_positions = []

    # --- per-tick presentation state ---

    def update(self):
        """Advances presentational animation. Called once per simulation tick."""
        cfg = self.game.config
        frames = self.game.frames

        if self.game.state is RunState.HOME:
            limit = cfg.height * 0.109 / 7
            step = cfg.width * LOGO_BOB_RATIO
            self.logo_offset += -step if self.logo_rising else step
            if self.logo_offset <= -limit:
                self.logo_rising = False
            elif self.logo_offset >= limit:
                self.logo_rising = True

        if frames % MEDAL_SHINE_PERIOD == 0:
            self.shine_frame = (self.shine_frame + 1) % MEDAL_SHINE_FRAMES
        if self.shine_frame == MEDAL_SHINE_FRAMES - 1:
            self.shine_positions = []
        if frames % (MEDAL_SHINE_PERIOD * MEDAL_SHINE_FRAMES) == 0:
            radius = cfg.width * 0.061 * 0.9
            angle = random.uniform(0, 2 * math.pi)
            distance = random.uniform(0, radius)
            self.shine_positions.append((
                cfg.width * 0.257 + math.cos(angle) * distance,
                cfg.height * 0.506 + math.sin(angle) * distance,
            ))

    # --- primitives ---

    def blit(self, region: Tuple[int, int, int, int], rect: Rect, fallback: Optional[str],
             rotation: float = 0.0):
        x, y, w, h = rect
        size = (max(1, int(w)), max(1, int(h)))
        if self.sheet is None:
            if fallback:
                pygame.draw.rect(self.screen, FALLBACK_COLORS[fallback], (x, y, *size))
            return
        image = pygame.transform.scale(self.sheet.subsurface(region), size)
        if rotation:
            # pygame rotates counter-clockwise; positive rotation tilts the beak down.
            center = (x + w / 2, y + h / 2)
            image = pygame.transform.rotate(image, -rotation)
            self.screen.blit(image, image.get_rect(center=center))
        else:
            self.screen.blit(image, (x, y))

    def sprite(self, name: str, rect: Rect, fallback: Optional[str] = None):
        self.blit(SPRITES[name], rect, fallback)

    # --- scene ---

    def draw(self):
        game = self.game
        self.screen.fill(NIGHT_SKY if game.night else DAY_SKY)
        self._draw_background()
        if game.state in (RunState.PLAYING, RunState.GAME_OVER):
            self._draw_pipes()
        self._draw_foreground()
        if game.state is not RunState.HOME:
            self._draw_bird()

        if game.state is RunState.HOME:
            self._draw_home()
        elif game.state is RunState.GET_READY:
            self._draw_get_ready()
        elif game.state is RunState.PLAYING:
            self._draw_playing()
        elif game.state is RunState.GAME_OVER:
            self._draw_game_over()

    def _draw_background(self):
        cfg = self.game.config
        y = cfg.height * 0.631
        h = cfg.width * 0.74
        self.sprite("background_night" if self.game.night else "background_day", (0, y, cfg.width, h))
        if self.game.night:
            self.sprite("stars", (0, y * 0.167, cfg.width, cfg.height - h))

    def _draw_pipes(self):
        cfg = self.game.config
        for pipe in self.game.pipes:
            self.sprite("pipe_top", (pipe.x, pipe.y, cfg.pipe_w, cfg.pipe_h), "pipe_top")
            self.sprite("pipe_bottom", (pipe.x, pipe.bottom_y(cfg), cfg.pipe_w, cfg.pipe_h), "pipe_bottom")

    def _draw_foreground(self):
        cfg = self.game.config
        x = self.game.foreground.x
        for left in (x, x + cfg.foreground_w - 0.7):
            self.sprite("foreground", (left, cfg.foreground_y, cfg.foreground_w, cfg.foreground_h),
                        "foreground")

    def _draw_bird(self):
        cfg = self.game.config
        bird = self.game.bird
        rect = (bird.x - cfg.bird_w / 2, bird.y - cfg.bird_h / 2, cfg.bird_w, cfg.bird_h)
        if self.sheet is None:
            pygame.draw.ellipse(self.screen, FALLBACK_COLORS["bird"], rect)
            return
        self.blit(SPRITES[f"bird_{bird.frame}"], rect, None, rotation=bird.rotation)

    def _draw_button(self, control: Control, sprite: str):
        box = self.layout.boxes[control]
        self.sprite(sprite, (box.x, box.y, box.w, box.h), "button")

    def _draw_home(self):
        cfg = self.game.config
        w, h = cfg.width, cfg.height
        self.sprite("logo", (w * 0.098, h * 0.279 + self.logo_offset, w * 0.665, h * 0.109), "panel")
        frame = (self.game.frames // 6) % 3
        self.sprite(f"bird_{frame}", (w * 0.803, h * 0.294 + self.logo_offset, cfg.bird_w, cfg.bird_h), "bird")
        self.sprite("studio", (w * 0.171, h * 0.897, w * 0.659, h * 0.034))
        self._draw_button(Control.MUTE, "mute" if self.game.mute else "unmute")
        self._draw_button(Control.NIGHT, "night" if self.game.night else "day")
        self._draw_button(Control.START, "start")

    def _draw_get_ready(self):
        w, h = self.game.config.width, self.game.config.height
        self.sprite("get_ready", (w * 0.197, h * 0.206, w * 0.602, h * 0.109), "panel")
        self.sprite("tap", (w * 0.433, h * 0.435, w * 0.270, h * 0.244))

    def _draw_playing(self):
        w, h = self.game.config.width, self.game.config.height
        self._draw_button(Control.PAUSE, "resume" if self.game.paused else "pause")
        self._draw_number(self.game.score.current, w * 0.476, h * 0.045, centered=True)

    def _draw_game_over(self):
        w, h = self.game.config.width, self.game.config.height
        score = self.game.score
        self.sprite("game_over", (w * 0.182, h * 0.243, w * 0.645, h * 0.095), "panel")
        self.sprite("scoreboard", (w * 0.107, h * 0.355, w * 0.782, h * 0.289), "panel")
        self._draw_number(score.current, w * 0.769, h * 0.441)
        self._draw_number(score.best, w * 0.769, h * 0.545)
        if score.new_best:
            self.sprite("new_best", (w * 0.577, h * 0.500, w * 0.112, h * 0.035), "button")

        medal = medal_for(score.current)
        if medal is not None:
            self.sprite(medal.value, (w * 0.197, h * 0.461, w * 0.152, h * 0.108), "medal")
            shine = SPRITES[f"shine_{min(self.shine_frame, 4 - self.shine_frame)}"]
            for sx, sy in self.shine_positions:
                self.blit(shine, (sx, sy, w * 0.034, h * 0.023), None)

        self._draw_button(Control.RESTART, "restart")
        self._draw_button(Control.HOME, "home")

    def _draw_number(self, value: int, x: float, y: float, centered: bool = False):
        """Draws digits centred on x, or right-aligned with the last digit at x."""
        w, h = self.game.config.width, self.game.config.height
        digit_w, digit_h = w * 0.048, h * 0.046
        narrow_w, space = w * 0.032, w * 0.016

        digits = str(value)
        advances = [(narrow_w if d == "1" else digit_w) + space for d in digits]
        total = sum(advances) - space
        left = x - total / 2 + digit_w / 2 if centered else x + digit_w - total

        if self.sheet is None:
            font = pygame.font.Font(None, max(1, int(digit_h * 1.4)))
            text = font.render(digits, True, WHITE)
            self.screen.blit(text, (left, y))
            return

        for digit, advance in zip(digits, advances):
            region = (DIGIT_SPRITE_X[int(digit)], DIGIT_SPRITE_Y, *DIGIT_SPRITE_SIZE)
            self.blit(region, (left, y, digit_w, digit_h), None)
            left += advance


# ----------------- Game Client -----------------

class FlappyClient:
    def __init__(self, display_height: int = DEFAULT_DISPLAY_HEIGHT, db_file: str = DB_FILE,
                 assets_dir: Optional[Path] = None, seed: Optional[int] = None):
        pygame.init()
        width, height = viewport_for_display(display_height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Bird")

        self.store = ScoreStore(db_file)
        self.game = Game(width, height, best_score=self.store.load(),
                         on_new_best=self.store.save, rng=random.Random(seed))
        self.layout = ButtonLayout.from_viewport(width, height)

        self.sound = SoundPlayer(self.game, assets_dir)
        self.game.on_sound(self.sound)
        self.renderer = Renderer(self.screen, self.game, self.layout, assets_dir)

        self.loop = FixedStepLoop(self._step)
        self.clock = pygame.time.Clock()

    def _step(self):
        self.game.tick()
        self.renderer.update()

    def resize(self, window_height: int):
        height = window_height
        width = int(height * VIEWPORT_ASPECT)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.game.resize(width, height)
        self.layout = ButtonLayout.from_viewport(width, height)
        self.renderer.resize(self.screen, self.layout)

    def run(self):
        """The main client loop: fixed-rate updates, a draw every frame."""
        running = True
        while running:
            elapsed = self.clock.tick(RENDER_FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.VIDEORESIZE:
                    self.resize(event.h)
                elif not dispatch(self.game, self.layout, event):
                    running = False

            self.loop.advance(elapsed)
            self.game.scheduler.run_due()

            self.renderer.draw()
            pygame.display.flip()

        log.info("Best score this session: %d", self.game.score.best)
        self.store.close()
        pygame.quit()
