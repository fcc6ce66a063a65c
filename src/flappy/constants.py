"""
constants.py: Centralized configuration for simulation and presentation.

Sizes are ratios of the viewport so the whole playfield scales on resize.
"""

# -------- Clock --------
TICK_RATE = 75                  # Fixed simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step
RENDER_FPS = 120                # Draws may run faster than ticks
DIE_SOUND_DELAY = 0.5           # seconds, real time (not ticks)

# -------- Viewport --------
DEFAULT_DISPLAY_HEIGHT = 800
VIEWPORT_ASPECT = 0.72          # width = height * aspect
VIEWPORT_MARGIN = 2             # pixels shaved off both dimensions

# -------- Bird (ratios of viewport) --------
BIRD_X_RATIO = 0.290
BIRD_REST_Y_RATIO = 0.395
BIRD_W_RATIO = 0.117
BIRD_H_RATIO = 0.059
BIRD_RADIUS_X_RATIO = 0.052     # Collision half-extents
BIRD_RADIUS_Y_RATIO = 0.026
GRAVITY_RATIO = 0.0006          # Per tick^2, of height
JUMP_RATIO = 0.01               # Per tick, of height

FALLING_ROTATION = 90.0         # degrees
RISING_ROTATION = -25.0         # degrees
BIRD_ANIMATION_FRAMES = 3
BIRD_FLAP_PERIOD_READY = 6      # ticks per wing frame in GetReady
BIRD_FLAP_PERIOD = 4            # ticks per wing frame otherwise

# -------- Pipes --------
PIPE_W_RATIO = 0.164
PIPE_H_RATIO = 0.888
PIPE_GAP_RATIO = 0.177
PIPE_SPAWN_RANGE_RATIO = 0.350  # Max upward offset, of height
PIPE_SPEED_RATIO = 0.007        # Per tick, of width
PIPE_SPAWN_INTERVAL_TICKS = 80
PIPE_WINDOW_CAPACITY = 6
PIPE_EVICT_COUNT = 2

# -------- Foreground --------
FOREGROUND_Y_RATIO = 0.861
FOREGROUND_W_RATIO = 0.7
FOREGROUND_ASPECT = 0.46        # h = w * aspect

# -------- Medals (score thresholds, highest first) --------
MEDAL_THRESHOLDS = (
    (40, "platinum"),
    (30, "gold"),
    (20, "silver"),
    (10, "bronze"),
)
MEDAL_SHINE_PERIOD = 7
MEDAL_SHINE_FRAMES = 5

# -------- Home screen --------
LOGO_BOB_RATIO = 0.0012         # Logo speed, of width

# -------- Colours --------
DAY_SKY = (123, 197, 205)
NIGHT_SKY = (18, 40, 76)
WHITE = (255, 255, 255)

# -------- Sprite sheet regions (x, y, w, h) --------
SPRITE_SHEET = "sprite_sheet.png"
SPRITES = {
    "bird_0": (932, 429, 68, 48),
    "bird_1": (932, 478, 68, 48),
    "bird_2": (932, 527, 68, 48),
    "pipe_top": (1001, 0, 104, 800),
    "pipe_bottom": (1105, 0, 104, 800),
    "background_day": (0, 392, 552, 408),
    "background_night": (1211, 392, 552, 408),
    "stars": (1211, 0, 552, 392),
    "foreground": (553, 576, 447, 224),
    "mute": (171, 63, 55, 62),
    "unmute": (171, 0, 55, 62),
    "start": (227, 0, 160, 56),
    "pause": (280, 114, 52, 56),
    "resume": (227, 114, 52, 56),
    "home": (388, 171, 160, 56),
    "restart": (227, 57, 160, 56),
    "night": (280, 171, 56, 60),
    "day": (223, 171, 56, 60),
    "logo": (552, 233, 384, 87),
    "studio": (172, 284, 380, 28),
    "get_ready": (552, 321, 349, 87),
    "tap": (0, 0, 155, 196),
    "game_over": (553, 410, 376, 75),
    "scoreboard": (548, 0, 452, 232),
    "new_best": (921, 349, 64, 28),
    "bronze": (554, 487, 88, 87),
    "silver": (642, 487, 88, 87),
    "gold": (731, 487, 88, 87),
    "platinum": (820, 487, 88, 87),
    "shine_0": (922, 386, 20, 20),
    "shine_1": (943, 386, 20, 20),
    "shine_2": (964, 386, 20, 20),
}
DIGIT_SPRITE_X = (98, 127, 156, 185, 214, 243, 272, 301, 330, 359)
DIGIT_SPRITE_Y = 243
DIGIT_SPRITE_SIZE = (28, 40)

# Fallback fill colours when no sprite sheet is available
FALLBACK_COLORS = {
    "bird": (250, 200, 40),
    "pipe_top": (0, 150, 0),
    "pipe_bottom": (0, 150, 0),
    "foreground": (222, 216, 149),
    "button": (230, 97, 29),
    "panel": (222, 216, 149),
    "medal": (205, 127, 50),
}

# -------- Audio --------
SOUND_FILES = {
    "flap": "flap.wav",
    "hit": "hit.wav",
    "die": "die.wav",
    "point": "point.wav",
    "swoosh": "swooshing.wav",
}

# -------- Persistence --------
DB_FILE = "flappy_scores.db"
