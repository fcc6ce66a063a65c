"""
buttons.py: Menu control hit-boxes, laid out relative to the viewport.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .data_models import RunState


class Control(Enum):
    MUTE = "mute"
    NIGHT = "night"
    START = "start"
    PAUSE = "pause"
    RESTART = "restart"
    HOME = "home"


@dataclass(frozen=True)
class HitBox:
    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        # Edges count as inside.
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


# Controls that can be clicked in each run state.
VISIBLE_CONTROLS = {
    RunState.HOME: (Control.MUTE, Control.NIGHT, Control.START),
    RunState.GET_READY: (),
    RunState.PLAYING: (Control.PAUSE,),
    RunState.GAME_OVER: (Control.RESTART, Control.HOME),
}


@dataclass(frozen=True)
class ButtonLayout:
    boxes: Dict[Control, HitBox]

    @classmethod
    def from_viewport(cls, width: float, height: float) -> "ButtonLayout":
        # Mute and pause share the top-left corner; they never show together.
        corner = HitBox(width * 0.087, height * 0.045, width * 0.088, height * 0.069)
        wide_y, wide_w, wide_h = height * 0.759, width * 0.276, height * 0.068
        return cls(boxes={
            Control.MUTE: corner,
            Control.PAUSE: corner,
            Control.NIGHT: HitBox(width * 0.189, corner.y, corner.w, corner.h),
            Control.START: HitBox(width * 0.359, wide_y, wide_w, wide_h),
            Control.RESTART: HitBox(width * 0.147, wide_y, wide_w, wide_h),
            Control.HOME: HitBox(width * 0.576, wide_y, wide_w, wide_h),
        })

    def hit(self, state: RunState, x: float, y: float) -> Optional[Control]:
        """Resolves a click to the visible control under it, if any."""
        for control in VISIBLE_CONTROLS[state]:
            if self.boxes[control].contains(x, y):
                return control
        return None
