"""
config.py — constants and the Screen value shared by every module
"""
from dataclasses import dataclass

# ─────────────────────────────────────────────────────
#  WINDOW / LOOP
# ─────────────────────────────────────────────────────
SW, SH = 960, 540          # default window size
FPS    = 60
TITLE  = "Chase Run"

# ─────────────────────────────────────────────────────
#  GAMEPLAY
# ─────────────────────────────────────────────────────
MAX_OBSTACLES  = 5
OBSTACLE_SPEED = 10.0      # px / tick, leftward
CHASER_SPEED   = 10.0

JUMP_POWER   = -30.0
GRAVITY      = 1.5
GRAVITY_SLOW = 0.5
FRAME_COUNT  = 5           # frames in the player sprite strip

# ─────────────────────────────────────────────────────
#  LOOK
# ─────────────────────────────────────────────────────
HUD_SIZE = 30
HUD_POS  = ((50, 50), (50, 100))   # score, high score

PAL = {
    "bg":        (255, 255, 255),
    "sky":       (200, 228, 245),
    "ground":    (120, 96, 64),
    "grass":     (86, 150, 70),
    "text":      (0, 0, 0),
    "player":    (60, 110, 200),
    "player_dk": (35, 70, 140),
    "skin":      (240, 200, 160),
    "chaser":    (175, 45, 45),
    "chaser_dk": (110, 20, 20),
    "eye":       (255, 235, 180),
    "obstacle":  (95, 95, 102),
    "obstacle_l":(130, 130, 138),
    "overlay":   (0, 0, 0, 150),
    "ui_gold":   (240, 200, 60),
    "ui_dim":    (160, 170, 150),
}

SPRITE_KEYS = ("background", "player", "chaser", "obstacle")


@dataclass(frozen=True)
class Screen:
    """Drawable area in pixels; built once and handed to every entity."""
    w: int = SW
    h: int = SH

    @property
    def obstacle_gap(self) -> int:
        return self.w // MAX_OBSTACLES

    @property
    def center(self):
        return self.w / 2, self.h / 2
