"""
assets.py — sprite provider (PNG files when present, procedural otherwise)
"""
import os
import pygame
from config import PAL, FRAME_COUNT, SPRITE_KEYS

PLAYER_FRAME = (40, 56)
CHASER_SIZE  = (48, 48)
OBSTACLE_SIZE = (36, 44)


# ─────────────────────────────────────────────────────
#  PROCEDURAL SPRITES
# ─────────────────────────────────────────────────────
def _make_player():
    """Five-frame run cycle laid out left to right."""
    fw, fh = PLAYER_FRAME
    strip = pygame.Surface((fw * FRAME_COUNT, fh), pygame.SRCALPHA)
    for i in range(FRAME_COUNT):
        ox = i * fw
        swing = (i - FRAME_COUNT // 2) * 3
        pygame.draw.line(strip, PAL["player_dk"], (ox+fw//2, fh-22), (ox+fw//2-swing, fh-2), 5)
        pygame.draw.line(strip, PAL["player_dk"], (ox+fw//2, fh-22), (ox+fw//2+swing, fh-2), 5)
        pygame.draw.rect(strip, PAL["player"], (ox+fw//2-9, 16, 18, 20), border_radius=4)
        pygame.draw.circle(strip, PAL["skin"], (ox+fw//2, 10), 9)
    return strip

def _make_chaser():
    w, h = CHASER_SIZE
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.circle(surf, PAL["chaser"], (w//2, h//2), w//2 - 1)
    pygame.draw.circle(surf, PAL["chaser_dk"], (w//2, h//2), w//2 - 1, 2)
    for ex in (-8, 8):
        pygame.draw.circle(surf, PAL["eye"], (w//2 + ex, h//2 - 6), 5)
        pygame.draw.circle(surf, PAL["chaser_dk"], (w//2 + ex - 2, h//2 - 6), 3)
    return surf

def _make_obstacle():
    w, h = OBSTACLE_SIZE
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, PAL["obstacle"], (0, 6, w, h-6), border_radius=5)
    pygame.draw.rect(surf, PAL["obstacle_l"], (4, 0, w-8, 14), border_radius=5)
    return surf

def _make_background(size):
    w, h = size
    surf = pygame.Surface((w, h))
    surf.fill(PAL["sky"])
    pygame.draw.rect(surf, PAL["grass"], (0, h - 6, w, 6))
    return surf

_MAKERS = {
    "player":   _make_player,
    "chaser":   _make_chaser,
    "obstacle": _make_obstacle,
}

_sprite_cache = {}

def _procedural(key, size):
    ck = (key, size if key == "background" else None)
    if ck not in _sprite_cache:
        _sprite_cache[ck] = _make_background(size) if key == "background" else _MAKERS[key]()
    return _sprite_cache[ck]


# ─────────────────────────────────────────────────────
#  LOADER
# ─────────────────────────────────────────────────────
def load_sprites(screen, asset_dir=None):
    """Return {key: Surface} for every key in SPRITE_KEYS.

    ``<asset_dir>/<key>.png`` wins over the generated sprite. The
    player file must be a horizontal strip of FRAME_COUNT frames.
    """
    size = (screen.w, screen.h)
    sprites = {}
    for key in SPRITE_KEYS:
        path = os.path.join(asset_dir, key + ".png") if asset_dir else None
        if path and os.path.exists(path):
            img = pygame.image.load(path)
            if key == "background":
                img = pygame.transform.scale(img, size)
            sprites[key] = img
        else:
            sprites[key] = _procedural(key, size)
    return sprites
