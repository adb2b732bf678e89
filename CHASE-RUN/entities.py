"""
entities.py — Entity, Player, Chaser, Obstacle
"""
import pygame
from config import (
    FRAME_COUNT, JUMP_POWER, GRAVITY, GRAVITY_SLOW,
    CHASER_SPEED, OBSTACLE_SPEED,
)


def intersects(a, b):
    """Strict overlap: rects that only share an edge do not collide."""
    return a.colliderect(b)


class Entity:
    """Shared shape: position, a bounding box refreshed on update, draw."""

    def __init__(self, sprite, x=0.0, y=0.0):
        self.sprite = sprite
        self.x = float(x); self.y = float(y)
        self.rect = pygame.Rect(0, 0, 0, 0)

    @property
    def size(self):
        return self.sprite.get_width(), self.sprite.get_height()

    def _refresh_rect(self):
        w, h = self.size
        left, top = int(self.x), int(self.y)
        self.rect = pygame.Rect(left, top, int(self.x + w) - left, int(self.y + h) - top)

    def update(self):
        self._refresh_rect()

    def draw(self, surf):
        surf.blit(self.sprite, (int(self.x), int(self.y)))


# ─────────────────────────────────────────────────────
#  PLAYER
# ─────────────────────────────────────────────────────
class Player(Entity):
    def __init__(self, sprite, screen):
        super().__init__(sprite)
        self.screen = screen
        self.vy = 0.0
        self.gravity = GRAVITY
        self.slowed = False
        self.frame = 0
        self.frame_w = sprite.get_width() // FRAME_COUNT
        self.frame_h = sprite.get_height()
        self._center()

    @property
    def size(self):
        return self.frame_w, self.frame_h

    @property
    def ground(self):
        return self.screen.h - self.frame_h

    def on_ground(self):
        return self.y >= self.ground

    def _center(self):
        cx, cy = self.screen.center
        self.x = cx - self.frame_w / 2
        self.y = cy - self.frame_h / 2

    def update(self):
        if self.y < self.ground or self.vy < 0:
            self.vy += self.gravity
            self.y += self.vy
            if self.y >= self.ground and self.vy >= 0:
                self.y = float(self.ground)   # landed
        self.frame = (self.frame + 1) % FRAME_COUNT
        self._refresh_rect()

    def jump(self):
        """Returns True when the jump actually left the ground."""
        if not self.on_ground():
            return False
        self.vy = JUMP_POWER
        return True

    def slow_down(self):
        self.slowed = True
        self.gravity = GRAVITY_SLOW

    def reset(self):
        # vy and frame carry over
        self.slowed = False
        self.gravity = GRAVITY
        self._center()

    def is_slowed_down(self):
        return self.slowed

    def draw(self, surf):
        src = pygame.Rect(self.frame * self.frame_w, 0, self.frame_w, self.frame_h)
        surf.blit(self.sprite, (int(self.x), int(self.y)), src)


# ─────────────────────────────────────────────────────
#  CHASER / OBSTACLE
# ─────────────────────────────────────────────────────
class Chaser(Entity):
    SPEED = CHASER_SPEED

    def __init__(self, sprite, screen):
        super().__init__(sprite)
        self.screen = screen
        self.reset()

    def reset(self):
        self.x, self.y = self.screen.center

    def update(self):
        # no bounds check, it keeps running off the left edge
        self.x -= self.SPEED
        self._refresh_rect()


class Obstacle(Entity):
    SPEED = OBSTACLE_SPEED

    def __init__(self, sprite, screen, x=0.0):
        super().__init__(sprite, x, screen.h - sprite.get_height())
        self.w = sprite.get_width()

    @property
    def right(self):
        return self.x + self.w

    def update(self):
        self.x -= self.SPEED
        self._refresh_rect()
