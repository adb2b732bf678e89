import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from config import Screen
from game import Session

W, H = 800, 600
COLORS = {
    "background": (255, 255, 255),
    "player":     (0, 0, 255),
    "chaser":     (255, 0, 0),
    "obstacle":   (0, 160, 0),
}


@pytest.fixture(scope="session", autouse=True)
def pg():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def screen():
    return Screen(W, H)


@pytest.fixture
def sprites():
    """Flat-colour sprites: player strip 200x50 (five 40x50 frames),
    chaser 40x40, obstacle 30x40."""
    sizes = {"background": (W, H), "player": (200, 50), "chaser": (40, 40), "obstacle": (30, 40)}
    out = {}
    for key, size in sizes.items():
        s = pygame.Surface(size)
        s.fill(COLORS[key])
        out[key] = s
    return out


class FakeAudio:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def session(screen, sprites, audio):
    return Session(screen, sprites, audio)


@pytest.fixture
def quiet(session):
    """Player resting on the ground, chaser far off to the left."""
    p = session.player
    p.y = float(p.ground); p.vy = 0.0
    session.chaser.x = -10_000.0
    return session


@pytest.fixture
def colors():
    return COLORS
