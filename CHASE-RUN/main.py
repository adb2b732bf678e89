"""
╔══════════════════════════════════════════╗
║   CHASE RUN                              ║
║   Python 3.8+  |  pip install pygame     ║
║   python main.py                         ║
╚══════════════════════════════════════════╝

Files:
  main.py      — entry point, window and input thread
  config.py    — constants and the Screen value
  assets.py    — sprites (PNG or procedural)
  audio.py     — sound effects (procedural)
  entities.py  — Player, Chaser, Obstacle
  ui.py        — HUD and pause overlay
  game.py      — Session and the threaded GameLoop
"""
import argparse
import sys
import pygame

from config import SW, SH, FPS, TITLE, Screen
from assets import load_sprites
from audio import Audio
from game import Session, GameLoop
from ui import make_fonts, draw_pause

PAUSE_EVENTS  = (pygame.WINDOWMINIMIZED, pygame.WINDOWFOCUSLOST)
RESUME_EVENTS = (pygame.WINDOWRESTORED, pygame.WINDOWFOCUSGAINED)


def is_tap(ev):
    return ((ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1)
            or ev.type == pygame.FINGERDOWN)


class Game:
    """Window + event pump. The GameLoop thread does the per-frame work."""

    def __init__(self, args):
        pygame.init()
        if args.fullscreen:
            info = pygame.display.Info()
            self.screen_size = Screen(info.current_w, info.current_h)
            self.window = pygame.display.set_mode((info.current_w, info.current_h), pygame.FULLSCREEN)
        else:
            self.screen_size = Screen(args.width, args.height)
            self.window = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.fps   = args.fps

        self.fonts   = make_fonts()
        self.audio   = Audio(enabled=not args.mute)
        self.sprites = load_sprites(self.screen_size, args.assets)
        self.session = Session(self.screen_size, self.sprites, self.audio, self.fonts)
        # flip() runs on the loop thread; fine on X11/Windows, not on macOS SDL
        self.loop = GameLoop(self.session, self._surface, pygame.display.flip, fps=args.fps)
        self.running = True

    def _surface(self):
        if not pygame.display.get_active():
            return None
        return pygame.display.get_surface()

    # ── Lifecycle ──
    def resume(self):
        self.loop.resume()

    def pause(self):
        if not self.loop.playing: return
        self.loop.pause()
        # loop thread is gone, safe to draw here
        surf = self._surface()
        if surf is not None:
            draw_pause(surf, self.fonts)
            pygame.display.flip()

    # ── Events ──
    def _events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                self.running = False; return
            if ev.type in PAUSE_EVENTS:
                self.pause()
            elif ev.type in RESUME_EVENTS:
                self.resume()
            elif is_tap(ev) and self.loop.playing:
                self.loop.request_jump()

    def run(self):
        self.resume()
        try:
            while self.running:
                self._events()
                self.clock.tick(self.fps)
        finally:
            self.loop.pause()
            pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Jump the rocks, outrun the chaser")
    parser.add_argument("--width", type=int, default=SW, help="window width in pixels")
    parser.add_argument("--height", type=int, default=SH, help="window height in pixels")
    parser.add_argument("--fullscreen", action="store_true", help="use the whole desktop")
    parser.add_argument("--fps", type=int, default=FPS, help="target ticks per second")
    parser.add_argument("--assets", default=None, help="folder with background/player/chaser/obstacle .png")
    parser.add_argument("--mute", action="store_true", help="no sound effects")
    return parser.parse_args(argv)


def main(argv=None):
    Game(parse_args(argv)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
