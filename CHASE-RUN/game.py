"""
game.py — Session (update / collision / draw) and the threaded GameLoop
"""
import time
import threading
import traceback
from collections import deque

from config import FPS, MAX_OBSTACLES
from entities import Player, Chaser, Obstacle, intersects
from ui import make_fonts, draw_hud


class Session:
    """One run of the game: entities, score and high score.

    Only the loop thread touches a Session once the loop is running.
    """

    def __init__(self, screen, sprites, audio=None, fonts=None):
        self.screen  = screen
        self.sprites = sprites
        self.audio   = audio
        self.fonts   = fonts
        self.score = 0
        self.high_score = 0
        self.player = Player(sprites["player"], screen)
        self.chaser = Chaser(sprites["chaser"], screen)
        self.obstacles = self._spawn_obstacles()

    def _sfx(self, name):
        if self.audio: self.audio.play(name)

    def _spawn_obstacles(self):
        w = self.screen.w
        q = deque(maxlen=MAX_OBSTACLES)
        for i in range(MAX_OBSTACLES):
            q.append(Obstacle(self.sprites["obstacle"], self.screen, w + i * w // MAX_OBSTACLES))
        return q

    # ── Tick ──
    def tick(self):
        p = self.player
        p.update()
        self.chaser.update()

        for o in self.obstacles:
            o.update()
            if intersects(p.rect, o.rect):
                if not p.is_slowed_down():
                    p.slow_down(); self._sfx("hit")
                else:
                    self.game_over()
                    break   # the queue was rebuilt

        if intersects(p.rect, self.chaser.rect):
            self.game_over()

        # only the head is checked, so at most one point per tick
        head = self.obstacles[0]
        if head.right < 0:
            self.obstacles.popleft()
            last = self.obstacles[-1]
            self.obstacles.append(Obstacle(self.sprites["obstacle"], self.screen,
                                           last.x + self.screen.obstacle_gap))
            self.score += 1
            self._sfx("point")

    def game_over(self):
        if self.score > self.high_score:
            self.high_score = self.score
        self.score = 0
        self.player.reset()
        self.obstacles = self._spawn_obstacles()
        self._sfx("over")

    def on_tap(self):
        if self.player.jump():
            self._sfx("jump")

    # ── Draw ──
    def draw(self, surf):
        if self.fonts is None:
            self.fonts = make_fonts()
        surf.blit(self.sprites["background"], (0, 0))
        draw_hud(surf, self.fonts, self.score, self.high_score)
        self.player.draw(surf)
        self.chaser.draw(surf)
        for o in self.obstacles:
            o.draw(surf)


# ─────────────────────────────────────────────────────
#  LOOP
# ─────────────────────────────────────────────────────
class FramePacer:
    """Sleeps away what is left of the frame budget. A late frame is not
    made up for."""

    def __init__(self, fps=FPS, clock=time.perf_counter, sleep=time.sleep):
        self.budget = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._last = 0.0

    def start(self):
        self._last = self._clock()

    def wait(self):
        frame_time = self._clock() - self._last
        if frame_time < self.budget:
            self._sleep(self.budget - frame_time)
        self._last = self._clock()


class GameLoop:
    """Drives a Session on its own thread: tick, draw, pace.

    ``surface_source`` returns the surface to draw on, or None when there is
    nothing valid to draw to; ``present`` shows the finished frame.
    """

    def __init__(self, session, surface_source, present, fps=FPS, pacer=None):
        self.session = session
        self.surface_source = surface_source
        self.present = present
        self.pacer = pacer or FramePacer(fps)
        self._playing = threading.Event()
        self._jump = threading.Event()
        self._thread = None
        self.frames_drawn = 0
        self.frames_skipped = 0

    @property
    def playing(self):
        return self._playing.is_set()

    def request_jump(self):
        """Called from the input thread."""
        self._jump.set()

    def run(self):
        self.pacer.start()
        while self._playing.is_set():
            if self._jump.is_set():
                self._jump.clear()
                self.session.on_tap()
            self.session.tick()
            self._draw()
            self.pacer.wait()

    def _draw(self):
        surf = self.surface_source()
        if surf is None:
            self.frames_skipped += 1
            return
        try:
            self.session.draw(surf)
            self.present()
            self.frames_drawn += 1
        except Exception as e:
            print(f"[draw error] {e}")
            traceback.print_exc()

    # ── Lifecycle ──
    def resume(self):
        if self.is_alive():
            return
        self._playing.set()
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()
        print("[loop] resumed")

    def stop(self):
        """Ask the loop to finish after the current tick. Safe from any thread."""
        self._playing.clear()

    def pause(self):
        self.stop()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            print("[loop] paused")

    def is_alive(self):
        return self._thread is not None and self._thread.is_alive()
