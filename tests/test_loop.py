import time

import pygame
import pytest

from game import FramePacer, GameLoop


class FakeClock:
    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


def test_pacer_sleeps_the_rest_of_the_budget():
    slept = []
    pacer = FramePacer(fps=50, clock=FakeClock(1.0, 1.005, 1.02), sleep=slept.append)
    pacer.start()
    pacer.wait()
    assert slept == [pytest.approx(0.015)]


def test_pacer_does_not_catch_up_late_frames():
    slept = []
    pacer = FramePacer(fps=50, clock=FakeClock(1.0, 1.05, 1.05, 1.06, 1.08), sleep=slept.append)
    pacer.start()
    pacer.wait()            # 50 ms frame, over budget
    assert slept == []
    pacer.wait()            # measured from the end of the late frame
    assert slept == [pytest.approx(0.01)]


def _run_for(loop, seconds=0.1):
    loop.resume()
    time.sleep(seconds)
    loop.pause()


def test_pause_joins_the_loop_thread(quiet):
    loop = GameLoop(quiet, lambda: None, lambda: None)
    loop.resume()
    assert loop.playing and loop.is_alive()
    loop.pause()
    assert not loop.playing
    assert not loop.is_alive()
    x = quiet.chaser.x
    time.sleep(0.05)
    assert quiet.chaser.x == x


def test_resume_twice_keeps_one_thread(quiet):
    loop = GameLoop(quiet, lambda: None, lambda: None)
    loop.resume()
    first = loop._thread
    loop.resume()
    assert loop._thread is first
    loop.pause()


def test_no_surface_skips_drawing_but_still_ticks(quiet):
    presented = []
    loop = GameLoop(quiet, lambda: None, lambda: presented.append(1))
    x = quiet.chaser.x
    _run_for(loop)
    assert loop.frames_skipped > 0
    assert loop.frames_drawn == 0
    assert presented == []
    assert quiet.chaser.x < x


def test_valid_surface_is_drawn_and_presented(quiet):
    surf = pygame.Surface((800, 600))
    presented = []
    loop = GameLoop(quiet, lambda: surf, lambda: presented.append(1))
    _run_for(loop)
    assert loop.frames_drawn > 0
    assert len(presented) == loop.frames_drawn


def test_draw_error_does_not_stop_the_loop(quiet, capsys):
    def broken():
        raise RuntimeError("surface lost")

    loop = GameLoop(quiet, lambda: pygame.Surface((800, 600)), broken)
    loop.resume()
    time.sleep(0.05)
    assert loop.is_alive()
    loop.pause()
    assert "[draw error] surface lost" in capsys.readouterr().out


def test_jump_request_reaches_the_player(quiet, audio):
    loop = GameLoop(quiet, lambda: None, lambda: None)
    loop.request_jump()
    _run_for(loop, 0.05)
    assert audio.played[0] == "jump"
