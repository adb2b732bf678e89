"""
audio.py — procedural sound effects (no sound files needed)
"""
import math
import random
import struct
import wave
import io
import pygame

SR = 22050


def _build_sound(samples, sr=SR):
    """Turn a list of samples into a pygame.mixer.Sound"""
    buf = io.BytesIO()
    with wave.open(buf, 'wb') as w:
        w.setnchannels(1); w.setsampwidth(2); w.setframerate(sr)
        w.writeframes(b"".join(struct.pack("<h", max(-32767, min(32767, int(s)))) for s in samples))
    buf.seek(0)
    return pygame.mixer.Sound(buf)


def _sweep(f0, f1, dur, vol=0.4):
    n = int(SR * dur)
    out = []
    phase = 0.0
    for i in range(n):
        f = f0 + (f1 - f0) * i / n
        phase += 2 * math.pi * f / SR
        out.append(vol * 32767 * math.sin(phase) * (1 - i / n))
    return out

def _noise(dur, vol=0.3):
    rng = random.Random(42)
    n = int(SR * dur)
    return [vol * 32767 * rng.uniform(-1, 1) * (1 - i / n) ** 0.3 for i in range(n)]

def _chord(freqs, dur, vol=0.3):
    n = int(SR * dur)
    return [vol * 32767 / len(freqs) * sum(math.sin(2 * math.pi * f * i / SR) for f in freqs)
            * (1 - (i / n) ** 0.4) for i in range(n)]


def _gen_sounds():
    return {
        "jump":  _build_sound(_sweep(320, 720, 0.14, 0.35)),
        "hit":   _build_sound(_noise(0.15, 0.45)),
        "over":  _build_sound(_sweep(300, 90, 0.6, 0.4)),
        "point": _build_sound(_chord([659, 988], 0.12, 0.3)),
    }


class Audio:
    """Owns the mixer and the effect table."""

    def __init__(self, enabled=True, vol=0.6):
        self.on = enabled
        self.vol = vol
        self.sounds = {}
        if not enabled:
            return
        try:
            pygame.mixer.init(SR, -16, 2, 512)
            self.sounds = _gen_sounds()
        except pygame.error as e:
            print(f"[Audio init] {e}")

    def play(self, name):
        if not self.on: return
        s = self.sounds.get(name)
        if s:
            s.set_volume(self.vol)
            s.play()
