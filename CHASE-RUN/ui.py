"""
ui.py — fonts, HUD text and the pause overlay
"""
import pygame
from config import PAL, HUD_SIZE, HUD_POS


def make_font(size, bold=False):
    for fn in ["DejaVu Sans", "Arial", "FreeSans", None]:
        try: return pygame.font.SysFont(fn, size, bold=bold)
        except (pygame.error, OSError) as e: print(f"[font] {fn}: {e}")
    return pygame.font.Font(None, size)

def make_fonts():
    """(hud, title, small)"""
    return make_font(HUD_SIZE), make_font(48, True), make_font(18)


def _panel(surf, x, y, w, h, alpha=200):
    s = pygame.Surface((w,h), pygame.SRCALPHA)
    s.fill((14,22,12,alpha)); surf.blit(s,(x,y))
    pygame.draw.rect(surf, PAL["ui_gold"], (x,y,w,h), 1, border_radius=8)


# ─────────────────────────────────────────────────────
#  HUD
# ─────────────────────────────────────────────────────
def draw_hud(surf, fonts, score, high_score):
    F = fonts[0]
    (sx, sy), (hx, hy) = HUD_POS
    # positions are text baselines, as on a canvas
    t = F.render(f"Score: {score}", True, PAL["text"])
    surf.blit(t, (sx, sy - F.get_ascent()))
    t = F.render(f"High Score: {high_score}", True, PAL["text"])
    surf.blit(t, (hx, hy - F.get_ascent()))


def draw_pause(surf, fonts):
    F, Fm, Fs = fonts
    w, h = surf.get_size()
    ov = pygame.Surface((w,h), pygame.SRCALPHA); ov.fill(PAL["overlay"]); surf.blit(ov,(0,0))
    pw, ph = 360, 130
    _panel(surf, w//2-pw//2, h//2-ph//2, pw, ph, 220)
    t = Fm.render("PAUSED", True, PAL["ui_gold"])
    surf.blit(t, (w//2-t.get_width()//2, h//2-ph//2+16))
    t = Fs.render("return to the window to keep running", True, PAL["ui_dim"])
    surf.blit(t, (w//2-t.get_width()//2, h//2+24))
