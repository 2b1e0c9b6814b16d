"""
Rendering helpers for the letter-catch game.

- Load the background and basket images once; flat fallbacks when missing.
- Pre-render letter glyphs (falling: orange with white outline, caught: green).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
import pygame
from catch_layout import Dims
from catch_symbol import ALPHABET, RoundState
from catch_sim import Snapshot

log = logging.getLogger(__name__)

FALL_COLOR = (255, 165, 0)
CAUGHT_COLOR = (0, 160, 0)
OUTLINE = (255, 255, 255)
BG_COLOR = (18, 24, 48)
BASKET_COLOR = (0, 0, 255)
BAR_COLOR = (21, 25, 53)
BTN_COLOR = (76, 175, 80)
BTN_EXIT_COLOR = (175, 76, 76)

BUTTON_LABELS = {
    RoundState.IDLE: "Start",
    RoundState.RUNNING: "Pause",
    RoundState.ENDED: "Restart",
}

@dataclass
class HudCache:
    score: int = -1
    target: str = ""
    score_s: Optional[pygame.Surface] = None
    target_s: Optional[pygame.Surface] = None

def load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        log.warning("could not load image %s: %s", path, e)
        return None

def outlined(font: pygame.font.Font, text: str, fill, edge, width: int = 2) -> pygame.Surface:
    """Text filled with `fill` and stroked with `edge`."""
    core = font.render(text, True, fill)
    rim = font.render(text, True, edge)
    w, h = core.get_width() + 2 * width, core.get_height() + 2 * width
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    for dx in (-width, 0, width):
        for dy in (-width, 0, width):
            if dx or dy:
                s.blit(rim, (width + dx, width + dy))
    s.blit(core, (width, width))
    return s

class RenderAssets:
    """Holds images and pre-rendered glyphs for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font,
                 glyph_font: pygame.font.Font, asset_dir="assets", symbol_size: int = 60):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.symbol_size = symbol_size
        asset_dir = Path(asset_dir)
        self.bg_src = load_image(asset_dir / "background.jpg")
        self.basket_src = load_image(asset_dir / "basket.png")
        self.fall_glyphs: Dict[str, pygame.Surface] = {}
        self.caught_glyphs: Dict[str, pygame.Surface] = {}
        for ch in ALPHABET:
            self.fall_glyphs[ch] = outlined(glyph_font, ch, FALL_COLOR, OUTLINE)
            self.caught_glyphs[ch] = outlined(glyph_font, ch, CAUGHT_COLOR, OUTLINE)
        self.hud = HudCache()
        self._scale()

    def resize(self, dims: Dims):
        self.dims = dims
        self._scale()

    def _scale(self):
        d = self.dims
        self.bg = None
        if self.bg_src is not None:
            self.bg = pygame.transform.scale(self.bg_src, (d.field_w, d.field_h))
        self._basket_size = None
        self.basket_img = None
        pad = 12
        bw = (d.total_w - 3 * pad) // 2
        self.start_rect = pygame.Rect(pad, d.bar_y + 8, bw, d.bar_h - 16)
        self.exit_rect = pygame.Rect(2 * pad + bw, d.bar_y + 8, bw, d.bar_h - 16)

    def _basket_surface(self, w: int, h: int) -> Optional[pygame.Surface]:
        if self.basket_src is None:
            return None
        if self._basket_size != (w, h):
            self._basket_size = (w, h)
            self.basket_img = pygame.transform.scale(self.basket_src, (w, h))
        return self.basket_img

    # ---------- buttons ----------
    def hit_button(self, pos) -> Optional[str]:
        if self.start_rect.collidepoint(pos): return "toggle"
        if self.exit_rect.collidepoint(pos): return "exit"
        return None

    def _draw_button(self, screen, rect, label, color):
        pygame.draw.rect(screen, color, rect, border_radius=5)
        s = self.font.render(label, True, (255, 255, 255))
        screen.blit(s, s.get_rect(center=rect.center))

    # ---------- frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        if self.bg is not None:
            screen.blit(self.bg, (0, 0))
        else:
            screen.fill(BG_COLOR, (0, 0, d.field_w, d.field_h))

        b = snap.basket
        img = self._basket_surface(int(b.width), int(b.height))
        if img is not None:
            screen.blit(img, (b.x, b.y))
        else:
            pygame.draw.rect(screen, BASKET_COLOR, (b.x, b.y, b.width, b.height))

        half = self.symbol_size / 2
        for sym in snap.symbols:
            g = self.fall_glyphs[sym.text]
            screen.blit(g, g.get_rect(center=(sym.x + half, sym.y + half)))
        if snap.caught:
            g = self.caught_glyphs[snap.caught.text]
            screen.blit(g, g.get_rect(center=(snap.caught.x + half, snap.caught.y)))

        self.draw_hud(screen, snap.score, snap.current_target)

        if snap.state is RoundState.ENDED:
            shade = pygame.Surface((d.field_w, d.field_h), pygame.SRCALPHA)
            shade.fill((0, 0, 0, 178))
            screen.blit(shade, (0, 0))
            cx, cy = d.field_w // 2, d.field_h // 2
            msg = self.big_font.render("Game Over!", True, (255, 255, 255))
            screen.blit(msg, msg.get_rect(center=(cx, cy)))
            msg = self.big_font.render(f"Final Score: {snap.score}", True, (255, 255, 255))
            screen.blit(msg, msg.get_rect(center=(cx, cy + 60)))
        elif snap.state is RoundState.IDLE:
            msg = self.font.render("Press Start (Space) to play", True, (220, 240, 255))
            screen.blit(msg, msg.get_rect(center=(d.field_w // 2, d.field_h // 2)))

        screen.fill(BAR_COLOR, (0, d.bar_y, d.total_w, d.bar_h))
        self._draw_button(screen, self.start_rect, BUTTON_LABELS[snap.state], BTN_COLOR)
        self._draw_button(screen, self.exit_rect, "Exit", BTN_EXIT_COLOR)

    def draw_hud(self, screen: pygame.Surface, score: int, target: str):
        f = self.font
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (255, 255, 255))
        if target != self.hud.target:
            self.hud.target = target
            self.hud.target_s = f.render(f"Current Letter: {target}", True, (255, 255, 255))
        screen.blit(self.hud.score_s, (10, 12))
        screen.blit(self.hud.target_s, (10, 52))
