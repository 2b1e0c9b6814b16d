
import logging
import sys
import pygame
from catch_config import CONFIG
from catch_layout import fit_field, compute_dims, dims_for_window
from catch_input import InputSampler
from catch_overlay import Overlay
from catch_render import RenderAssets
from catch_sim import CatchGame, EV_CATCH, EV_ENDED
from catch_audio import SoundBank

log = logging.getLogger("catch")

TARGET_FPS = 60
UPDATE_HZ = 60


def recreate_window(dims, flags=pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()

    info = pygame.display.Info()
    dims = compute_dims(*fit_field(info.current_w, info.current_h))
    screen = recreate_window(dims)
    pygame.display.set_caption("Letter Catch")
    font = pygame.font.SysFont(None, 34)
    big_font = pygame.font.SysFont(None, 56)
    glyph_font = pygame.font.SysFont("arialblack", 100)

    render = RenderAssets(dims, font, big_font, glyph_font, CONFIG["ASSET_DIR"], CONFIG["SYMBOL_SIZE"])
    sounds = SoundBank(CONFIG["ASSET_DIR"])
    clock = pygame.time.Clock()

    game = CatchGame(dims.field_w, dims.field_h)
    sampler = InputSampler(dims.field_w, dims.field_h, dims.total_h)
    overlay = Overlay()

    def control(action):
        # first press opens the mixer
        sounds.unlock()
        if action == "toggle": game.toggle()
        elif action == "exit": game.exit()
        elif action == "reset": game.reset()
        sampler.clear()

    def resize(w, h):
        nonlocal dims, screen
        dims = dims_for_window(w, h)
        screen = recreate_window(dims)
        render.resize(dims)
        sampler.resize(dims.field_w, dims.field_h, dims.total_h)
        game.set_bounds(dims.field_w, dims.field_h)

    accumulator = 0.0
    dt_ms = 1000.0 / UPDATE_HZ

    while True:
        accumulator += clock.tick(TARGET_FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.VIDEORESIZE:
                resize(e.w, e.h); continue
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1:
                    overlay.toggle(); continue
                if overlay.active:
                    overlay.handle(e); continue
                if e.key in (pygame.K_SPACE, pygame.K_RETURN): control("toggle"); continue
                if e.key == pygame.K_ESCAPE: control("exit"); continue
                if e.key == pygame.K_r: control("reset"); continue
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                action = render.hit_button(e.pos)
                if action:
                    control(action); continue
            sampler.handle(e)

        while accumulator >= dt_ms:
            accumulator -= dt_ms
            if overlay.active:
                continue
            for ev in game.tick(dt_ms, sampler.sample()):
                if ev.kind == EV_CATCH:
                    sounds.play(ev.letter)
                elif ev.kind == EV_ENDED:
                    sampler.clear()

        render.draw(screen, game.snapshot())
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
