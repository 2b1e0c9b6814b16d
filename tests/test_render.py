import pygame
import pytest
from catch_layout import compute_dims
from catch_render import BAR_COLOR, BASKET_COLOR, BG_COLOR, RenderAssets
from catch_sim import CatchGame
from catch_rng import SpawnRandom
from catch_symbol import FallingSymbol


@pytest.fixture
def assets(tmp_path, config):
    pygame.font.init()
    dims = compute_dims(600, 800)
    f = pygame.font.Font(None, 30)
    return RenderAssets(dims, f, pygame.font.Font(None, 50), pygame.font.Font(None, 100), tmp_path)


def test_missing_images_fall_back(assets):
    assert assets.bg_src is None
    assert assets.basket_src is None


def test_draw_running_frame(assets, config):
    game = CatchGame(600, 800, config=config, rng=SpawnRandom(3))
    game.start()
    game.symbols.append(FallingSymbol("A", 10, 100, 2))
    screen = pygame.Surface((600, 856))
    assets.draw(screen, game.snapshot())
    b = game.basket
    assert screen.get_at((int(b.x) + 5, int(b.y) + 5))[:3] == BASKET_COLOR
    assert assets.hud.score == 0
    assert assets.hud.target == "A"


def test_draw_ended_frame(assets, config):
    game = CatchGame(600, 800, config=config, rng=SpawnRandom(3))
    game.exit()
    screen = pygame.Surface((600, 856))
    assets.draw(screen, game.snapshot())
    shaded = screen.get_at((5, 400))
    assert all(shaded[i] < BG_COLOR[i] for i in range(3))
    assert screen.get_at((3, 830))[:3] == BAR_COLOR
    assert any(screen.get_at((x, 400))[0] > 200 for x in range(150, 450))


def test_button_hit_testing(assets):
    assert assets.hit_button(assets.start_rect.center) == "toggle"
    assert assets.hit_button(assets.exit_rect.center) == "exit"
    assert assets.hit_button((300, 300)) is None
