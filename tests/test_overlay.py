import pygame
from catch_config import CONFIG
from catch_overlay import Overlay


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_adjusts_selected_value():
    cfg = dict(CONFIG)
    o = Overlay(cfg)
    o.handle(key(pygame.K_RIGHT))
    assert cfg["SPAWN_MS"] == 2250
    o.handle(key(pygame.K_DOWN))
    o.handle(key(pygame.K_LEFT))
    assert cfg["GRACE_MS"] == 2750
    assert CONFIG["SPAWN_MS"] == 2000


def test_values_clamped():
    cfg = dict(CONFIG)
    o = Overlay(cfg)
    o.index = 3
    o.handle(key(pygame.K_LEFT))
    assert cfg["SPEED_PER_POINT"] == 0.0
    o.handle(key(pygame.K_RIGHT))
    assert cfg["SPEED_PER_POINT"] == 0.05


def test_toggle_keys():
    o = Overlay(dict(CONFIG))
    o.toggle()
    assert o.active
    o.handle(key(pygame.K_ESCAPE))
    assert not o.active
