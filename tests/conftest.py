import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from catch_config import CONFIG
from catch_rng import SpawnRandom
from catch_sim import CatchGame

DT = 10.0


@pytest.fixture
def config():
    return dict(CONFIG)


@pytest.fixture
def game(config):
    g = CatchGame(600, 800, config=config, rng=SpawnRandom(1234))
    return g
