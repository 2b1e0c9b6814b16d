
"""Seeded spawn-position randomizer"""
import random
from typing import Optional
import pygame

class SpawnRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks() ^ random.getrandbits(32)
        self.seed = seed
        self._rng = random.Random(seed)

    def next_x(self, field_w: float, size: float) -> float:
        return self._rng.uniform(0, max(0.0, field_w - size))
