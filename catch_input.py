
"""Input sampling: arrow keys + pointer (mouse drag / touch)"""
from dataclasses import dataclass
from typing import Optional
import pygame

@dataclass(frozen=True)
class InputSample:
    left_held: bool = False
    right_held: bool = False
    pointer_x: Optional[float] = None

class InputSampler:
    """Collects events as they arrive; `sample()` is read once per update step.

    Only presses that land on the playfield drive the pointer, so clicks on the
    button bar below it never move the basket.
    """
    def __init__(self, field_w: int, field_h: int, total_h: Optional[int] = None):
        self.field_w = field_w; self.field_h = field_h
        self.total_h = field_h if total_h is None else total_h
        self.left = False; self.right = False
        self.pointer_x: Optional[float] = None
        self.dragging = False
        self.touching = False

    def resize(self, field_w: int, field_h: int, total_h: Optional[int] = None):
        self.field_w = field_w; self.field_h = field_h
        self.total_h = field_h if total_h is None else total_h

    def clear(self):
        self.left = self.right = self.dragging = self.touching = False
        self.pointer_x = None

    def handle(self, e):
        if e.type in (pygame.KEYDOWN, pygame.KEYUP):
            down = e.type == pygame.KEYDOWN
            if e.key == pygame.K_LEFT: self.left = down
            elif e.key == pygame.K_RIGHT: self.right = down
        elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            if e.pos[1] < self.field_h:
                self.dragging = True; self.pointer_x = float(e.pos[0])
        elif e.type == pygame.MOUSEMOTION:
            if self.dragging: self.pointer_x = float(e.pos[0])
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            self.dragging = False; self.pointer_x = None
        # finger coordinates are normalized to the window
        elif e.type == pygame.FINGERDOWN:
            if e.y * self.total_h < self.field_h:
                self.touching = True; self.pointer_x = e.x * self.field_w
        elif e.type == pygame.FINGERMOTION:
            if self.touching: self.pointer_x = e.x * self.field_w
        elif e.type == pygame.FINGERUP:
            self.touching = False; self.pointer_x = None

    def sample(self) -> InputSample:
        return InputSample(self.left, self.right, self.pointer_x)
