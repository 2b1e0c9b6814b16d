# catch_layout.py
from dataclasses import dataclass

MAX_W, MAX_H = 600, 800
MIN_W, MIN_H = 240, 320
BAR_H = 56

@dataclass
class Dims:
    field_w: int
    field_h: int
    bar_h: int
    total_w: int
    total_h: int
    bar_y: int

def fit_field(avail_w: int, avail_h: int) -> tuple:
    """Playfield size for the space available, capped at 600x800."""
    w = int(min(MAX_W, avail_w * 0.95))
    h = int(min(MAX_H, avail_h * 0.8))
    return max(MIN_W, w), max(MIN_H, h)

def compute_dims(field_w: int, field_h: int) -> Dims:
    return Dims(
        field_w=field_w, field_h=field_h, bar_h=BAR_H,
        total_w=field_w, total_h=field_h + BAR_H,
        bar_y=field_h,
    )

def dims_for_window(win_w: int, win_h: int) -> Dims:
    """Dims after the user resized the window to win_w x win_h."""
    return compute_dims(max(MIN_W, min(MAX_W, win_w)), max(MIN_H, min(MAX_H, win_h - BAR_H)))
