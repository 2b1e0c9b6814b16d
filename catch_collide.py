
"""Collision helpers: clamp, overlap, fell-through"""
from catch_symbol import Basket, FallingSymbol

CATCH_BAND = 0.5  # symbol must reach below this fraction of the basket height

def clamp_x(x: float, basket_w: float, field_w: float) -> float:
    hi = max(0, field_w - basket_w)
    return max(0, min(x, hi))

def collides(sym: FallingSymbol, basket: Basket, size: float) -> bool:
    cx = sym.x + size / 2
    if not (basket.x < cx < basket.x + basket.width): return False
    band_top = basket.y + basket.height * CATCH_BAND
    return sym.y + size > band_top and sym.y < basket.y + basket.height

def fell_through(sym: FallingSymbol, field_h: float) -> bool:
    return sym.y > field_h
