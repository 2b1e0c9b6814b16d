
"""Basket, falling symbols, caught display, alphabet helpers"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

class RoundState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"

@dataclass
class Basket:
    x: float
    y: float
    width: int
    height: int
    speed: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

@dataclass
class FallingSymbol:
    text: str
    x: float
    y: float
    speed: float

@dataclass
class CaughtDisplay:
    text: str
    x: float
    y: float
    time_caught: float

def next_letter(letter: str) -> Optional[str]:
    """Letter after `letter` in A-Z, or None past 'Z'."""
    i = ALPHABET.index(letter)
    if i + 1 >= len(ALPHABET): return None
    return ALPHABET[i + 1]
