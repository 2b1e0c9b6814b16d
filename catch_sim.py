"""
Simulation controller for the letter-catch game.

Owns all mutable game state and advances it one fixed update step at a time.
Nothing here draws, plays audio or polls devices: the main loop feeds an
InputSample into `tick()` and forwards the returned events (catch / ended)
to the audio bank and UI, and the renderer reads `snapshot()` once per frame.

Timers are simulated: the clock counts whole microseconds and advances only by
the `dt_ms` passed to `tick`, so a 60 Hz step lands exactly on 3000 ms after
180 ticks. Spawning and the post-catch grace window run without a wall clock and
stop as soon as the round is paused or ended.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from catch_config import CONFIG
from catch_symbol import ALPHABET, Basket, CaughtDisplay, FallingSymbol, RoundState, next_letter
from catch_collide import clamp_x, collides, fell_through
from catch_input import InputSample
from catch_rng import SpawnRandom

log = logging.getLogger(__name__)

EV_CATCH = "catch"
EV_ENDED = "ended"


@dataclass(frozen=True)
class SimEvent:
    kind: str
    letter: Optional[str] = None


@dataclass(frozen=True)
class Snapshot:
    basket: Basket
    symbols: Tuple[FallingSymbol, ...]
    caught: Optional[CaughtDisplay]
    score: int
    current_target: str
    state: RoundState


class CatchGame:
    """Falling-letter simulation.

    State machine::

        IDLE --start--> RUNNING --pause--> IDLE
        RUNNING --advance past Z / exit--> ENDED --start--> RUNNING (reset)
    """

    def __init__(self, width: float, height: float, config: Optional[Dict] = None,
                 rng: Optional[SpawnRandom] = None):
        self.config = CONFIG if config is None else config
        self.rng = rng or SpawnRandom(self.config["SPAWN_SEED"])
        self.width = width
        self.height = height
        self.basket = Basket(0.0, 0.0, self.config["BASKET_W"], self.config["BASKET_H"],
                             self.config["BASKET_SPEED"])
        self.symbols: List[FallingSymbol] = []
        self.current_target = ALPHABET[0]
        self.score = 0
        self.state = RoundState.IDLE
        self.caught: Optional[CaughtDisplay] = None
        self.now_us = 0
        self.spawn_acc_us = 0
        self._caught_at_us = 0
        self._center_basket()

    @property
    def now_ms(self) -> float:
        return self.now_us / 1000

    # ---------- bounds ----------
    def _center_basket(self):
        b = self.basket
        b.x = clamp_x(self.width / 2 - b.width / 2, b.width, self.width)
        b.y = self.height - self.config["BASKET_BOTTOM_OFFSET"]

    def set_bounds(self, width: float, height: float):
        """Playfield resized: re-anchor the basket and keep it inside."""
        self.width, self.height = width, height
        b = self.basket
        b.y = height - self.config["BASKET_BOTTOM_OFFSET"]
        b.x = clamp_x(b.x, b.width, width)
        if self.caught:
            self._ride_basket()

    # ---------- lifecycle ----------
    def start(self):
        if self.state is RoundState.RUNNING:
            return
        if self.state is RoundState.ENDED:
            self.reset()
            return
        self._run()

    def _run(self):
        self.state = RoundState.RUNNING
        self.spawn_acc_us = 0
        self._center_basket()
        log.debug("round running (target=%s score=%d)", self.current_target, self.score)

    def pause(self):
        if self.state is RoundState.RUNNING:
            self.state = RoundState.IDLE
            log.debug("paused")

    def reset(self):
        self.score = 0
        self.current_target = ALPHABET[0]
        self.symbols = []
        self.caught = None
        self._run()

    def exit(self):
        self.state = RoundState.ENDED
        self.symbols = []
        self.caught = None
        self.spawn_acc_us = 0
        log.info("round exited with score %d", self.score)

    def toggle(self):
        """Single start/pause/restart control."""
        if self.state is RoundState.IDLE: self.start()
        elif self.state is RoundState.RUNNING: self.pause()
        else: self.reset()

    # ---------- spawning ----------
    def fall_speed(self) -> float:
        return self.config["BASE_SPEED"] + self.score * self.config["SPEED_PER_POINT"]

    def spawn(self) -> Optional[FallingSymbol]:
        if self.state is not RoundState.RUNNING:
            return None
        if self.caught and self.caught.text == self.current_target:
            return None
        size = self.config["SYMBOL_SIZE"]
        sym = FallingSymbol(self.current_target, self.rng.next_x(self.width, size), -size,
                            self.fall_speed())
        self.symbols.append(sym)
        return sym

    # ---------- per-step update ----------
    def _move_basket(self, sample: InputSample):
        b = self.basket
        if sample.pointer_x is not None:
            b.x = clamp_x(sample.pointer_x - b.width / 2, b.width, self.width)
            return
        b.speed = self.config["BASKET_SPEED"]
        if sample.left_held: b.x = clamp_x(b.x - b.speed, b.width, self.width)
        if sample.right_held: b.x = clamp_x(b.x + b.speed, b.width, self.width)

    def _ride_basket(self):
        b = self.basket
        half = self.config["SYMBOL_SIZE"] / 2
        self.caught.x = b.center_x - half
        self.caught.y = b.y + b.height / 2

    def _catch(self, sym: FallingSymbol, events: List[SimEvent]):
        self.score += 1
        self._caught_at_us = self.now_us
        self.caught = CaughtDisplay(sym.text, 0.0, 0.0, self.now_ms)
        self._ride_basket()
        events.append(SimEvent(EV_CATCH, sym.text))
        log.debug("caught %s (score=%d)", sym.text, self.score)

    def tick(self, dt_ms: float, sample: Optional[InputSample] = None) -> List[SimEvent]:
        """Advance one update step; returns events emitted during it."""
        events: List[SimEvent] = []
        if self.state is not RoundState.RUNNING:
            return events
        step_us = round(dt_ms * 1000)
        self.now_us += step_us
        self._move_basket(sample or InputSample())

        size = self.config["SYMBOL_SIZE"]
        kept: List[FallingSymbol] = []
        for sym in self.symbols:
            sym.y += sym.speed
            if collides(sym, self.basket, size):
                if sym.text == self.current_target and self.caught is None:
                    self._catch(sym, events)
                continue
            if fell_through(sym, self.height):
                continue
            kept.append(sym)
        if self.caught is not None and self.caught.text == self.current_target:
            kept = [s for s in kept if s.text != self.current_target]
        self.symbols = kept

        if self.caught is not None:
            self._ride_basket()
            if self.now_us - self._caught_at_us >= self.config["GRACE_MS"] * 1000:
                if self.advance_target():
                    events.append(SimEvent(EV_ENDED))
                    return events

        # at most one spawn per step, even right after SPAWN_MS is lowered
        self.spawn_acc_us += step_us
        period_us = max(1, round(self.config["SPAWN_MS"] * 1000))
        if self.spawn_acc_us >= period_us:
            self.spawn_acc_us = (self.spawn_acc_us - period_us) % period_us
            self.spawn()
        return events

    def advance_target(self) -> bool:
        """Move to the next letter; returns True when the round ended at 'Z'."""
        self.caught = None
        nxt = next_letter(self.current_target)
        if nxt is None:
            self.state = RoundState.ENDED
            self.symbols = []
            self.spawn_acc_us = 0
            log.info("alphabet complete, final score %d", self.score)
            return True
        self.current_target = nxt
        return False

    # ---------- read-only view ----------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            basket=replace(self.basket),
            symbols=tuple(replace(s) for s in self.symbols),
            caught=replace(self.caught) if self.caught else None,
            score=self.score,
            current_target=self.current_target,
            state=self.state,
        )
