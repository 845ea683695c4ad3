"""logic/tick.py — Fixed-tick orchestration.

The frame loop runs at whatever rate pygame manages; the simulation
runs at a fixed ``Physics.tick_ms``.  ``FixedTicker`` converts one into
the other, and ``tick_session`` runs one step and turns its result into
events for the rest of the game.

Usage (in the game scene)::

    for _ in range(self.ticker.advance(dt)):
        self.session = tick_session(self.session, inp, physics, screen,
                                    rng, bus)
    bus.drain()
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from components.game import GameSession, Physics, Screen, TickInput
from core import tuning
from core.events import HighScoreBeaten, PipePassed, RunEnded
from logic.physics import step

if TYPE_CHECKING:
    from core.events import EventBus


class FixedTicker:
    """Accumulates frame time and hands out whole ticks.

    ``max_catchup`` caps the ticks returned for one frame so a long
    stall (window drag, breakpoint) doesn't fast-forward the run.
    """

    def __init__(self, tick_ms: int = 16, max_catchup: int = 5):
        self.tick_s = tick_ms / 1000.0
        self.max_catchup = max_catchup
        self.accum = 0.0
        self.ticks = 0

    @classmethod
    def from_tuning(cls, physics: Physics) -> FixedTicker:
        return cls(physics.tick_ms,
                   int(tuning.get("physics", "max_catchup_ticks", 5)))

    def advance(self, dt: float) -> int:
        """Add *dt* seconds; return how many ticks to run now."""
        self.accum += dt
        n = int(self.accum // self.tick_s)
        if n > self.max_catchup:
            n = self.max_catchup
            self.accum = 0.0
        else:
            self.accum -= n * self.tick_s
        self.ticks += n
        return n

    def reset(self) -> None:
        self.accum = 0.0


def tick_session(session: GameSession, tick_input: TickInput,
                 physics: Physics, screen: Screen, rng: random.Random,
                 bus: EventBus | None = None) -> GameSession:
    """Run one simulation step and emit what happened on *bus*."""
    result = step(session, tick_input, physics, screen, rng)
    new = result.session
    if bus is not None:
        for i in range(result.passed):
            bus.emit(PipePassed(score=session.score + i + 1))
        if result.game_over:
            bus.emit(RunEnded(score=new.score, high_score=new.high_score,
                              player_name=new.player_name))
        if result.new_high_score is not None:
            bus.emit(HighScoreBeaten(value=result.new_high_score))
    return new
