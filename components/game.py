"""components.game — Game session dataclasses.

Everything the simulation step reads or produces is a frozen dataclass.
The step never mutates a session in place; it builds a new one with
``dataclasses.replace``.  That keeps a whole run reproducible from
(initial session, input sequence, RNG seed).

All positions and sizes are in world units (1 unit = 1 screen pixel at
the design resolution).  ``y`` grows downward, like pygame.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class BirdState:
    y: float = 300.0          # top edge of the bird
    velocity: float = 0.0     # units / tick, positive = falling


@dataclass(frozen=True, slots=True)
class Pipe:
    """One obstacle: a top and a bottom segment around a gap.

    ``x`` is the leading (left) edge.  The gap spans
    ``gap_y`` → ``gap_y + Physics.gap_height``.
    """
    x: float
    gap_y: float


@dataclass(frozen=True, slots=True)
class TickInput:
    jump: bool = False


@dataclass(frozen=True, slots=True)
class Screen:
    """Host surface size.  Affects spawn bounds and the floor."""
    width: float = 400.0
    height: float = 800.0


@dataclass(frozen=True, slots=True)
class Physics:
    """Every tuning constant the simulation uses.

    Defaults match the shipped ``data/tuning.toml``.  Build from the
    tuning file with :meth:`from_tuning`.
    """
    gravity: float = 0.8
    jump_force: float = -12.0
    pipe_width: float = 60.0
    gap_height: float = 250.0
    pipe_speed: float = 4.0
    bird_size: float = 50.0
    bird_x: float = 100.0
    ground_height: float = 70.0
    spawn_distance: float = 200.0   # spawn once last pipe is this far in
    gap_margin: float = 100.0       # min distance of the gap from top/bottom
    hit_padding: float = 10.0       # shrink of the bird box on every side
    start_y: float = 300.0
    tick_ms: int = 16

    @classmethod
    def from_tuning(cls) -> Physics:
        from core import tuning
        values = {}
        for f in fields(cls):
            raw = tuning.get("physics", f.name, f.default)
            values[f.name] = int(raw) if f.name == "tick_ms" else float(raw)
        return cls(**values)

    def max_bird_y(self, screen: Screen) -> float:
        """Lowest top-edge the bird can have before touching the ground."""
        return screen.height - self.ground_height - self.bird_size

    def gap_range(self, screen: Screen) -> tuple[float, float]:
        lo = self.gap_margin
        hi = screen.height - self.gap_height - self.ground_height - self.gap_margin
        return lo, max(lo, hi)


@dataclass(frozen=True, slots=True)
class GameSession:
    state: GameState = GameState.START
    bird: BirdState = field(default_factory=BirdState)
    pipes: tuple[Pipe, ...] = ()
    score: int = 0
    high_score: int = 0
    player_name: str = ""


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of a single tick.

    ``new_high_score`` is set only on the tick the run ends with a
    score above the previous high score; the caller persists it.
    """
    session: GameSession
    passed: int = 0
    game_over: bool = False
    new_high_score: int | None = None
