"""components — Game data, organised by domain.

Submodules
----------
game      GameState, BirdState, Pipe, TickInput, Screen, Physics,
          GameSession, StepResult
dev_log   DevLog

All public names are re-exported here so code can do
``from components import GameSession``.
"""

# ── Session data ─────────────────────────────────────────────────────
from components.game import (
    GameState, BirdState, Pipe, TickInput, Screen, Physics,
    GameSession, StepResult,
)

# ── Debug ────────────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    # game
    "GameState", "BirdState", "Pipe", "TickInput", "Screen", "Physics",
    "GameSession", "StepResult",
    # debug
    "DevLog",
]
