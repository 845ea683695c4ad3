"""ui.commands — Command objects emitted by modals.

Modals return these instead of touching the ``GameSession``.  The game
scene reads the list and applies each one through ``logic.session``,
so every state change still goes through the state machine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class StartRun:
    """Start menu confirmed: START → PLAYING."""
    player_name: str = ""


@dataclass(frozen=True, slots=True)
class RestartRun:
    """Game-over panel confirmed: GAME_OVER → START."""


@dataclass(frozen=True, slots=True)
class QuitGame:
    """Close the window."""


UICommand = Union[StartRun, RestartRun, QuitGame]
