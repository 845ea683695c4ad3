"""logic/session.py — Session lifecycle (the game's state machine).

    START ──start()──▶ PLAYING ──floor / pipe──▶ GAME_OVER ──restart()──▶ START

The PLAYING → GAME_OVER edge belongs to ``logic.physics.step``; this
module owns the two menu-driven edges and the initial session.  There
is no GAME_OVER → PLAYING shortcut: a finished run always goes back
through the start menu.
"""

from __future__ import annotations
from dataclasses import replace

from components.game import BirdState, GameSession, GameState, Physics
from core.constants import DEFAULT_PLAYER_NAME, MAX_NAME_LENGTH


class InvalidTransition(ValueError):
    """A menu action was applied in a state that doesn't allow it."""

    def __init__(self, action: str, state: GameState):
        super().__init__(f"cannot {action} from {state.name}")
        self.action = action
        self.state = state


def fresh_bird(physics: Physics) -> BirdState:
    return BirdState(y=physics.start_y, velocity=0.0)


def clean_name(name: str) -> str:
    name = " ".join(name.split())[:MAX_NAME_LENGTH]
    return name or DEFAULT_PLAYER_NAME


def new_session(physics: Physics, high_score: int = 0,
                player_name: str = "") -> GameSession:
    return GameSession(
        state=GameState.START,
        bird=fresh_bird(physics),
        pipes=(),
        score=0,
        high_score=max(0, high_score),
        player_name=player_name,
    )


def start(session: GameSession, player_name: str | None = None) -> GameSession:
    """START → PLAYING.  A blank name becomes ``DEFAULT_PLAYER_NAME``."""
    if session.state is not GameState.START:
        raise InvalidTransition("start", session.state)
    name = session.player_name if player_name is None else player_name
    return replace(session, state=GameState.PLAYING, player_name=clean_name(name))


def restart(session: GameSession, physics: Physics) -> GameSession:
    """GAME_OVER → START.  Keeps the high score and the player's name."""
    if session.state is not GameState.GAME_OVER:
        raise InvalidTransition("restart", session.state)
    return new_session(physics, high_score=session.high_score,
                       player_name=session.player_name)


def with_high_score(session: GameSession, value: int | None) -> GameSession:
    """Fold an externally loaded high score into *session*.

    Never lowers the current value, so a slow load that lands after a
    record-breaking run can't undo it.
    """
    if value is None or value <= session.high_score:
        return session
    return replace(session, high_score=value)
