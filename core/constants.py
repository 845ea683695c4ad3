"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
Gameplay is measured in **design pixels** at the virtual resolution
(``DESIGN_WIDTH`` × ``DESIGN_HEIGHT``) and in **ticks**.  One tick is
``Physics.tick_ms`` milliseconds (16 ms by default), so velocities are
units per tick, not per second.

    Position        px      (design pixels, y grows downward)
    Velocity        px/tick
    Gravity         px/tick²
    Time            ticks

The App scales the design surface to whatever window size the player
picks; gameplay code never sees real screen pixels.

Gameplay numbers (gravity, pipe speed, …) are tuning, not constants:
they live in ``data/tuning.toml`` and ``components.game.Physics``.
"""

# ── Design resolution ───────────────────────────────────────────────
DESIGN_WIDTH = 400
DESIGN_HEIGHT = 800
DEFAULT_FPS = 60

DEFAULT_PLAYER_NAME = "Player"
MAX_NAME_LENGTH = 16

# ── Palette ─────────────────────────────────────────────────────────
SKY_COLOR = (112, 197, 206)
GROUND_COLOR = (222, 216, 149)
GROUND_EDGE_COLOR = (84, 56, 71)
PIPE_COLOR = (115, 191, 46)
PIPE_EDGE_COLOR = (84, 56, 71)
BIRD_COLOR = (80, 140, 230)
BIRD_EYE_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
HIGHSCORE_COLOR = (255, 230, 0)
HITBOX_COLOR = (255, 40, 40)
