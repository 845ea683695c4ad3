"""scenes/game_draw.py — Rendering for the game scene.

Pure presentation: reads a ``GameSession`` and draws it with pygame
primitives.  Nothing here feeds back into the simulation.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import pygame

from components import GameSession, GameState, Physics, Screen
from core.collision import bird_box
from core.constants import (
    BIRD_COLOR, BIRD_EYE_COLOR, GROUND_COLOR, GROUND_EDGE_COLOR,
    HIGHSCORE_COLOR, HITBOX_COLOR, PIPE_COLOR, PIPE_EDGE_COLOR, SKY_COLOR,
    TEXT_COLOR,
)
from ui.helpers import draw_centered

if TYPE_CHECKING:
    from core.app import App
    from scenes.game_scene import GameScene


def draw_world(surface: pygame.Surface, session: GameSession,
               physics: Physics, screen: Screen, *,
               show_hitbox: bool = False) -> None:
    surface.fill(SKY_COLOR)
    ground_top = int(screen.height - physics.ground_height)
    pw = int(physics.pipe_width)

    for pipe in session.pipes:
        x = int(pipe.x)
        top_h = int(pipe.gap_y)
        bottom_y = int(pipe.gap_y + physics.gap_height)
        for rect in (pygame.Rect(x, 0, pw, top_h),
                     pygame.Rect(x, bottom_y, pw, ground_top - bottom_y)):
            if rect.height <= 0:
                continue
            pygame.draw.rect(surface, PIPE_COLOR, rect)
            pygame.draw.rect(surface, PIPE_EDGE_COLOR, rect, width=2)

    # ground
    pygame.draw.rect(surface, GROUND_COLOR,
                     (0, ground_top, int(screen.width), int(physics.ground_height)))
    pygame.draw.line(surface, GROUND_EDGE_COLOR, (0, ground_top),
                     (int(screen.width), ground_top), 3)

    # bird
    size = int(physics.bird_size)
    bx, by = int(physics.bird_x), int(session.bird.y)
    pygame.draw.ellipse(surface, BIRD_COLOR, (bx, by, size, size))
    pygame.draw.circle(surface, BIRD_EYE_COLOR,
                       (bx + size * 2 // 3, by + size // 3), max(3, size // 8))

    if show_hitbox:
        left, top, right, bottom = bird_box(session.bird.y, physics)
        pygame.draw.rect(surface, HITBOX_COLOR,
                         (int(left), int(top), int(right - left), int(bottom - top)),
                         width=1)


def draw_hud(surface: pygame.Surface, app: App, session: GameSession) -> None:
    y = 12
    if session.state is GameState.PLAYING:
        draw_centered(surface, app, f"Hello, {session.player_name}!", y, TEXT_COLOR)
        y += 26
    draw_centered(surface, app, f"Score: {session.score}", y, TEXT_COLOR,
                  app.font_lg)
    draw_centered(surface, app, f"High Score: {session.high_score}", y + 34,
                  HIGHSCORE_COLOR)


def draw_debug(surface: pygame.Surface, app: App, scene: GameScene) -> None:
    """F1 overlay: live numbers plus the most recent dev-log entries."""
    s = scene.session
    lines = [
        f"state {s.state.name}  tick {scene.ticker.ticks}",
        f"bird y={s.bird.y:.1f} v={s.bird.velocity:.2f}",
        f"pipes {len(s.pipes)}  writes {len(scene.sync.attempts)}",
    ]
    lines += [f"[{e['tick']:>6}] {e['cat']}: {e['msg']}" for e in scene.log.recent(10)]
    y = surface.get_height() - 16 * len(lines) - 8
    for line in lines:
        app.draw_text_bg(surface, line, 6, y, font=app.font_sm)
        y += 16
