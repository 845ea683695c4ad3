"""ui/game_over.py — Game-over overlay.

Any tap restarts once the panel has been up for ``ARM_DELAY`` seconds,
so a player still mashing jump doesn't skip it by accident.
"""

from __future__ import annotations
import pygame

from core.constants import HIGHSCORE_COLOR
from ui.commands import QuitGame, RestartRun, UICommand
from ui.helpers import button_rect, draw_button, draw_centered, draw_overlay
from ui.modal import Modal

ARM_DELAY = 0.4


class GameOverModal(Modal):

    def __init__(self, player_name: str, score: int, high_score: int,
                 new_record: bool = False):
        self.player_name = player_name
        self.score = score
        self.high_score = high_score
        self.new_record = new_record
        self._age = 0.0

    @property
    def armed(self) -> bool:
        return self._age >= ARM_DELAY

    def update(self, dt: float) -> None:
        self._age += dt

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return [QuitGame()]
        if not self.armed:
            return []
        tapped = (
            (event.type == pygame.KEYDOWN
             and event.key in (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER))
            or (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1)
            or event.type == pygame.FINGERDOWN
        )
        return [RestartRun()] if tapped else []

    def draw(self, surface: pygame.Surface, app) -> None:
        draw_overlay(surface)
        cy = surface.get_height() // 2
        draw_centered(surface, app, "GAME OVER", cy - 120, (255, 120, 60),
                      app.font_xl)
        draw_centered(surface, app, f"Good try, {self.player_name}!", cy - 60)
        draw_centered(surface, app, f"Score: {self.score}", cy - 35)
        if self.new_record:
            draw_centered(surface, app, "New high score!", cy - 10,
                          HIGHSCORE_COLOR)
        draw_button(surface, app, button_rect(surface, cy + 20), "Restart")
