"""ui/start_menu.py — Start overlay with the player-name field."""

from __future__ import annotations
import pygame

from core.constants import DEFAULT_PLAYER_NAME, MAX_NAME_LENGTH
from ui.commands import QuitGame, StartRun, UICommand
from ui.helpers import (
    BUTTON_H, button_rect, draw_button, draw_centered, draw_overlay,
    draw_text_field,
)
from ui.modal import Modal


class StartMenuModal(Modal):
    """Type a name, then Enter / click Start."""

    def __init__(self, name: str = ""):
        self.name = name
        self._blink = 0.0
        self._button: pygame.Rect | None = None
        self._hover = False

    def on_open(self) -> None:
        pygame.key.start_text_input()

    def on_close(self) -> None:
        pygame.key.stop_text_input()

    def update(self, dt: float) -> None:
        self._blink = (self._blink + dt) % 1.0

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if event.type == pygame.TEXTINPUT:
            room = MAX_NAME_LENGTH - len(self.name)
            if room > 0:
                self.name += event.text[:room]
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return [StartRun(player_name=self.name)]
            if event.key == pygame.K_BACKSPACE:
                self.name = self.name[:-1]
            elif event.key == pygame.K_ESCAPE:
                return [QuitGame()]
        elif event.type == pygame.MOUSEMOTION and self._button is not None:
            self._hover = self._button.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._button is not None and self._button.collidepoint(event.pos):
                return [StartRun(player_name=self.name)]
        elif event.type == pygame.FINGERDOWN:
            return [StartRun(player_name=self.name)]
        return []

    def draw(self, surface: pygame.Surface, app) -> None:
        draw_overlay(surface)
        cy = surface.get_height() // 2
        draw_centered(surface, app, "Enter your name:", cy - 90)
        field = pygame.Rect(0, 0, 260, 40)
        field.center = (surface.get_width() // 2, cy - 40)
        draw_text_field(surface, app, field, self.name, DEFAULT_PLAYER_NAME,
                        caret=self._blink < 0.5)
        self._button = draw_button(surface, app, button_rect(surface, cy + 10),
                                   "Start", hovered=self._hover)
        draw_centered(surface, app, "Enter = start   Esc = quit",
                      cy + 20 + BUTTON_H, (200, 200, 200), app.font_sm)
