"""ui.modal — Overlay base class and the slot that shows one at a time.

Flappy Pipes has two overlays, the start menu and the game-over panel,
and never shows both.  ``ModalSlot`` holds the one on screen; showing a
new overlay closes the old one first so text input is switched off
cleanly.  While the slot is empty the bird is in flight.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ui.commands import UICommand


class Modal(ABC):
    """An overlay drawn over the playfield."""

    def on_open(self) -> None:
        pass

    def on_close(self) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        """Turn one pygame event into commands for the scene.

        The overlay never touches the ``GameSession`` itself.
        """

    @abstractmethod
    def draw(self, surface: pygame.Surface, app) -> None:
        ...


class ModalSlot:
    """Holds the overlay currently on screen, if any."""

    __slots__ = ("active",)

    def __init__(self) -> None:
        self.active: Modal | None = None

    @property
    def is_open(self) -> bool:
        return self.active is not None

    def show(self, modal: Modal) -> None:
        self.close()
        self.active = modal
        modal.on_open()

    def close(self) -> None:
        if self.active is not None:
            modal, self.active = self.active, None
            modal.on_close()

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        return self.active.handle_event(event) if self.active else []

    def update(self, dt: float) -> None:
        if self.active:
            self.active.update(dt)

    def draw(self, surface: pygame.Surface, app) -> None:
        if self.active:
            self.active.draw(surface, app)
