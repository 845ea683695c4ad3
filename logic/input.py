"""logic/input.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context**:

- ``PLAY``  a tap (Space, Up, W, left click, touch) is the ``tap``
            intent, i.e. a jump.
- ``MENU``  an overlay (start menu / game over) owns the keyboard;
            everything except the global debug keys is handed back in
            ``raw_events`` for the overlay to interpret.

Usage (in the game scene)::

    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    if self.input.just("tap"):
        ...
"""

from __future__ import annotations
from enum import Enum, auto
import pygame


class InputContext(Enum):
    PLAY = auto()
    MENU = auto()


# Each binding is (pygame key constant).  Mouse buttons are negative:
# -1 = LMB.  Touch uses FINGERDOWN and maps straight to "tap".

_PLAY_BINDS: dict[str, list[int]] = {
    "tap":   [pygame.K_SPACE, pygame.K_UP, pygame.K_w, -1],
}

# Active in every context.
_GLOBAL_BINDS: dict[str, list[int]] = {
    "toggle_debug":  [pygame.K_F1],
    "toggle_hitbox": [pygame.K_F2],
    "reload_tuning": [pygame.K_F4],
}


class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events and ``feed(event)``
    for each pygame event, then query ``just(intent)``.
    """

    def __init__(self):
        self.context: InputContext = InputContext.MENU
        self._pressed: set[str] = set()
        # Events the current context didn't consume (overlay input, QUIT)
        self.raw_events: list[pygame.event.Event] = []

    def begin_frame(self):
        self._pressed.clear()
        self.raw_events.clear()

    def feed(self, event: pygame.event.Event):
        """Map a raw pygame event to intents for the active context."""
        if event.type == pygame.KEYDOWN:
            intent = self._match(event.key, _GLOBAL_BINDS)
            if intent:
                self._pressed.add(intent)
                return

        if self.context == InputContext.MENU:
            self.raw_events.append(event)
            return

        if event.type == pygame.KEYDOWN:
            intent = self._match(event.key, _PLAY_BINDS)
            if intent:
                self._pressed.add(intent)
                return
        elif event.type == pygame.MOUSEBUTTONDOWN:
            intent = self._match(-event.button, _PLAY_BINDS)
            if intent:
                self._pressed.add(intent)
                return
        elif event.type == pygame.FINGERDOWN:
            self._pressed.add("tap")
            return

        self.raw_events.append(event)

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame."""
        return intent in self._pressed

    @staticmethod
    def _match(code: int, binds: dict[str, list[int]]) -> str | None:
        for intent, codes in binds.items():
            if code in codes:
                return intent
        return None
