"""
core/scene.py — Scene interface

A Scene is what the App runs: it gets every pygame event, one update
per frame and one draw per frame.  Flappy Pipes has a single
``GameScene``; the start menu and game-over panel are overlays inside
it, not scenes.

    class MyScene(Scene):
        def handle_event(self, event, app): ...
        def update(self, dt, app): ...     # dt is seconds since last frame
        def draw(self, surface, app): ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called once when the app starts running this scene."""
        pass

    def on_exit(self, app: App):
        """Called when the app replaces the scene or shuts down."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""
        pass

    def update(self, dt: float, app: App):
        """Advance the game. dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the design surface."""
        pass
