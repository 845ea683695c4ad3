"""
core/app.py — Pygame window and frame loop

Flappy Pipes is one screen, so the App runs exactly one Scene.  Each
frame it pumps pygame events into the scene, calls update with the
frame time, lets the scene draw onto a fixed 400x800 design surface
and scales that surface to whatever size the window has.

    app = App(title="Flappy Pipes", width=400, height=800)
    app.set_scene(GameScene())
    app.run()

Closing the window (or a QuitGame command from an overlay) ends the
loop; the scene's ``on_exit`` runs before pygame shuts down so pending
high-score writes get their chance to finish.
"""

from __future__ import annotations
import pygame
from core.constants import DEFAULT_FPS, DESIGN_HEIGHT, DESIGN_WIDTH
from core.scene import Scene

_POINTER_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP,
                   pygame.MOUSEMOTION)


class App:
    def __init__(self, title: str = "Flappy Pipes",
                 width: int = DESIGN_WIDTH, height: int = DESIGN_HEIGHT,
                 fps: int = DEFAULT_FPS):
        pygame.init()
        self._design_size = (width, height)
        self._windowed_size = (width, height)
        self._canvas = pygame.Surface((width, height))
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True
        self.fullscreen = False
        self.scene: Scene | None = None

        self.font = pygame.font.SysFont("sans", 20)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("sans", 26, bold=True)
        self.font_xl = pygame.font.SysFont("sans", 40, bold=True)

    @property
    def size(self) -> tuple[int, int]:
        """Design resolution the scene draws at."""
        return self._design_size

    def set_scene(self, scene: Scene) -> None:
        if self.scene is not None:
            self.scene.on_exit(self)
        self.scene = scene
        scene.on_enter(self)

    def quit(self) -> None:
        self.running = False

    # -- Frame loop --

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                self._dispatch(event)
            if self.scene is not None:
                self.scene.update(dt, self)
                self.scene.draw(self._canvas, self)
            pygame.transform.scale(self._canvas, self.window.get_size(),
                                   self.window)
            pygame.display.flip()

        if self.scene is not None:
            self.scene.on_exit(self)
        pygame.quit()

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self.toggle_fullscreen()
        elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
            self._windowed_size = (event.w, event.h)
            self.window = pygame.display.set_mode((event.w, event.h),
                                                  pygame.RESIZABLE)
        elif self.scene is not None:
            if event.type in _POINTER_EVENTS:
                event = self._to_design(event)
            self.scene.handle_event(event, self)

    def _to_design(self, event: pygame.event.Event) -> pygame.event.Event:
        """Copy of a mouse *event* with ``pos`` in design coordinates.

        Finger events are already normalised to 0..1 and pass through.
        """
        ww, wh = self.window.get_size()
        dw, dh = self._design_size
        attrs = {k: v for k, v in event.dict.items() if k != "pos"}
        attrs["pos"] = (int(event.pos[0] * dw / ww), int(event.pos[1] * dh / wh))
        return pygame.event.Event(event.type, attrs)

    def toggle_fullscreen(self) -> None:
        """F11: switch between the resizable window and fullscreen."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.window = pygame.display.set_mode(self._windowed_size,
                                                  pygame.RESIZABLE)

    # -- Text --

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Text on a translucent box (debug overlay lines)."""
        img = (font or self.font).render(text, True, color)
        w, h = img.get_size()
        box = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        box.fill(bg)
        surface.blit(box, (x - pad, y - pad))
        return surface.blit(img, (x, y))
