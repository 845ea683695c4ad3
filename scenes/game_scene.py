"""scenes/game_scene.py — The one and only screen.

Owns everything a run needs: the current ``GameSession``, the seeded
RNG that places pipe gaps, the event bus, the high-score sync, and the
start / game-over overlays.  Each frame it:

1. folds in a high score the background loader may have delivered,
2. routes menu input to the overlay on screen and applies its commands,
3. runs as many fixed ticks as the frame time allows,
4. drains the event bus (dev log, high-score persist).

On exit it waits, bounded by ``[highscore] flush_timeout``, for record
writes still in flight so quitting right after a record keeps it.

Gameplay rules live in ``logic/``; this file only wires them to pygame.
"""

from __future__ import annotations
import random
import pygame

from components import DevLog, GameSession, GameState, Physics, Screen, TickInput
from core import tuning
from core.app import App
from core.events import EventBus, RunStarted
from core.save import store_from_tuning
from core.scene import Scene
from logic.highscore import HighScoreSync
from logic.input import InputContext, InputManager
from logic.session import new_session, restart, start, with_high_score
from logic.tick import FixedTicker, tick_session
from scenes.game_draw import draw_debug, draw_hud, draw_world
from ui import (
    GameOverModal, ModalSlot, QuitGame, RestartRun, StartMenuModal,
    StartRun,
)


class GameScene(Scene):
    """Playfield + overlays.  Pass *sync* / *seed* to make runs reproducible."""

    def __init__(self, sync: HighScoreSync | None = None,
                 seed: int | None = None,
                 physics: Physics | None = None):
        self.physics = physics or Physics.from_tuning()
        self._next_physics: Physics | None = None
        self.screen = Screen()
        self.rng = random.Random(seed)
        self.bus = EventBus()
        self.log = DevLog()
        self.sync = sync or HighScoreSync(store_from_tuning())
        self.sync.attach(self.bus)
        self.ticker = FixedTicker.from_tuning(self.physics)
        self.input = InputManager()
        self.overlay = ModalSlot()
        self.session: GameSession = new_session(self.physics)
        self.show_debug = False
        self.show_hitbox = False
        self._jump_queued = False
        self._wire_log()

    def _wire_log(self) -> None:
        bus, log = self.bus, self.log
        bus.subscribe("RunStarted", lambda ev: log.record(
            "state", f"run started by {ev.player_name}", tick=self.ticker.ticks))
        bus.subscribe("PipePassed", lambda ev: log.record(
            "score", f"pipe passed, score {ev.score}", tick=self.ticker.ticks))
        bus.subscribe("RunEnded", lambda ev: log.record(
            "state", f"game over at {ev.score} (best {ev.high_score})",
            tick=self.ticker.ticks))
        bus.subscribe("HighScoreBeaten", lambda ev: log.record(
            "hiscore", f"persist {ev.value} issued", tick=self.ticker.ticks))

    # ── lifecycle ────────────────────────────────────────────────────

    def on_enter(self, app: App):
        w, h = app.size
        self.screen = Screen(width=float(w), height=float(h))
        if not self.overlay.is_open:
            self._show_start_menu()
            self.sync.load_async()

    def on_exit(self, app: App):
        self.overlay.close()
        self.bus.drain()
        self.sync.flush(float(tuning.get("highscore", "flush_timeout", 2.0)))

    # ── input ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        self.session = with_high_score(self.session, self.sync.take_loaded())

        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if self.input.just("toggle_hitbox"):
            self.show_hitbox = not self.show_hitbox
        if self.input.just("reload_tuning"):
            tuning.reload()
            self._next_physics = Physics.from_tuning()
            self.log.record("tuning", "reloaded, applies next run",
                            tick=self.ticker.ticks)

        for event in self.input.raw_events:
            for cmd in self.overlay.handle_event(event):
                self._apply(cmd, app)

        if self.input.just("tap") and self.session.state is GameState.PLAYING:
            self._jump_queued = True

        self.overlay.update(dt)

        if self.session.state is GameState.PLAYING:
            for _ in range(self.ticker.advance(dt)):
                self._tick()
                if self.session.state is GameState.GAME_OVER:
                    break

        self.bus.drain()
        self.input.begin_frame()

    def _tick(self) -> None:
        before = self.session
        inp = TickInput(jump=self._jump_queued)
        self._jump_queued = False
        self.session = tick_session(before, inp, self.physics, self.screen,
                                    self.rng, self.bus)
        if self.session.state is GameState.GAME_OVER:
            self._show_game_over(before)

    # ── commands / transitions ───────────────────────────────────────

    def _apply(self, cmd, app: App) -> None:
        if isinstance(cmd, StartRun):
            self.session = start(self.session, cmd.player_name)
            self.overlay.close()
            self.input.context = InputContext.PLAY
            self.ticker.reset()
            self._jump_queued = False
            print(f"[GAME] {self.session.player_name} started a run")
            self.bus.emit(RunStarted(player_name=self.session.player_name))
        elif isinstance(cmd, RestartRun):
            if self._next_physics is not None:
                self.physics, self._next_physics = self._next_physics, None
            self.session = restart(self.session, self.physics)
            self._show_start_menu()
        elif isinstance(cmd, QuitGame):
            app.quit()

    def _show_start_menu(self) -> None:
        self.overlay.show(StartMenuModal(self.session.player_name))
        self.input.context = InputContext.MENU

    def _show_game_over(self, before: GameSession) -> None:
        s = self.session
        new_record = s.high_score > before.high_score
        print(f"[GAME] game over: {s.player_name} scored {s.score} "
              f"(best {s.high_score}{', new record' if new_record else ''})")
        self.overlay.show(GameOverModal(s.player_name, s.score,
                                       s.high_score, new_record))
        self.input.context = InputContext.MENU

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        draw_world(surface, self.session, self.physics, self.screen,
                   show_hitbox=self.show_hitbox)
        draw_hud(surface, app, self.session)
        self.overlay.draw(surface, app)
        if self.show_debug:
            draw_debug(surface, app, self)
