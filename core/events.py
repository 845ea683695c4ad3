"""core/events.py — Lightweight event bus.

Decouples the code that *signals* something (the scene reading a
``StepResult``) from the code that *reacts* to it (high-score sync,
dev log, HUD flash)::

    from core.events import EventBus, HighScoreBeaten
    bus = EventBus()
    bus.subscribe("HighScoreBeaten", lambda ev: sync.persist(ev.value))
    bus.emit(HighScoreBeaten(value=5))
    bus.drain()

Design rules:
  - Events are plain dataclasses with no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict
import traceback


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class RunStarted:
    player_name: str = ""


@dataclass
class PipePassed:
    """The bird's column cleared a pipe's trailing edge."""
    score: int = 0


@dataclass
class RunEnded:
    """Floor or pipe contact moved the session to GameOver."""
    score: int = 0
    high_score: int = 0
    player_name: str = ""


@dataclass
class HighScoreBeaten:
    """A run ended above the stored record; ``value`` must be persisted."""
    value: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by the game scene."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"RunEnded"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        A failing handler is logged and skipped; the remaining handlers
        and events still run.
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed
