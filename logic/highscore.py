"""logic/highscore.py — Non-blocking high-score load / persist.

Wraps a blocking ``core.save.ScalarStore`` so the tick loop never waits
on disk or network:

- ``load_async()`` reads once on a background thread.  The scene polls
  ``take_loaded()`` each frame and folds the value into its session.
  A failed read is logged and the high score stays at 0.
- ``persist(value)`` is fire-and-forget.  It returns a ``PendingWrite``
  handle the caller may ignore; tests use it to assert the write was
  attempted and how it ended.  Failures are logged, never retried and
  never raised into the caller.
- Writes go through a single worker in the order they were issued, so
  the stored record can't go backwards when an older write is slow.
- ``flush(timeout)`` waits a bounded time for queued writes.  The game
  scene calls it on exit; the worker is a daemon thread and would
  otherwise die with the process.

Usage (in the game scene)::

    self.sync = HighScoreSync(store_from_tuning())
    self.sync.attach(bus)            # persists on HighScoreBeaten
    self.sync.load_async()
    ...
    self.sync.flush(2.0)             # on_exit
"""

from __future__ import annotations
import queue
import threading
import time
from typing import TYPE_CHECKING, Callable

from core.save import ScalarStore, StoreError

if TYPE_CHECKING:
    from core.events import EventBus, HighScoreBeaten


class PendingWrite:
    """Handle for one background ``store.set`` call."""

    def __init__(self, value: int):
        self.value = value
        self.error: Exception | None = None
        self._done = threading.Event()

    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the write finished.  Returns False on timeout."""
        return self._done.wait(timeout)

    @property
    def ok(self) -> bool:
        return self.done() and self.error is None

    def _finish(self, error: Exception | None = None) -> None:
        self.error = error
        self._done.set()

    def __repr__(self) -> str:
        status = "pending" if not self.done() else ("ok" if self.error is None else "failed")
        return f"PendingWrite(value={self.value}, {status})"


class HighScoreSync:
    """Background reads / writes of the single persisted high score."""

    def __init__(self, store: ScalarStore, *, background: bool = True):
        self.store = store
        self.background = background
        self.attempts: list[int] = []
        self.writes: list[PendingWrite] = []
        self._lock = threading.Lock()
        self._loaded: int | None = None
        self._load_done = threading.Event()
        self._write_queue: queue.Queue[PendingWrite] = queue.Queue()
        self._worker: threading.Thread | None = None

    # ── Wiring ───────────────────────────────────────────────────────

    def attach(self, bus: EventBus) -> None:
        bus.subscribe("HighScoreBeaten", self._on_beaten)

    def _on_beaten(self, event: HighScoreBeaten) -> None:
        self.persist(event.value)

    # ── Read ─────────────────────────────────────────────────────────

    def load_async(self, on_loaded: Callable[[int], None] | None = None) -> None:
        """Start the one-shot read.  *on_loaded* runs on the worker thread."""
        if not self.background:
            self._load(on_loaded)
            return
        threading.Thread(target=self._load, args=(on_loaded,),
                         name="highscore-load", daemon=True).start()

    def _load(self, on_loaded: Callable[[int], None] | None) -> None:
        try:
            value = self.store.get()
        except StoreError as ex:
            print(f"[HISCORE] load from {self.store.describe()} failed: {ex}")
            self._load_done.set()
            return
        print(f"[HISCORE] loaded {value} from {self.store.describe()}")
        try:
            if value is not None:
                with self._lock:
                    self._loaded = value
                if on_loaded is not None:
                    on_loaded(value)
        finally:
            self._load_done.set()

    def take_loaded(self) -> int | None:
        """Return the loaded value once, then None."""
        with self._lock:
            value, self._loaded = self._loaded, None
        return value

    def wait_loaded(self, timeout: float | None = None) -> bool:
        return self._load_done.wait(timeout)

    # ── Write ────────────────────────────────────────────────────────

    def persist(self, value: int) -> PendingWrite:
        """Queue a write of *value* without waiting for it."""
        value = int(value)
        pending = PendingWrite(value)
        self.attempts.append(value)
        self.writes.append(pending)
        if not self.background:
            self._write(pending)
            return pending
        self._write_queue.put(pending)
        with self._lock:
            if self._worker is None:
                self._worker = threading.Thread(
                    target=self._drain_writes, name="highscore-save", daemon=True)
                self._worker.start()
        return pending

    def _drain_writes(self) -> None:
        while True:
            self._write(self._write_queue.get())

    def _write(self, pending: PendingWrite) -> None:
        try:
            self.store.set(pending.value)
        except StoreError as ex:
            print(f"[HISCORE] save of {pending.value} to {self.store.describe()} failed: {ex}")
            pending._finish(ex)
            return
        print(f"[HISCORE] saved {pending.value} to {self.store.describe()}")
        pending._finish()

    def flush(self, timeout: float = 2.0) -> bool:
        """Wait up to *timeout* seconds for every issued write.

        Returns True when none is left pending.  Never raises.
        """
        deadline = time.monotonic() + timeout
        for pending in self.writes:
            if not pending.wait(max(0.0, deadline - time.monotonic())):
                left = sum(1 for p in self.writes if not p.done())
                print(f"[HISCORE] flush gave up after {timeout}s, "
                      f"{left} write(s) still pending")
                return False
        return True
