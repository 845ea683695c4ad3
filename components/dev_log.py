"""components.dev_log — Ring buffer of recent game events.

Filled by the game scene's event-bus subscribers and drawn by the F1
debug overlay, so runs, passes, record writes and tuning reloads show
up on screen without a terminal.

Usage:
    log = DevLog()
    log.record("score", "pipe passed, score 3", tick=412)

Each entry is a dict:
    {"tick": int, "cat": str, "msg": str}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Newest-last list of overlay lines, capped at ``max_entries``."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200

    def record(self, cat: str, msg: str, *, tick: int = 0) -> None:
        self.entries.append({"tick": tick, "cat": cat, "msg": msg})
        if len(self.entries) > self.max_entries:
            del self.entries[:-self.max_entries]

    def recent(self, n: int = 12) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]
