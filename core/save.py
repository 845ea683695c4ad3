"""core/save.py — High-score persistence.

The game persists exactly one integer.  Where it goes is a backend
choice made in ``data/tuning.toml`` (``[highscore] backend``):

- ``"file"``      JSON file, ``saves/highscore.json``
- ``"firebase"``  Firebase Realtime Database over its REST API
                  (``GET/PUT {url}/{key}.json``)
- ``"memory"``    in-process only (tests, offline play)

Every backend speaks the same two-call contract::

    store.get()   -> int | None      # None = nothing stored yet
    store.set(n)  -> None

and raises ``StoreError`` on any failure.  Stores are blocking; the
non-blocking, never-raising layer on top is ``logic.highscore``.

Save file layout (JSON)::

    {"format_version": 1, "highScore": 12}
"""

from __future__ import annotations
import json
import os
import urllib.error
import urllib.request
from pathlib import Path

from core import tuning


FORMAT_VERSION = 1
HIGHSCORE_KEY = "highScore"
SAVES_DIR = Path("saves")


class StoreError(RuntimeError):
    """A high-score read or write failed."""


def _coerce(raw) -> int | None:
    """Stored value → non-negative int, or None if nothing is stored."""
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise StoreError(f"stored high score is not a number: {raw!r}")
    return max(0, int(raw))


class ScalarStore:
    """Base class for a single remote integer."""

    def get(self) -> int | None:
        raise NotImplementedError

    def set(self, value: int) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__


class MemoryStore(ScalarStore):
    """In-process store.  ``fail_reads`` / ``fail_writes`` simulate outages."""

    def __init__(self, value: int | None = None, *,
                 fail_reads: bool = False, fail_writes: bool = False):
        self.value = value
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes: list[int] = []

    def get(self) -> int | None:
        if self.fail_reads:
            raise StoreError("memory store: read refused")
        return self.value

    def set(self, value: int) -> None:
        if self.fail_writes:
            raise StoreError("memory store: write refused")
        self.value = int(value)
        self.writes.append(int(value))


class JsonFileStore(ScalarStore):
    """High score kept in a small JSON file next to the game."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else SAVES_DIR / "highscore.json"

    def get(self) -> int | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as ex:
            raise StoreError(f"cannot read {self.path}: {ex}") from ex
        if not isinstance(data, dict):
            raise StoreError(f"{self.path} does not hold a JSON object")
        return _coerce(data.get(HIGHSCORE_KEY))

    def set(self, value: int) -> None:
        data = {"format_version": FORMAT_VERSION, HIGHSCORE_KEY: int(value)}
        # Write beside the target and swap it in, so a crash mid-write
        # leaves the previous record readable.
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as ex:
            raise StoreError(f"cannot write {self.path}: {ex}") from ex

    def describe(self) -> str:
        return f"file:{self.path}"


class FirebaseStore(ScalarStore):
    """One key of a Firebase Realtime Database, via the REST API.

    *url* is the database root, e.g.
    ``https://my-game-default-rtdb.firebaseio.com``.  An unset key reads
    back as JSON ``null``.
    """

    def __init__(self, url: str, key: str = HIGHSCORE_KEY,
                 timeout: float = 5.0, auth: str | None = None):
        if not url:
            raise StoreError("firebase store needs a database url")
        self.url = url.rstrip("/")
        self.key = key.strip("/")
        self.timeout = timeout
        self.auth = auth

    def endpoint(self) -> str:
        ep = f"{self.url}/{self.key}.json"
        if self.auth:
            ep += f"?auth={self.auth}"
        return ep

    def _request(self, method: str, body: bytes | None = None):
        req = urllib.request.Request(self.endpoint(), data=body, method=method)
        if body is not None:
            req.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                payload = resp.read()
        except (urllib.error.URLError, OSError) as ex:
            raise StoreError(f"firebase {method} {self.key} failed: {ex}") from ex
        try:
            return json.loads(payload or b"null")
        except ValueError as ex:
            raise StoreError(f"firebase returned invalid JSON: {ex}") from ex

    def get(self) -> int | None:
        return _coerce(self._request("GET"))

    def set(self, value: int) -> None:
        self._request("PUT", json.dumps(int(value)).encode("utf-8"))

    def describe(self) -> str:
        return f"firebase:{self.url}/{self.key}"


def store_from_tuning() -> ScalarStore:
    """Build the backend selected in ``[highscore]``.

    Falls back to the JSON file when the selected backend can't be
    configured.
    """
    backend = tuning.get("highscore", "backend", "file")
    path = tuning.get("highscore", "path", str(SAVES_DIR / "highscore.json"))
    if backend == "memory":
        return MemoryStore()
    if backend == "firebase":
        fb = tuning.section("highscore.firebase")
        try:
            return FirebaseStore(
                url=fb.get("url", ""),
                key=fb.get("key", HIGHSCORE_KEY),
                timeout=float(fb.get("timeout", 5.0)),
                auth=fb.get("auth") or None,
            )
        except StoreError as ex:
            print(f"[HISCORE] {ex}; falling back to {path}")
    elif backend != "file":
        print(f"[HISCORE] unknown backend {backend!r}; using {path}")
    return JsonFileStore(path)
