"""A keyed object cache whose stale entries are reaped by a background thread."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

__all__ = ["BasicCache"]

_log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class _Entry(Generic[V]):
    obj: V
    last_used: float


class BasicCache(Generic[K, V]):
    """Map of keys to objects; entries unused for ``lifetime`` seconds are pruned.

    The entry stored under key ``0`` is never pruned.  ``cleanup`` is called
    on every object that leaves the cache, whether erased, pruned or dropped
    when the cache is closed.
    """

    PRUNE_INTERVAL = 600.0
    PRUNE_LIFETIME = 1200.0

    def __init__(
        self,
        type_name: str,
        cleanup: Optional[Callable[[V], Any]] = None,
        prune_interval: float = PRUNE_INTERVAL,
        lifetime: float = PRUNE_LIFETIME,
    ) -> None:
        self.type = type_name
        self.prune_interval = prune_interval
        self.lifetime = lifetime
        self._cleanup = cleanup
        self._entries: Dict[K, _Entry[V]] = {}
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._closed = False
        self._thread = threading.Thread(
            target=self._prune_worker, name=f"{type_name}-reaper", daemon=True
        )
        try:
            self._thread.start()
        except RuntimeError as exc:
            raise RuntimeError(
                f"Couldn't start {type_name} reaper thread: {exc}"
            ) from exc

    def _run_cleanup(self, obj: V) -> None:
        if self._cleanup is not None:
            self._cleanup(obj)

    def _prune_worker(self) -> None:
        while not self._stop.wait(self.prune_interval):
            self.prune()

    def __getitem__(self, key: K) -> V:
        with self._lock:
            entry = self._entries[key]
            entry.last_used = time.monotonic()
            return entry.obj

    def __setitem__(self, key: K, obj: V) -> None:
        with self._lock:
            self._entries[key] = _Entry(obj, time.monotonic())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def erase(self, key: K) -> None:
        """Remove ``key`` if present, running cleanup on its object."""
        with self._lock:
            entry = self._entries.pop(key, None)
        if entry is not None:
            self._run_cleanup(entry.obj)

    def each(self, func: Callable[[V], Any]) -> None:
        """Call ``func`` on every cached object."""
        with self._lock:
            objects = [entry.obj for entry in self._entries.values()]
        for obj in objects:
            func(obj)

    def prune(self, now: Optional[float] = None) -> int:
        """Drop entries last used before ``now - lifetime``; return how many."""
        if now is None:
            now = time.monotonic()
        limit = now - self.lifetime
        with self._lock:
            old = [
                key
                for key, entry in self._entries.items()
                if key != 0 and entry.last_used < limit
            ]
            removed = [self._entries.pop(key) for key in old]
        for entry in removed:
            self._run_cleanup(entry.obj)
        if removed:
            _log.info("Removed %d entities from %s cache", len(removed), self.type)
        return len(removed)

    def close(self) -> None:
        """Stop the reaper thread and clean up every remaining object."""
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()
        with self._lock:
            remaining = [entry.obj for entry in self._entries.values()]
            self._entries.clear()
        for obj in remaining:
            self._run_cleanup(obj)

    def __enter__(self) -> "BasicCache[K, V]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()