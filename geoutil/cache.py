"""A thread-safe cache whose entries expire after a fixed time-to-live."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Any, Hashable

_CLEANUP_INTERVAL = 3600.0


class TTLCache:
    """Thread-safe mapping whose entries expire ``ttl`` seconds after being set.

    Expired entries are never returned; they are swept out by :meth:`purge`,
    which also runs on its own at most once an hour when entries are set.
    """

    def __init__(self, ttl: float | timedelta) -> None:
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        if ttl < 0:
            raise ValueError("ttl must not be negative")
        self.ttl = float(ttl)
        self._items: dict[Hashable, tuple[Any, float]] = {}
        self._lock = threading.Lock()
        self._last_cleanup = time.monotonic()

    def set(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, restarting its time-to-live."""
        now = time.monotonic()
        with self._lock:
            self._items[key] = (value, now + self.ttl)
            if now - self._last_cleanup >= _CLEANUP_INTERVAL:
                self._sweep(now)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the live value for ``key``, or ``default``."""
        with self._lock:
            entry = self._items.get(key)
        if entry is None:
            return default
        value, expiry = entry
        if time.monotonic() > expiry:
            return default
        return value

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            entry = self._items.get(key)
        return entry is not None and time.monotonic() <= entry[1]

    def purge(self) -> int:
        """Drop expired entries and return how many were removed."""
        with self._lock:
            return self._sweep(time.monotonic())

    def __len__(self) -> int:
        now = time.monotonic()
        with self._lock:
            return sum(1 for _, expiry in self._items.values() if now <= expiry)

    def _sweep(self, now: float) -> int:
        expired = [k for k, (_, expiry) in self._items.items() if now > expiry]
        for key in expired:
            del self._items[key]
        self._last_cleanup = now
        return len(expired)