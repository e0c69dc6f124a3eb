"""In-memory TTL cache with oldest-first eviction."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional

Clock = Callable[[], float]


class TTLCache:
    """
    Key/value cache where entries expire ``ttl_seconds`` after being set.

    Beyond ``max_entries`` the oldest insertions are dropped first. The clock
    is injectable so expiry can be tested without waiting.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 10_000,
        clock: Clock = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Value for *key*, or None when absent or expired."""
        with self._lock:
            item = self._entries.get(key)
            if item is None:
                return None
            stored_at, value = item
            if self._clock() - stored_at >= self._ttl:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (self._clock(), value)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def purge_expired(self) -> int:
        """Drop expired entries. Returns count removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, (t, _) in self._entries.items() if now - t >= self._ttl]
            for k in expired:
                del self._entries[k]
            return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
