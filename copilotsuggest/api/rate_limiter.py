"""In-memory fixed-window rate limiter with automatic eviction."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

Clock = Callable[[], float]


@dataclass
class _Window:
    """Request count for one client since the window opened."""

    started_at: float
    count: int = 0
    last_seen: float = 0.0


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    reason: str = ""
    retry_after: float = 0.0


class RateLimiter:
    """
    Per-client fixed-window rate limiter.

    A window opens on a client's first request and lasts ``window_seconds``.
    Up to ``limit`` requests are allowed inside it; the next request after
    the window has passed opens a fresh one. Stale clients are evicted
    periodically to prevent memory leaks.
    """

    def __init__(
        self,
        limit: int = 30,
        window_seconds: float = 60.0,
        eviction_ttl: float = 600.0,
        clock: Clock = time.monotonic,
    ) -> None:
        self._limit = limit
        self._window_seconds = window_seconds
        self._eviction_ttl = eviction_ttl
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, client_key: str) -> RateLimitDecision:
        """Count a request from client_key and decide whether it may proceed. Thread-safe."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(client_key)
            if window is None or now - window.started_at > self._window_seconds:
                window = _Window(started_at=now)
                self._windows[client_key] = window
            window.last_seen = now

            if window.count >= self._limit:
                retry_after = max(0.0, window.started_at + self._window_seconds - now)
                return RateLimitDecision(
                    allowed=False, reason="rate_limit_exceeded", retry_after=retry_after,
                )

            window.count += 1
            return RateLimitDecision(allowed=True)

    def is_allowed(self, client_key: str) -> bool:
        return self.check(client_key).allowed

    def evict_stale(self) -> int:
        """Remove clients not seen for longer than eviction_ttl. Returns count evicted."""
        now = self._clock()
        with self._lock:
            stale_keys = [
                k for k, w in self._windows.items()
                if (now - w.last_seen) > self._eviction_ttl
            ]
            for k in stale_keys:
                del self._windows[k]
            return len(stale_keys)

    @property
    def client_count(self) -> int:
        """Number of tracked clients (for monitoring)."""
        with self._lock:
            return len(self._windows)
