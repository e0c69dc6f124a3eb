"""
Debounced client-side fetching of AI suggestions.

``AISuggestionFetcher`` sits between the input box and the suggestion
endpoint. Each keystroke restarts a debounce timer; when it elapses the
current prefix is looked up in a per-session cache and, on a miss, sent to
the transport. A response is applied only if the prefix it was requested
for is still the current one.

State is guarded by a lock so debounce timers may fire on another thread;
the transport call itself runs outside the lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol, Sequence

import requests

from copilotsuggest.autosuggest.models import Suggestion, SuggestionSource
from copilotsuggest.config.settings import TriggerSettings, get_settings
from copilotsuggest.llm.service import AISuggestionRequest
from copilotsuggest.trigger.scheduler import Scheduler, TimerHandle, cancel

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, str]


class SuggestionTransport(Protocol):
    def fetch(self, request: AISuggestionRequest) -> Sequence[str]: ...


class HttpSuggestionTransport:
    """Posts suggestion requests to the ``/autosuggest/ai`` endpoint."""

    def __init__(
        self,
        settings: Optional[TriggerSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings or get_settings().trigger
        self._session = session or requests.Session()

    def fetch(self, request: AISuggestionRequest) -> list[str]:
        response = self._session.post(
            self._settings.endpoint_url,
            json={
                "prefix": request.prefix,
                "maxSuggestions": request.max_suggestions,
                "style": request.style,
                "writingStyle": request.writing_style,
                "pastQueries": request.past_queries,
            },
            timeout=self._settings.request_timeout,
        )
        response.raise_for_status()
        return list(response.json().get("suggestions") or [])


class AISuggestionFetcher:
    """Debounce, cache and staleness handling for one input box."""

    def __init__(
        self,
        transport: SuggestionTransport,
        scheduler: Scheduler,
        debounce_ms: int = 300,
        min_prefix_length: int = 2,
    ) -> None:
        self._transport = transport
        self._scheduler = scheduler
        self._debounce_ms = debounce_ms
        self._min_prefix_length = min_prefix_length
        self._cache: dict[CacheKey, tuple[str, ...]] = {}
        self._timer: Optional[TimerHandle] = None
        self._current = ""
        self._last_fetched = ""
        self._suggestions: tuple[str, ...] = ()
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self._suggestions

    @property
    def last_fetched_prefix(self) -> str:
        return self._last_fetched

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def on_prefix(
        self,
        prefix: str,
        style: str,
        user_id: str,
        max_suggestions: int = 4,
        writing_style: str = "",
        past_queries: str = "",
    ) -> None:
        """Feed the current input after a keystroke."""
        trimmed = prefix.strip()
        with self._lock:
            self._schedule(trimmed, style, user_id, max_suggestions, writing_style, past_queries)

    def reset(self) -> None:
        """Input hidden: forget progress and shown suggestions. The cache survives."""
        with self._lock:
            self._cancel_timer()
            self._current = ""
            self._last_fetched = ""
            self._suggestions = ()

    def display_suggestions(self, prefix: str, max_suggestions: int) -> list[Suggestion]:
        """Fetched suggestions that still match what is typed, best first."""
        current = prefix.strip().lower()
        fetched_for = self._last_fetched.lower()
        if not self._suggestions or not current.startswith(fetched_for):
            return []
        matching = [s for s in self._suggestions if s.lower().startswith(current)]
        return [
            Suggestion(text=text, position=i + 1, score=100 - i * 10, source=SuggestionSource.AI)
            for i, text in enumerate(matching[:max_suggestions])
        ]

    # ----- internals -----

    def _schedule(
        self,
        trimmed: str,
        style: str,
        user_id: str,
        max_suggestions: int,
        writing_style: str,
        past_queries: str,
    ) -> None:
        self._current = trimmed
        self._cancel_timer()

        if len(trimmed) < self._min_prefix_length:
            return
        if trimmed == self._last_fetched:
            return

        if self._last_fetched and not trimmed.lower().startswith(self._last_fetched.lower()):
            self._suggestions = ()

        request = AISuggestionRequest(
            prefix=trimmed.lower(),
            max_suggestions=max_suggestions,
            style=style,
            writing_style=writing_style,
            past_queries=past_queries,
        )
        key: CacheKey = (trimmed.lower(), style, user_id)
        generation = self._generation
        self._timer = self._scheduler.call_later(
            self._debounce_ms, lambda: self._fetch(generation, trimmed, key, request),
        )

    def _cancel_timer(self) -> None:
        cancel(self._timer)
        self._timer = None
        self._generation += 1

    def _fetch(self, generation: int, origin: str, key: CacheKey, request: AISuggestionRequest) -> None:
        with self._lock:
            if generation == self._generation:
                self._timer = None
            cached = self._cache.get(key)

        fetched = None
        if cached is None:
            fetched = self._call_transport(request)
        result = cached if cached is not None else (fetched or ())

        with self._lock:
            if fetched is not None:
                self._cache[key] = fetched
            if origin != self._current:
                logger.debug("Dropping stale AI suggestions for %r (now %r)", origin, self._current)
                return
            self._suggestions = result
            self._last_fetched = origin

    def _call_transport(self, request: AISuggestionRequest) -> Optional[tuple[str, ...]]:
        try:
            return tuple(self._transport.fetch(request))
        except Exception as exc:
            logger.warning("AI suggestion fetch failed for %r: %s", request.prefix, exc)
            return None
