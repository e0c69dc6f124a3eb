"""
AI suggestion service: prompt, call, parse, cache.

Results are cached per (normalized prefix, max suggestions, style, writing
style) for the cache TTL. Empty results are never cached so a transient
miss is retried on the next request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from copilotsuggest.llm.client import LLMClient
from copilotsuggest.llm.prompt import build_messages, parse_suggestions

logger = logging.getLogger(__name__)


class SuggestionCache(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True)
class AISuggestionRequest:
    prefix: str
    max_suggestions: int = 4
    style: str = "natural"
    writing_style: str = ""
    past_queries: str = ""


@dataclass(frozen=True)
class AISuggestionResponse:
    suggestions: tuple[str, ...]
    source: str  # "ai" | "cache"


class AISuggestionService:
    def __init__(self, client: LLMClient, cache: SuggestionCache) -> None:
        self._client = client
        self._cache = cache

    @property
    def cache(self) -> SuggestionCache:
        return self._cache

    @staticmethod
    def cache_key(request: AISuggestionRequest) -> str:
        normalized = request.prefix.strip().lower()
        return f"{normalized}:{request.max_suggestions}:{request.style}:{request.writing_style}"

    def suggest(self, request: AISuggestionRequest) -> AISuggestionResponse:
        """
        Completions for ``request.prefix``.

        Raises:
            LLMError: the model call failed.
        """
        key = self.cache_key(request)
        cached = self._cache.get(key)
        if cached is not None:
            return AISuggestionResponse(suggestions=tuple(cached), source="cache")

        if not self._client.is_configured:
            logger.debug("LLM not configured; returning no AI suggestions")
            return AISuggestionResponse(suggestions=(), source="ai")

        messages = build_messages(
            request.prefix,
            request.max_suggestions,
            style=request.style,
            writing_style=request.writing_style,
            past_queries=request.past_queries,
        )
        content = self._client.complete(messages)
        suggestions = parse_suggestions(content, request.prefix, request.max_suggestions)
        logger.info("AI suggestions for %r: %d", request.prefix, len(suggestions))

        if suggestions:
            self._cache.set(key, tuple(suggestions))
        return AISuggestionResponse(suggestions=tuple(suggestions), source="ai")
