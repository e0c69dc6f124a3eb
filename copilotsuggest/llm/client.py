"""HTTP client for the hosted chat-completions model, with retry and backoff."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests

from copilotsuggest.config.settings import LLMSettings, get_settings

logger = logging.getLogger(__name__)


class LLMError(RuntimeError):
    """The completion request failed and will not succeed on retry."""


class LLMClient:
    """Calls an Azure OpenAI chat-completions deployment."""

    _RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        settings: Optional[LLMSettings] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings or get_settings().llm
        self._session = session or requests.Session()
        self._session.headers.update({
            "api-key": self._settings.api_key,
            "Content-Type": "application/json",
        })
        self._sleep = sleep

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    @property
    def url(self) -> str:
        base = self._settings.endpoint.rstrip("/")
        return (
            f"{base}/openai/deployments/{self._settings.deployment}/chat/completions"
            f"?api-version={self._settings.api_version}"
        )

    def complete(self, messages: list[dict[str, str]]) -> str:
        """Send chat messages and return the first choice's text (may be empty)."""
        if not self.is_configured:
            raise LLMError("LLM endpoint or API key is not configured")

        payload = {"messages": messages}
        last_error: Optional[Exception] = None

        for attempt in range(self._settings.max_retries + 1):
            try:
                response = self._session.post(
                    self.url, json=payload, timeout=self._settings.request_timeout,
                )
            except requests.RequestException as exc:
                last_error = exc
                if attempt >= self._settings.max_retries:
                    break
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code in self._RETRYABLE_STATUS_CODES:
                last_error = LLMError(f"Retryable HTTP status {response.status_code}")
                logger.warning("LLM returned %d (attempt %d)", response.status_code, attempt + 1)
                if attempt >= self._settings.max_retries:
                    break
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code >= 400:
                raise LLMError(f"LLM request failed with status {response.status_code}")

            try:
                return _first_choice_text(response.json())
            except (ValueError, AttributeError, TypeError) as exc:
                raise LLMError(f"Malformed LLM response body: {exc}") from exc

        raise LLMError(
            f"LLM request failed after {self._settings.max_retries + 1} attempts"
        ) from last_error

    def _sleep_with_backoff(self, attempt: int) -> None:
        backoff = min(
            self._settings.backoff_base * (2 ** attempt),
            self._settings.max_backoff,
        )
        self._sleep(backoff)


def _first_choice_text(body: dict) -> str:
    choices = body.get("choices") or []
    if not choices:
        return ""
    message = choices[0].get("message") or {}
    return message.get("content") or ""
