"""
Central configuration for the adaptive autosuggest service.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


# Overrides the behavioral log path; read when settings are constructed
DATASET_ENV = "COPILOTSUGGEST_DATASET_FILE"


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


@dataclass(frozen=True)
class AutosuggestSettings:
    """Settings for profile derivation and candidate ranking."""

    # Candidates kept per prefix in the crowd pool
    pool_top_n: int = 10

    # Gaps between keystroke events at or above this are pauses, not typing
    typing_gap_cutoff_ms: int = 10_000

    # Average keystroke interval assumed when a user has no usable deltas
    default_typing_speed_ms: float = 500.0

    # Final session prefixes must be longer than this to count as history
    min_historical_query_length: int = 3

    # Optional path to a behavioral log; None means the bundled fixture
    dataset_file: str | None = field(default_factory=lambda: _env(DATASET_ENV) or None)


@dataclass(frozen=True)
class TriggerSettings:
    """Settings for the client trigger controller and AI fetcher."""

    # Debounce applied to network-backed suggestion fetches (milliseconds)
    ai_debounce_ms: int = 300

    # AI fetches are skipped for prefixes shorter than this
    ai_min_prefix_length: int = 2

    # Base URL of the suggestion endpoint used by the HTTP transport
    endpoint_url: str = "http://127.0.0.1:8000/autosuggest/ai"

    # Transport request timeout (seconds)
    request_timeout: float = 5.0


@dataclass(frozen=True)
class LLMSettings:
    """Settings for the hosted chat-completions model behind AI suggestions."""

    endpoint: str = field(default_factory=lambda: _env("AZURE_OPENAI_ENDPOINT"))
    api_key: str = field(default_factory=lambda: _env("AZURE_OPENAI_API_KEY"))
    deployment: str = field(
        default_factory=lambda: _env("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt-4o-mini")
    )
    api_version: str = field(
        default_factory=lambda: _env("AZURE_OPENAI_API_VERSION", "2024-08-01-preview")
    )

    # Request timeout (seconds)
    request_timeout: int = 30

    # Maximum retries on 429/5xx before giving up
    max_retries: int = 2

    # Backoff base for retries (seconds). Actual wait = base * 2^attempt
    backoff_base: float = 0.5

    # Maximum backoff wait (seconds)
    max_backoff: float = 8.0

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint and self.api_key)


@dataclass(frozen=True)
class CacheSettings:
    """Settings for the server-side AI suggestion cache."""

    # Entry lifetime (seconds)
    ttl_seconds: float = 300.0

    # Oldest entries are evicted beyond this size
    max_entries: int = 10_000


@dataclass(frozen=True)
class RateLimitSettings:
    """Settings for API rate limiting (fixed window per client)."""

    # Requests allowed per window on the suggestion endpoints
    autosuggest_limit: int = 30

    # Window length (seconds)
    window_seconds: float = 60.0

    # Evict clients not seen for this many seconds
    eviction_ttl: float = 600.0


@dataclass(frozen=True)
class StorageSettings:
    """Settings for SQLite storage."""

    db_name: str = "copilotsuggest.db"

    # SQLite journal mode
    journal_mode: str = "WAL"

    # SQLite busy timeout (milliseconds) how long to wait for a locked DB
    busy_timeout_ms: int = 5000


@dataclass
class Settings:
    """
    Top-level settings container. Aggregates all subsystem settings.

    Usage:
        settings = get_settings()
        print(settings.autosuggest.pool_top_n)
        print(settings.rate_limit.autosuggest_limit)
    """

    project_root: Path = field(default_factory=_project_root)
    autosuggest: AutosuggestSettings = field(default_factory=AutosuggestSettings)
    trigger: TriggerSettings = field(default_factory=TriggerSettings)
    llm: LLMSettings = field(default_factory=LLMSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    rate_limit: RateLimitSettings = field(default_factory=RateLimitSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for all runtime data (DB, indexes, logs)."""
        return self.project_root / "data"

    @property
    def db_path(self) -> Path:
        """Full path to the SQLite database file."""
        return self.data_dir / "db" / self.storage.db_name

    @property
    def indexes_dir(self) -> Path:
        """Root directory for built suggestion indexes."""
        return self.data_dir / "indexes"

    @property
    def pool_path(self) -> Path:
        """Location of the persisted crowd suggestion pool."""
        return self.indexes_dir / "autosuggest" / "pool.msgpack"

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    @property
    def dataset_path(self) -> Path:
        """Behavioral log to load; defaults to the bundled fixture."""
        if self.autosuggest.dataset_file:
            return Path(self.autosuggest.dataset_file)
        return Path(__file__).resolve().parent.parent / "autosuggest" / "data" / "autosuggest_dataset.csv"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.indexes_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
