"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from copilotsuggest.api.cache import TTLCache
from copilotsuggest.api.rate_limiter import RateLimiter
from copilotsuggest.api.routes.autosuggest import router as autosuggest_router
from copilotsuggest.api.routes.health import router as health_router
from copilotsuggest.api.routes.users import router as users_router
from copilotsuggest.autosuggest.builder import DatasetBuilder, snapshot_source
from copilotsuggest.autosuggest.engine import AutosuggestEngine
from copilotsuggest.autosuggest.pool import SuggestionPool, load_pool_snapshot
from copilotsuggest.config.settings import Settings, get_settings
from copilotsuggest.llm.client import LLMClient
from copilotsuggest.llm.service import AISuggestionService
from copilotsuggest.storage.schema import initialize_database
from copilotsuggest.storage.settings_store import UserSettingsStore

logger = logging.getLogger(__name__)


def _select_pool(settings: Settings, built: SuggestionPool) -> SuggestionPool:
    """Prefer the persisted pool snapshot when it came from the configured log."""
    if not settings.pool_path.exists():
        return built

    source, snapshot = load_pool_snapshot(settings.pool_path)
    expected = snapshot_source(settings.dataset_path)
    if source != expected:
        logger.warning(
            "Ignoring pool snapshot %s: built from %s, dataset is %s",
            settings.pool_path, source or "an unknown log", expected,
        )
        return built

    logger.info("Using persisted suggestion pool: %s", settings.pool_path)
    return snapshot


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Loads the behavioral log once, derives profiles and the crowd pool
    (preferring a persisted pool snapshot built from the same log),
    initializes the settings database, and attaches the cache and rate
    limiter before mounting routes.
    """
    settings = settings or get_settings()
    initialize_database(settings.db_path)

    app = FastAPI(
        title="Copilot Autosuggest API",
        version="0.1.0",
        description="Adaptive, behavior-driven prefix suggestions",
    )

    dataset = DatasetBuilder(settings).build()
    pool = _select_pool(settings, dataset.pool)

    # Shared state, accessible via request.app.state in routes
    app.state.settings = settings
    app.state.dataset = dataset
    app.state.pool = pool
    app.state.engine = AutosuggestEngine(dataset.profiles, pool)
    app.state.settings_store = UserSettingsStore(settings.db_path)

    app.state.ai_cache = TTLCache(
        ttl_seconds=settings.cache.ttl_seconds,
        max_entries=settings.cache.max_entries,
    )
    app.state.ai_service = AISuggestionService(LLMClient(settings.llm), app.state.ai_cache)

    rl = settings.rate_limit
    app.state.autosuggest_rate_limiter = RateLimiter(
        limit=rl.autosuggest_limit,
        window_seconds=rl.window_seconds,
        eviction_ttl=rl.eviction_ttl,
    )

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(autosuggest_router)

    return app
