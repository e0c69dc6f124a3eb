"""
Dataset builder.

Loads a behavioral log, derives user profiles and the crowd suggestion
pool, and optionally persists the pool snapshot next to the other
runtime indexes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from copilotsuggest.autosuggest.log_parser import load_log, parse_log
from copilotsuggest.autosuggest.models import LogEntry, UserProfile
from copilotsuggest.autosuggest.pool import SuggestionPool, build_suggestion_pool, save_pool
from copilotsuggest.autosuggest.profiles import build_user_profiles, order_users
from copilotsuggest.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def snapshot_source(path: Path) -> str:
    """Identity of a behavioral log as recorded in pool snapshots."""
    return str(Path(path).resolve())


@dataclass(frozen=True)
class DatasetStats:
    total_entries: int = 0
    total_users: int = 0
    total_sessions: int = 0
    total_suggestions: int = 0


@dataclass
class Dataset:
    """Everything derived from one loaded log. Rebuilt only on reload."""

    entries: list[LogEntry] = field(default_factory=list)
    profiles: dict[str, UserProfile] = field(default_factory=dict)
    pool: SuggestionPool = field(default_factory=dict)
    stats: DatasetStats = field(default_factory=DatasetStats)

    @property
    def users(self) -> list[UserProfile]:
        return order_users(self.profiles)


class DatasetBuilder:
    """Build a Dataset from a log file or raw log text."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    def build(self, path: Optional[Path] = None, save: bool = False) -> Dataset:
        """
        Build from *path* (default: the configured dataset file).

        * A missing file is not fatal: the dataset is built from no rows,
          leaving only the demonstration profiles.
        * With *save*, the pool is written to ``settings.pool_path``.
        """
        path = path or self._settings.dataset_path
        if path.exists():
            entries = load_log(path)
        else:
            logger.warning("Dataset file %s not found, starting from an empty log", path)
            entries = []

        dataset = self.build_from_entries(entries)
        if save:
            save_pool(dataset.pool, self._settings.pool_path, source=snapshot_source(path))
        return dataset

    def build_from_text(self, raw: str) -> Dataset:
        return self.build_from_entries(parse_log(raw))

    def build_from_entries(self, entries: list[LogEntry]) -> Dataset:
        ac = self._settings.autosuggest
        profiles = build_user_profiles(entries, settings=ac)
        pool = build_suggestion_pool(entries, top_n=ac.pool_top_n)

        stats = DatasetStats(
            total_entries=len(entries),
            total_users=len(profiles),
            total_sessions=len({e.session_id for e in entries}),
            total_suggestions=len({e.suggestion_text for e in entries}),
        )
        logger.info(
            "Dataset ready: %d rows, %d users, %d sessions, %d prefixes",
            stats.total_entries, stats.total_users, stats.total_sessions, len(pool),
        )
        return Dataset(entries=entries, profiles=profiles, pool=pool, stats=stats)
