"""Per-user preference storage backed by the user_settings table."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from copilotsuggest.storage.connection import get_connection

logger = logging.getLogger(__name__)


class UserSettingsStore:
    """Read and write the per-user autosuggest toggle."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        self._db_path = db_path

    @property
    def _conn(self):
        return get_connection(self._db_path)

    def get_autosuggest_enabled(self, user_id: str) -> bool:
        """Whether autosuggest is on for *user_id*. Users never seen default to on."""
        row = self._conn.execute(
            "SELECT autosuggest_enabled FROM user_settings WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            return True
        return bool(row["autosuggest_enabled"])

    def set_autosuggest_enabled(self, user_id: str, enabled: bool) -> None:
        now = datetime.now(timezone.utc).isoformat()
        sql = """
            INSERT INTO user_settings (user_id, autosuggest_enabled, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                autosuggest_enabled = excluded.autosuggest_enabled,
                updated_at = excluded.updated_at
        """
        with self._conn:
            self._conn.execute(sql, (user_id, int(enabled), now))
        logger.info("Autosuggest %s for user %r", "enabled" if enabled else "disabled", user_id)

    def count(self) -> int:
        row = self._conn.execute("SELECT COUNT(*) FROM user_settings").fetchone()
        return row[0]
