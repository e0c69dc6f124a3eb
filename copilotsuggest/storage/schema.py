"""
SQLite schema definitions (DDL).

Tables:
    user_settings   per-user preferences (autosuggest on/off)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from copilotsuggest.storage.connection import get_connection

logger = logging.getLogger(__name__)

# Bump when adding migrations.
SCHEMA_VERSION = 1

_USER_SETTINGS_DDL = """
CREATE TABLE IF NOT EXISTS user_settings (
    user_id              TEXT PRIMARY KEY,
    autosuggest_enabled  INTEGER NOT NULL DEFAULT 1,
    updated_at           TEXT NOT NULL
);
"""


def initialize_database(db_path: Optional[Path] = None) -> None:
    """Create all tables if they don't exist. Safe to call repeatedly."""
    conn = get_connection(db_path)

    with conn:
        conn.execute(_USER_SETTINGS_DDL)
        conn.execute(f"PRAGMA user_version={SCHEMA_VERSION}")

    logger.info("Database schema initialized (version %d)", SCHEMA_VERSION)


def get_schema_version(db_path: Optional[Path] = None) -> int:
    conn = get_connection(db_path)
    row = conn.execute("PRAGMA user_version").fetchone()
    return row[0] if row else 0
