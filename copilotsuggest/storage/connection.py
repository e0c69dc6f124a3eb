"""
SQLite connection factory.

One connection per database path, shared across threads, WAL journal mode.
Rows come back as ``sqlite3.Row``.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Optional

from copilotsuggest.config.settings import get_settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()

# Singleton connection per database path
_connections: dict[str, sqlite3.Connection] = {}


def get_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Get the shared connection for *db_path* (default: the settings DB),
    opening and configuring it on first use.
    """
    settings = get_settings()
    if db_path is None:
        db_path = settings.db_path

    db_key = str(db_path)

    with _lock:
        if db_key in _connections:
            return _connections[db_key]

        db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Opening SQLite database: %s", db_path)

        conn = sqlite3.connect(str(db_path), check_same_thread=False, timeout=10.0)
        conn.execute(f"PRAGMA journal_mode={settings.storage.journal_mode}")
        conn.execute(f"PRAGMA busy_timeout={settings.storage.busy_timeout_ms}")
        conn.execute("PRAGMA synchronous=NORMAL")
        conn.row_factory = sqlite3.Row

        _connections[db_key] = conn
        return conn


def close_connection(db_path: Optional[Path] = None) -> None:
    """Close the connection for a given db_path (or the default)."""
    if db_path is None:
        db_path = get_settings().db_path

    with _lock:
        conn = _connections.pop(str(db_path), None)
        if conn is not None:
            conn.close()
            logger.info("Database connection closed: %s", db_path)


def close_all_connections() -> None:
    """Close all open connections. Used during shutdown and in tests."""
    with _lock:
        for key, conn in list(_connections.items()):
            conn.close()
            logger.info("Database connection closed: %s", key)
        _connections.clear()
