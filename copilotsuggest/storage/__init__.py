from copilotsuggest.storage.connection import close_all_connections, close_connection, get_connection
from copilotsuggest.storage.schema import initialize_database
from copilotsuggest.storage.settings_store import UserSettingsStore

__all__ = [
    "close_all_connections",
    "close_connection",
    "get_connection",
    "initialize_database",
    "UserSettingsStore",
]
