"""Settings database facade."""
import sqlite3
from core.db.preferences import PreferencesManager


class SettingsDatabase:
    """Owns the sqlite connection and the flat key-value settings table.

    Pass ":memory:" as db_name for a throwaway store.
    """

    def __init__(self, db_name: str, db_tables: dict[str, str] | None = None):
        """Initialize database connection and create tables if they don't exist."""
        if db_tables is None:
            from core.db import DB_TABLES

            db_tables = DB_TABLES

        self.db_name = db_name
        self.db_conn = sqlite3.connect(db_name)
        self.db_cursor = self.db_conn.cursor()

        for _, create_sql in db_tables.items():
            self.db_cursor.execute(create_sql)
        self.db_conn.commit()

        self._preferences = PreferencesManager(self.db_conn, self.db_cursor)

    @property
    def preferences(self) -> PreferencesManager:
        return self._preferences

    def close(self):
        """Close the database connection."""
        if hasattr(self, 'db_conn'):
            self.db_conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
