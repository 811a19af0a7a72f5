import sqlite3
from core.logging import log_settings_operation


class PreferencesManager:
    """Typed access to the flat key-value settings table.

    Values are stored as text. Missing keys and values that do not parse as
    the requested type resolve to the caller's default.
    """

    def __init__(self, db_conn: sqlite3.Connection, db_cursor: sqlite3.Cursor):
        self.db_conn = db_conn
        self.db_cursor = db_cursor

    def _get_raw(self, key: str) -> str | None:
        self.db_cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
        result = self.db_cursor.fetchone()
        log_settings_operation("get", key, found=result is not None)
        return result[0] if result else None

    def _set_raw(self, key: str, value: str):
        self.db_cursor.execute("INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)", (key, value))
        self.db_conn.commit()
        log_settings_operation("set", key)

    def get_bool(self, key: str, default: bool) -> bool:
        value = self._get_raw(key)
        if value is None:
            return default
        try:
            return bool(int(value))
        except ValueError:
            return default

    def set_bool(self, key: str, value: bool):
        self._set_raw(key, str(int(value)))

    def get_string(self, key: str, default: str = '') -> str:
        value = self._get_raw(key)
        return value if value is not None else default

    def set_string(self, key: str, value: str):
        self._set_raw(key, value)

    def get_float(self, key: str, default: float) -> float:
        value = self._get_raw(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def set_float(self, key: str, value: float):
        self._set_raw(key, repr(float(value)))

    def get_int(self, key: str, default: int) -> int:
        value = self._get_raw(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def set_int(self, key: str, value: int):
        self._set_raw(key, str(int(value)))

    def remove(self, key: str):
        self.db_cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
        self.db_conn.commit()
        log_settings_operation("remove", key)
