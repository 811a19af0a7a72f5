"""Settings store backed by sqlite."""

from core.db.database import SettingsDatabase

# Tables created when the database is first opened
DB_TABLES = {
    'settings': '''
        CREATE TABLE IF NOT EXISTS settings (
            key TEXT PRIMARY KEY,
            value TEXT
        )
    ''',
}

__all__ = ['SettingsDatabase', 'DB_TABLES']
