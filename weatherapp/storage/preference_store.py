"""Durable key-value store for the user's city and unit preferences.

Persistence is best-effort: every read or write failure is logged and
swallowed, and reads fall back to the defaults in ``Preferences``.
"""

import json
import logging
import sqlite3
from pathlib import Path

from weatherapp.models.preferences import Preferences
from weatherapp.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)

CITY_KEY = "city"
UNIT_KEY = "is_celsius"


def get_preference(conn: sqlite3.Connection, key: str) -> str | None:
    """Get a raw preference value."""
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_preference(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Set a raw preference value."""
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def _parse_unit_flag(raw: str | None) -> bool:
    default = Preferences().use_celsius
    if raw is None:
        return default
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning("Malformed unit preference %r, using default", raw)
        return default
    if not isinstance(value, bool):
        logger.warning("Unit preference %r is not a boolean, using default", raw)
        return default
    return value


class PreferenceStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, db_path: str | Path) -> "PreferenceStore":
        """Open and migrate the preference database at ``db_path``.

        If the file cannot be opened or migrated, an in-memory database is
        used instead, so preferences fall back to defaults and are not kept.
        """
        conn = None
        try:
            conn = connect(db_path)
            run_migrations(conn)
        except (sqlite3.Error, OSError):
            logger.exception(
                "Failed to open preference database %s; preferences will not persist",
                db_path,
            )
            if conn is not None:
                conn.close()
            conn = connect(":memory:")
            run_migrations(conn)
        return cls(conn)

    def load(self) -> Preferences:
        defaults = Preferences()

        try:
            city = get_preference(self.conn, CITY_KEY)
        except sqlite3.Error:
            logger.exception("Failed to load city preference")
            city = None

        try:
            raw_unit = get_preference(self.conn, UNIT_KEY)
        except sqlite3.Error:
            logger.exception("Failed to load unit preference")
            raw_unit = None

        return Preferences(
            city=city or defaults.city,
            use_celsius=_parse_unit_flag(raw_unit),
        )

    def save(self, prefs: Preferences) -> None:
        # Entries are written independently; one failing does not undo the other
        try:
            set_preference(self.conn, CITY_KEY, prefs.city)
        except sqlite3.Error:
            logger.exception("Failed to save city preference %r", prefs.city)

        try:
            set_preference(self.conn, UNIT_KEY, json.dumps(prefs.use_celsius))
        except sqlite3.Error:
            logger.exception("Failed to save unit preference")

    def close(self) -> None:
        self.conn.close()
