"""Key-value persistence for Grind Tracker."""

import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

ENTRIES_KEY = "tournaments"
BANKROLL_KEY = "initial_bankroll"


class PersistenceStore(ABC):
    """Abstract key-value store holding serialized ledger state.

    Values are opaque strings; encoding them is the caller's concern
    (see :mod:`grindtracker.db.codec`).
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if absent."""
        pass

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass


class MemoryStore(PersistenceStore):
    """Dictionary-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLiteStore(PersistenceStore):
    """SQLite-based key-value store."""

    REQUIRED_TABLES = ["kv"]

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def load(self, key: str) -> Optional[str]:
        """Load a value.

        Args:
            key: Storage key.

        Returns:
            Stored value if present, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def save(self, key: str, value: str) -> None:
        """Save a value.

        Args:
            key: Storage key.
            value: Serialized value.
        """
        conn = self._get_connection()
        try:
            conn.execute(
                """
                INSERT OR REPLACE INTO kv (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary mapping each stored key to its last update time.
        """
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT key, updated_at FROM kv ORDER BY key")
            return {row["key"]: row["updated_at"] for row in cursor.fetchall()}
        finally:
            conn.close()
