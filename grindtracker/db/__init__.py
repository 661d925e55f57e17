"""Persistence layer for Grind Tracker."""

from grindtracker.db.codec import dump_bankroll, dump_entries, parse_bankroll, parse_entries
from grindtracker.db.store import (
    BANKROLL_KEY,
    ENTRIES_KEY,
    MemoryStore,
    PersistenceStore,
    SQLiteStore,
)

__all__ = [
    "BANKROLL_KEY",
    "ENTRIES_KEY",
    "MemoryStore",
    "PersistenceStore",
    "SQLiteStore",
    "dump_bankroll",
    "dump_entries",
    "parse_bankroll",
    "parse_entries",
]
