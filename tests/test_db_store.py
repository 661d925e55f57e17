"""Tests for the key-value store and the ledger codec.

**Feature: grind-tracker**
"""

import json
import logging
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import make_input
from grindtracker.db import (
    BANKROLL_KEY,
    ENTRIES_KEY,
    SQLiteStore,
    dump_bankroll,
    dump_entries,
    parse_bankroll,
    parse_entries,
)
from grindtracker.ledger import TournamentLedger
from grindtracker.models import TournamentEntry

SAFE_TEXT = st.characters(blacklist_categories=("Cs",), blacklist_characters="\x00")


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "nested" / "test.db"
        yield SQLiteStore(db_path)


class TestSQLiteStore:
    """
    **Feature: grind-tracker, Property 9: Store Round Trip**

    *For any* key and value saved, loading the key returns the last value.
    """

    def test_schema_created(self, temp_db: SQLiteStore):
        for table in SQLiteStore.REQUIRED_TABLES:
            assert table in temp_db.get_tables()

    def test_missing_key(self, temp_db: SQLiteStore):
        assert temp_db.load("nothing-here") is None

    @given(
        key=st.text(alphabet=SAFE_TEXT, min_size=1, max_size=30),
        values=st.lists(st.text(alphabet=SAFE_TEXT, max_size=200), min_size=1, max_size=5),
    )
    @settings(max_examples=30)
    def test_last_write_wins(self, key: str, values: list[str]):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SQLiteStore(Path(tmpdir) / "test.db")
            for value in values:
                store.save(key, value)
            assert store.load(key) == values[-1]

    def test_stats_lists_keys(self, temp_db: SQLiteStore):
        temp_db.save(ENTRIES_KEY, "[]")
        temp_db.save(BANKROLL_KEY, "0.0")
        assert sorted(temp_db.get_stats()) == sorted([ENTRIES_KEY, BANKROLL_KEY])

    def test_ledger_survives_reopen(self, temp_db: SQLiteStore):
        ledger = TournamentLedger.load(temp_db)
        ledger.add(make_input(name="Bounty Builder", venue="PokerStars", buy_in=5.5, prize=12.0))
        ledger.set_initial_bankroll(200)

        reopened = TournamentLedger.load(SQLiteStore(temp_db.db_path))

        assert reopened.entries == ledger.entries
        assert reopened.initial_bankroll == 200.0


class TestEntriesCodec:
    """Serialized record layout and tolerance of bad data."""

    def test_record_layout(self):
        entry = TournamentEntry.from_input(7, make_input(played_on="2024-05-01", buy_in=5.0, prize=8.0))
        records = json.loads(dump_entries([entry]))

        assert records == [
            {
                "id": 7,
                "date": "2024-05-01",
                "name": "Daily Big",
                "venue": "GGPoker",
                "buyIn": 5.0,
                "prize": 8.0,
                "profit": 3.0,
            }
        ]

    @pytest.mark.parametrize("raw", [None, "", "not json", "{}", "42"])
    def test_missing_or_malformed_is_empty(self, raw):
        assert parse_entries(raw) == []

    def test_stored_profit_is_rederived(self):
        raw = json.dumps([
            {"id": 1, "date": "2024-01-01", "name": "x", "venue": "GGPoker", "buyIn": 2, "prize": 5, "profit": 999}
        ])
        assert parse_entries(raw)[0].profit == 3

    def test_malformed_records_skipped(self, caplog):
        raw = json.dumps([
            {"id": 1, "date": "2024-01-01", "name": "ok", "venue": "GGPoker", "buyIn": 2, "prize": 5},
            {"id": 2, "date": "not-a-date", "name": "bad", "venue": "GGPoker", "buyIn": 2, "prize": 5},
            {"id": 3, "date": "2024-01-03", "name": "bad venue", "venue": "Nowhere", "buyIn": 2, "prize": 5},
            "garbage",
            {"id": 1, "date": "2024-01-04", "name": "dup", "venue": "GGPoker", "buyIn": 1, "prize": 0},
        ])
        with caplog.at_level(logging.WARNING, logger="grindtracker.db.codec"):
            entries = parse_entries(raw)

        assert [e.name for e in entries] == ["ok"]
        assert "Skipping" in caplog.text


class TestBankrollCodec:
    """Initial bankroll encoding."""

    def test_round_trip(self):
        assert parse_bankroll(dump_bankroll(125.5)) == 125.5

    @pytest.mark.parametrize("raw", [None, "", "   ", "lots"])
    def test_missing_or_malformed_is_zero(self, raw):
        assert parse_bankroll(raw) == 0.0
