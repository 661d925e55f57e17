"""Shared fixtures and strategies for Grind Tracker tests."""

from datetime import date

import pytest
from hypothesis import strategies as st

from grindtracker.db import MemoryStore
from grindtracker.ledger import TournamentLedger
from grindtracker.models import VENUES, TournamentInput


def make_input(
    played_on: str = "2024-05-01",
    name: str = "Daily Big",
    venue: str = "GGPoker",
    buy_in: float = 5.0,
    prize: float = 0.0,
) -> TournamentInput:
    """Build a tournament candidate with sensible defaults."""
    return TournamentInput(
        date=date.fromisoformat(played_on),
        name=name,
        venue=venue,
        buy_in=buy_in,
        prize=prize,
    )


def tournament_input_strategy(max_buy_in: float = 10.0):
    """Generate valid TournamentInput objects."""
    return st.builds(
        TournamentInput,
        date=st.dates(min_value=date(2020, 1, 1), max_value=date(2026, 12, 31)),
        name=st.text(min_size=1, max_size=30),
        venue=st.sampled_from(VENUES),
        buyIn=st.floats(min_value=0.0, max_value=max_buy_in, allow_nan=False, allow_infinity=False),
        prize=st.floats(min_value=0.0, max_value=5000.0, allow_nan=False, allow_infinity=False),
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def ledger(store: MemoryStore) -> TournamentLedger:
    return TournamentLedger(store=store)
