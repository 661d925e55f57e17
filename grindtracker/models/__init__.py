"""Data models for Grind Tracker."""

from grindtracker.models.ledger import (
    MONTHS,
    FilterCriteria,
    LedgerState,
    LedgerStats,
    LedgerSummary,
    SeriesPoint,
)
from grindtracker.models.tournament import (
    DEFAULT_VENUE,
    VENUES,
    TournamentEntry,
    TournamentInput,
    Venue,
)

__all__ = [
    "DEFAULT_VENUE",
    "MONTHS",
    "VENUES",
    "FilterCriteria",
    "LedgerState",
    "LedgerStats",
    "LedgerSummary",
    "SeriesPoint",
    "TournamentEntry",
    "TournamentInput",
    "Venue",
]
