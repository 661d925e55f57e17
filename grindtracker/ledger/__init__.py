"""Tournament ledger and derived statistics."""

from grindtracker.ledger.core import (
    BUY_IN_CEILING_REASON,
    DEFAULT_BUY_IN_CEILING,
    TournamentLedger,
)
from grindtracker.ledger.stats import (
    available_years,
    compute_statistics,
    cumulative_series,
    current_bankroll,
    filter_entries,
)

__all__ = [
    "BUY_IN_CEILING_REASON",
    "DEFAULT_BUY_IN_CEILING",
    "TournamentLedger",
    "available_years",
    "compute_statistics",
    "cumulative_series",
    "current_bankroll",
    "filter_entries",
]
