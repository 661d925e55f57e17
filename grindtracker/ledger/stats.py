"""Derived statistics over a view of tournament entries.

Every function here is pure: it takes a sequence of entries (usually the
output of :func:`filter_entries`) and recomputes its result from scratch.
"""

from itertools import accumulate
from typing import Iterable, Optional, Sequence

from grindtracker.models import FilterCriteria, LedgerStats, SeriesPoint, TournamentEntry


def filter_entries(
    entries: Iterable[TournamentEntry],
    criteria: Optional[FilterCriteria] = None,
) -> list[TournamentEntry]:
    """Narrow entries by month, year and venue.

    Args:
        entries: Entries in ledger order.
        criteria: Criteria to apply. Unset criteria match everything.

    Returns:
        Matching entries, in their original order.
    """
    if criteria is None or criteria.is_empty:
        return list(entries)

    def matches(entry: TournamentEntry) -> bool:
        if criteria.year and f"{entry.date.year:04d}" != criteria.year:
            return False
        if criteria.month and f"{entry.date.month:02d}" != criteria.month:
            return False
        if criteria.venue and entry.venue != criteria.venue:
            return False
        return True

    return [entry for entry in entries if matches(entry)]


def compute_statistics(view: Sequence[TournamentEntry]) -> LedgerStats:
    """Calculate invested, won, profit and ROI for a view.

    ROI is ``profit / invested * 100`` rounded to two decimals, and
    exactly zero when nothing was invested.
    """
    invested = sum(entry.buy_in for entry in view)
    won = sum(entry.prize for entry in view)
    profit = won - invested
    roi = round(profit / invested * 100, 2) if invested > 0 else 0.0
    return LedgerStats(
        count=len(view),
        invested=invested,
        won=won,
        profit=profit,
        roi=roi,
    )


def cumulative_series(view: Sequence[TournamentEntry]) -> list[SeriesPoint]:
    """Running profit total in date order.

    The sort is stable, so entries sharing a date keep their input order.
    Each point carries the total after including its entry.
    """
    ordered = sorted(view, key=lambda entry: entry.date)
    totals = accumulate(entry.profit for entry in ordered)
    return [
        SeriesPoint(date=entry.date, cumulative_profit=total)
        for entry, total in zip(ordered, totals)
    ]


def current_bankroll(initial_bankroll: float, total_profit: float) -> float:
    """Initial capital plus profit."""
    return initial_bankroll + total_profit


def available_years(entries: Iterable[TournamentEntry]) -> list[str]:
    """Distinct years present in ``entries``, in first-seen order."""
    years: list[str] = []
    for entry in entries:
        year = f"{entry.date.year:04d}"
        if year not in years:
            years.append(year)
    return years
