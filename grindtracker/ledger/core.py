"""The tournament ledger: state container and mutation operations."""

import logging
import sqlite3
import time
from typing import Optional

from grindtracker.db import (
    BANKROLL_KEY,
    ENTRIES_KEY,
    PersistenceStore,
    dump_bankroll,
    dump_entries,
    parse_bankroll,
    parse_entries,
)
from grindtracker.errors import NotFoundError, ValidationError
from grindtracker.ledger.stats import (
    available_years,
    compute_statistics,
    cumulative_series,
    current_bankroll,
    filter_entries,
)
from grindtracker.models import (
    FilterCriteria,
    LedgerState,
    LedgerStats,
    LedgerSummary,
    SeriesPoint,
    TournamentEntry,
    TournamentInput,
)

logger = logging.getLogger(__name__)

DEFAULT_BUY_IN_CEILING = 10.0
BUY_IN_CEILING_REASON = "buy-in exceeds ceiling"


class TournamentLedger:
    """Owns the tournament entries and the initial bankroll.

    Mutations either apply fully or raise without touching state. After a
    successful mutation the affected value is written to the store, if one
    is attached. Store failures are logged and do not undo the mutation.
    """

    def __init__(
        self,
        state: Optional[LedgerState] = None,
        store: Optional[PersistenceStore] = None,
        buy_in_ceiling: float = DEFAULT_BUY_IN_CEILING,
    ):
        """Initialize the ledger.

        Args:
            state: Starting state. Defaults to an empty ledger.
            store: Store to write to after each mutation.
            buy_in_ceiling: Largest buy-in accepted by add/update.
        """
        self._state = state if state is not None else LedgerState()
        self._store = store
        self.buy_in_ceiling = buy_in_ceiling

    @classmethod
    def load(
        cls,
        store: PersistenceStore,
        buy_in_ceiling: float = DEFAULT_BUY_IN_CEILING,
    ) -> "TournamentLedger":
        """Create a ledger from the contents of ``store``.

        An unreadable store yields an empty ledger still attached to it.
        """
        try:
            state = LedgerState(
                entries=parse_entries(store.load(ENTRIES_KEY)),
                initial_bankroll=parse_bankroll(store.load(BANKROLL_KEY)),
            )
        except (sqlite3.Error, OSError):
            logger.exception("Failed to load ledger; starting empty")
            state = LedgerState()
        logger.debug("Loaded %d tournaments from store", len(state.entries))
        return cls(state, store=store, buy_in_ceiling=buy_in_ceiling)

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def entries(self) -> list[TournamentEntry]:
        """A copy of the entries in ledger order."""
        return list(self._state.entries)

    @property
    def initial_bankroll(self) -> float:
        return self._state.initial_bankroll

    # ==================== Mutations ====================

    def add(self, candidate: TournamentInput) -> TournamentEntry:
        """Record a new tournament at the front of the ledger.

        Raises:
            ValidationError: If the buy-in exceeds the ceiling.
        """
        self._check_ceiling(candidate)
        entry = TournamentEntry.from_input(self._next_id(), candidate)
        self._state.entries = [entry] + self._state.entries
        logger.info("Added tournament %d (%s)", entry.id, entry.name)
        self._persist_entries()
        return entry

    def update(self, entry_id: int, candidate: TournamentInput) -> TournamentEntry:
        """Replace the entry with ``entry_id`` in place.

        Raises:
            ValidationError: If the buy-in exceeds the ceiling.
            NotFoundError: If no entry has ``entry_id``.
        """
        self._check_ceiling(candidate)
        index = self._index_of(entry_id)
        entry = TournamentEntry.from_input(entry_id, candidate)
        entries = list(self._state.entries)
        entries[index] = entry
        self._state.entries = entries
        logger.info("Updated tournament %d", entry_id)
        self._persist_entries()
        return entry

    def remove(self, entry_id: int) -> TournamentEntry:
        """Delete the entry with ``entry_id`` and return it.

        Confirmation is up to the caller.

        Raises:
            NotFoundError: If no entry has ``entry_id``.
        """
        index = self._index_of(entry_id)
        entries = list(self._state.entries)
        removed = entries.pop(index)
        self._state.entries = entries
        logger.info("Removed tournament %d", entry_id)
        self._persist_entries()
        return removed

    def set_initial_bankroll(self, amount: float) -> None:
        self._state.initial_bankroll = float(amount)
        logger.info("Initial bankroll set to %.2f", self._state.initial_bankroll)
        self._persist(BANKROLL_KEY, dump_bankroll(self._state.initial_bankroll))

    # ==================== Queries ====================

    def get(self, entry_id: int) -> TournamentEntry:
        """Return the entry with ``entry_id``.

        Raises:
            NotFoundError: If no entry has ``entry_id``.
        """
        return self._state.entries[self._index_of(entry_id)]

    def filter(self, criteria: Optional[FilterCriteria] = None) -> list[TournamentEntry]:
        return filter_entries(self._state.entries, criteria)

    def statistics(self, criteria: Optional[FilterCriteria] = None) -> LedgerStats:
        return compute_statistics(self.filter(criteria))

    def cumulative_series(self, criteria: Optional[FilterCriteria] = None) -> list[SeriesPoint]:
        return cumulative_series(self.filter(criteria))

    def current_bankroll(self, criteria: Optional[FilterCriteria] = None) -> float:
        """Initial bankroll plus the profit of the filtered view."""
        return current_bankroll(self.initial_bankroll, self.statistics(criteria).profit)

    def available_years(self) -> list[str]:
        return available_years(self._state.entries)

    def summary(self, criteria: Optional[FilterCriteria] = None) -> LedgerSummary:
        """Filtered view with its statistics, chart series and bankroll."""
        criteria = criteria or FilterCriteria()
        view = self.filter(criteria)
        stats = compute_statistics(view)
        return LedgerSummary(
            criteria=criteria,
            entries=view,
            stats=stats,
            series=cumulative_series(view),
            initial_bankroll=self.initial_bankroll,
            current_bankroll=current_bankroll(self.initial_bankroll, stats.profit),
        )

    # ==================== Internals ====================

    def _check_ceiling(self, candidate: TournamentInput) -> None:
        if candidate.buy_in > self.buy_in_ceiling:
            logger.debug(
                "Rejected buy-in %.2f above ceiling %.2f", candidate.buy_in, self.buy_in_ceiling
            )
            raise ValidationError(BUY_IN_CEILING_REASON)

    def _index_of(self, entry_id: int) -> int:
        for index, entry in enumerate(self._state.entries):
            if entry.id == entry_id:
                return index
        raise NotFoundError(entry_id)

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past the largest id in use."""
        candidate = int(time.time() * 1000)
        if self._state.entries:
            candidate = max(candidate, max(entry.id for entry in self._state.entries) + 1)
        return candidate

    def _persist_entries(self) -> None:
        self._persist(ENTRIES_KEY, dump_entries(self._state.entries))

    def _persist(self, key: str, value: str) -> None:
        if self._store is None:
            return
        try:
            self._store.save(key, value)
        except (sqlite3.Error, OSError):
            logger.exception("Failed to save %s; in-memory ledger kept", key)
