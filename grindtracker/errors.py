"""Ledger error types."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError):
    """A candidate entry was rejected; the ledger is unchanged."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(LedgerError):
    """No entry carries the requested id."""

    def __init__(self, entry_id: int):
        super().__init__(f"Tournament {entry_id} not found")
        self.entry_id = entry_id
