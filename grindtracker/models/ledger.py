"""Ledger state and derived-statistics data models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from grindtracker.models.tournament import TournamentEntry

MONTHS: tuple[str, ...] = tuple(f"{month:02d}" for month in range(1, 13))


class LedgerState(BaseModel):
    """Authoritative collection of entries plus the initial bankroll."""

    entries: list[TournamentEntry] = Field(
        default_factory=list, description="Entries, newest first on creation"
    )
    initial_bankroll: float = Field(default=0.0, description="Starting capital")


class FilterCriteria(BaseModel):
    """Month / year / venue narrowing applied to the entry list.

    Unset or empty criteria are not applied.
    """

    month: Optional[str] = Field(default=None, description="Calendar month, 01-12")
    year: Optional[str] = Field(default=None, description="Four-digit year")
    venue: Optional[str] = Field(default=None, description="Exact venue name")

    model_config = {"frozen": True}

    @field_validator("month", mode="before")
    @classmethod
    def _normalize_month(cls, value):
        if value is None or str(value).strip() == "":
            return None
        text = str(value).strip()
        if text.isdigit():
            text = text.zfill(2)
        if text not in MONTHS:
            raise ValueError(f"month must be one of 01-12, got {value!r}")
        return text

    @field_validator("year", mode="before")
    @classmethod
    def _normalize_year(cls, value):
        if value is None or str(value).strip() == "":
            return None
        return str(value).strip()

    @field_validator("venue", mode="before")
    @classmethod
    def _normalize_venue(cls, value):
        if value is None or str(value) == "":
            return None
        return str(value)

    @property
    def is_empty(self) -> bool:
        return self.month is None and self.year is None and self.venue is None

    def describe(self) -> str:
        """Human readable summary of the active criteria."""
        parts = []
        if self.year:
            parts.append(self.year if not self.month else f"{self.year}-{self.month}")
        elif self.month:
            parts.append(f"month {self.month}")
        if self.venue:
            parts.append(self.venue)
        return ", ".join(parts) if parts else "all tournaments"


class LedgerStats(BaseModel):
    """Aggregate figures over a view of entries."""

    count: int = Field(default=0, ge=0, description="Entries in the view")
    invested: float = Field(default=0.0, description="Sum of buy-ins")
    won: float = Field(default=0.0, description="Sum of prizes")
    profit: float = Field(default=0.0, description="Won minus invested")
    roi: float = Field(default=0.0, description="Return on investment, percent")

    model_config = {"frozen": True}

    @property
    def roi_text(self) -> str:
        return f"{self.roi:.2f}"


class SeriesPoint(BaseModel):
    """One point of the cumulative profit chart."""

    date: date_type
    cumulative_profit: float

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[str, float]:
        return self.date.isoformat(), self.cumulative_profit


class LedgerSummary(BaseModel):
    """Everything the presentation layer draws for one filter selection."""

    criteria: FilterCriteria
    entries: list[TournamentEntry]
    stats: LedgerStats
    series: list[SeriesPoint]
    initial_bankroll: float
    current_bankroll: float

    model_config = {"frozen": True}
