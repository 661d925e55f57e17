"""Tournament entry data models."""

from datetime import date as date_type
from typing import Literal, get_args

from pydantic import BaseModel, Field, computed_field

Venue = Literal[
    "WPT Global",
    "CoinPoker",
    "PokerStars",
    "ChampionPoker",
    "YaPoker",
    "PokerStars.es",
    "partypoker",
    "888poker",
    "GGPoker",
    "VangPoker",
]

VENUES: tuple[str, ...] = get_args(Venue)
DEFAULT_VENUE: str = VENUES[0]


class TournamentInput(BaseModel):
    """Candidate values for creating or replacing a tournament entry."""

    date: date_type = Field(..., description="Day the tournament was played")
    name: str = Field(..., min_length=1, description="Tournament label")
    venue: Venue = Field(default=DEFAULT_VENUE, description="Poker room")
    buy_in: float = Field(..., ge=0, allow_inf_nan=False, alias="buyIn", description="Entry cost")
    prize: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Amount won, zero if no payout")

    model_config = {"frozen": True, "populate_by_name": True}


class TournamentEntry(TournamentInput):
    """A recorded tournament result."""

    id: int = Field(..., description="Ledger-assigned identifier")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def profit(self) -> float:
        """Prize minus buy-in."""
        return self.prize - self.buy_in

    @classmethod
    def from_input(cls, entry_id: int, candidate: TournamentInput) -> "TournamentEntry":
        """Build an entry carrying ``entry_id`` and the candidate's values."""
        return cls(id=entry_id, **candidate.model_dump())

    def to_record(self) -> dict:
        """Serialize to the persisted record layout."""
        record = self.model_dump(mode="json", by_alias=True)
        return {
            "id": record["id"],
            "date": record["date"],
            "name": record["name"],
            "venue": record["venue"],
            "buyIn": record["buyIn"],
            "prize": record["prize"],
            "profit": record["profit"],
        }
