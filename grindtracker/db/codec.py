"""Serialization of ledger state to the key-value store.

Entries are stored as a JSON array of
``{id, date, name, venue, buyIn, prize, profit}`` objects and the
bankroll as a decimal string. Missing or malformed values load as empty
state rather than failing.
"""

import json
import logging
from typing import Iterable, Optional

from pydantic import ValidationError

from grindtracker.models import TournamentEntry

logger = logging.getLogger(__name__)


def dump_entries(entries: Iterable[TournamentEntry]) -> str:
    """Encode entries as a JSON array."""
    return json.dumps([entry.to_record() for entry in entries])


def parse_entries(raw: Optional[str]) -> list[TournamentEntry]:
    """Decode stored entries.

    Args:
        raw: JSON text as stored, or None.

    Returns:
        Decoded entries. Records that fail validation or repeat an id
        already seen are skipped.
    """
    if not raw:
        return []
    try:
        records = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Stored tournaments are not valid JSON; starting empty")
        return []
    if not isinstance(records, list):
        logger.warning("Stored tournaments are not a list; starting empty")
        return []

    entries: list[TournamentEntry] = []
    seen: set[int] = set()
    for index, record in enumerate(records):
        try:
            entry = TournamentEntry.model_validate(record)
        except ValidationError as e:
            logger.warning("Skipping malformed tournament record %d: %s", index, e)
            continue
        if entry.id in seen:
            logger.warning("Skipping tournament record %d: duplicate id %d", index, entry.id)
            continue
        seen.add(entry.id)
        entries.append(entry)
    return entries


def dump_bankroll(amount: float) -> str:
    return str(float(amount))


def parse_bankroll(raw: Optional[str]) -> float:
    """Decode the stored initial bankroll, defaulting to zero."""
    if raw is None or raw.strip() == "":
        return 0.0
    try:
        return float(raw)
    except ValueError:
        logger.warning("Stored bankroll %r is not a number; using 0", raw)
        return 0.0
