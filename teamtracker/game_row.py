"""Map save-game payloads onto the Airtable ``Games`` columns."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping

from .errors import InvalidPayloadError

logger = logging.getLogger(__name__)

ALLOWED_FIELDS: List[str] = [
    "Date",
    "Opponent",
    "Level",
    "TeamScore",
    "GoalieScore",
    "SF",
    "SA",
    "GF",
    "GA",
    "BreakawaysAgainst",
    "DZTurnovers",
    "Smothers",
    "BadRebounds",
    "BigSaves",
    "SoftGoals",
    "GA_BA",
    "GA_DZ",
    "GA_BR",
    "GA_Other",
    "JSONDump",
]

# Airtable column -> key in the season tracker's exported game row.
GAME_ROW_COLUMNS: Dict[str, str] = {
    "TeamScore": "teamScore",
    "GoalieScore": "goalieScore",
    "SF": "SF",
    "SA": "SA",
    "GF": "GF",
    "GA": "GA",
    "BreakawaysAgainst": "breakawaysAgainst",
    "DZTurnovers": "dzTurnovers",
    "Smothers": "smothers",
    "BadRebounds": "badRebounds",
    "BigSaves": "bigSaves",
    "SoftGoals": "softGoals",
    "GA_BA": "GA_off_BA",
    "GA_DZ": "GA_off_DZ",
    "GA_BR": "GA_off_BR",
    "GA_Other": "GA_other",
}


def _from_game_row(payload: Mapping[str, Any]) -> Dict[str, Any]:
    row = payload["aggregates"]["gameRow"]
    meta = payload.get("meta") or {}
    if not isinstance(meta, Mapping):
        raise InvalidPayloadError("meta must be an object")
    fields: Dict[str, Any] = {
        "Date": meta.get("date") or row.get("date"),
        "Opponent": meta.get("opponent") or row.get("opponent"),
        "Level": meta.get("level") or row.get("level"),
    }
    for column, key in GAME_ROW_COLUMNS.items():
        if key in row:
            fields[column] = row[key]
    fields["JSONDump"] = json.dumps(payload)
    return fields


def _filter_allowed(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: candidate[k] for k in ALLOWED_FIELDS if k in candidate}


def build_game_fields(payload: Any) -> Dict[str, Any]:
    """Return the allowlisted Airtable fields for a save-game payload.

    Two shapes are accepted: ``{"game": {...}}`` already keyed by column, and
    the season tracker's ``{"meta": {...}, "aggregates": {"gameRow": {...}}}``,
    whose full payload is also kept in ``JSONDump``.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError("Invalid payload structure")

    game = payload.get("game")
    aggregates = payload.get("aggregates")
    if isinstance(game, Mapping) and game:
        save_type = "simple"
        candidate = dict(game)
    elif isinstance(aggregates, Mapping) and isinstance(aggregates.get("gameRow"), Mapping):
        save_type = "season"
        candidate = _from_game_row(payload)
    else:
        raise InvalidPayloadError("Missing game data")

    fields = _filter_allowed(candidate)
    dropped = sorted(set(candidate) - set(fields))
    logger.info("save-game payload type=%s fields=%d dropped=%s", save_type, len(fields), dropped)
    if not fields:
        raise InvalidPayloadError("Game data has no recognised columns")
    return fields
