from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Source keys accepted for each canonical field, highest priority first.
DATE_KEYS: Tuple[str, ...] = ("Date", "date")
OPPONENT_KEYS: Tuple[str, ...] = ("Opponent", "opponent", "opp")
LEVEL_KEYS: Tuple[str, ...] = ("Level", "level", "lvl")
GOALS_FOR_KEYS: Tuple[str, ...] = ("GF", "gf", "goalsFor", "usGoals")
GOALS_AGAINST_KEYS: Tuple[str, ...] = ("GA", "ga", "goalsAgainst", "themGoals")
SHOTS_FOR_KEYS: Tuple[str, ...] = ("SF", "sf", "shotsFor", "usShots")
SHOTS_AGAINST_KEYS: Tuple[str, ...] = ("SA", "sa", "shotsAgainst", "themShots")
TEAM_SCORE_KEYS: Tuple[str, ...] = ("TeamScore", "teamScore")
GOALIE_SCORE_KEYS: Tuple[str, ...] = ("GoalieScore", "goalieScore")
SHOT_SHARE_KEYS: Tuple[str, ...] = ("ShotShare", "shotShare")


@dataclass(frozen=True)
class GameRecord:
    date: str = ""
    opponent: str = ""
    level: str = ""
    goals_for: Optional[Number] = None
    goals_against: Optional[Number] = None
    shots_for: Optional[Number] = None
    shots_against: Optional[Number] = None
    team_score: Optional[Number] = None
    goalie_score: Optional[Number] = None
    shot_share: Optional[Number] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "opponent": self.opponent,
            "level": self.level,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "shotsFor": self.shots_for,
            "shotsAgainst": self.shots_against,
            "teamScore": self.team_score,
            "goalieScore": self.goalie_score,
            "shotShare": self.shot_share,
        }


def _first_present(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _safe_num(value: Any) -> Optional[Number]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return None
        num: Number = value
    elif isinstance(value, float):
        num = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
        if math.isfinite(num) and num.is_integer() and "." not in text and "e" not in text.lower():
            num = int(num)
    else:
        return None
    if isinstance(num, float) and not math.isfinite(num):
        return None
    return num


def _safe_count(value: Any) -> Optional[Number]:
    num = _safe_num(value)
    if num is None or num < 0:
        return None
    return num


def _safe_ratio(value: Any) -> Optional[Number]:
    num = _safe_num(value)
    if num is None or not 0 <= num <= 1:
        return None
    return num


def _safe_text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def parse_game_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` date or an ISO date-time; anything else is ``None``."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def normalize_record(raw: Any) -> GameRecord:
    if not isinstance(raw, Mapping):
        return GameRecord()
    return GameRecord(
        date=_safe_text(_first_present(raw, DATE_KEYS)),
        opponent=_safe_text(_first_present(raw, OPPONENT_KEYS)),
        level=_safe_text(_first_present(raw, LEVEL_KEYS)),
        goals_for=_safe_count(_first_present(raw, GOALS_FOR_KEYS)),
        goals_against=_safe_count(_first_present(raw, GOALS_AGAINST_KEYS)),
        shots_for=_safe_count(_first_present(raw, SHOTS_FOR_KEYS)),
        shots_against=_safe_count(_first_present(raw, SHOTS_AGAINST_KEYS)),
        team_score=_safe_num(_first_present(raw, TEAM_SCORE_KEYS)),
        goalie_score=_safe_num(_first_present(raw, GOALIE_SCORE_KEYS)),
        shot_share=_safe_ratio(_first_present(raw, SHOT_SHARE_KEYS)),
    )


def normalize_records(raws: Iterable[Any]) -> List[GameRecord]:
    raw_list = list(raws)
    logger.debug("normalizing %d raw game records", len(raw_list))
    games = [normalize_record(r) for r in raw_list]
    logger.debug(
        "normalized %d records (%d dated)",
        len(games),
        sum(1 for g in games if parse_game_date(g.date)),
    )
    return games
