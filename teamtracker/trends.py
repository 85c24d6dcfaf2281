"""Early-vs-recent season trend summary.

The season is compared as two windows of ``N`` games each: the first ``N``
dated games and the last ``N`` dated games, where ``N`` is half the season
capped at five. For seasons of three to five games the windows overlap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import MIN_TREND_GAMES, InsufficientDataError
from .normalize import GameRecord, normalize_records, parse_game_date

logger = logging.getLogger(__name__)

MAX_WINDOW = 5

# (camelCase name used in reports, GameRecord attribute)
TREND_METRICS: Tuple[Tuple[str, str], ...] = (
    ("teamScore", "team_score"),
    ("goalieScore", "goalie_score"),
    ("shotShare", "shot_share"),
    ("goalsFor", "goals_for"),
    ("goalsAgainst", "goals_against"),
)


@dataclass(frozen=True)
class SeasonSummary:
    game_count: int
    window_size: int
    early_averages: Dict[str, Optional[float]] = field(default_factory=dict)
    recent_averages: Dict[str, Optional[float]] = field(default_factory=dict)
    deltas: Dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gameCount": self.game_count,
            "windowSize": self.window_size,
            "earlyAverages": dict(self.early_averages),
            "recentAverages": dict(self.recent_averages),
            "deltas": dict(self.deltas),
        }


def window_size(game_count: int) -> int:
    return min(MAX_WINDOW, max(1, game_count // 2))


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def _delta(early: Optional[float], recent: Optional[float]) -> Optional[float]:
    if early is None or recent is None:
        return None
    return recent - early


def _window_averages(window: Sequence[GameRecord]) -> Dict[str, Optional[float]]:
    averages: Dict[str, Optional[float]] = {}
    for name, attr in TREND_METRICS:
        values = [getattr(g, attr) for g in window if getattr(g, attr) is not None]
        averages[name] = _mean(values)
    return averages


def order_by_date(games: Iterable[GameRecord]) -> List[GameRecord]:
    """Drop games without a parseable date and sort the rest oldest first.

    ``sorted`` is stable, so games sharing a date keep their input order.
    """
    dated = []
    for g in games:
        parsed = parse_game_date(g.date)
        if parsed is not None:
            dated.append((parsed, g))
    dated.sort(key=lambda pair: pair[0])
    return [g for _, g in dated]


def compute_season_summary(games: Sequence[GameRecord]) -> SeasonSummary:
    """Summarize an ordered, dated season.

    Raises ``InsufficientDataError`` below three games.
    """
    n = len(games)
    logger.debug("computing season summary over %d games", n)
    if n < MIN_TREND_GAMES:
        raise InsufficientDataError(n)

    size = window_size(n)
    early = _window_averages(games[:size])
    recent = _window_averages(games[n - size:])
    deltas = {name: _delta(early[name], recent[name]) for name, _ in TREND_METRICS}

    summary = SeasonSummary(
        game_count=n,
        window_size=size,
        early_averages=early,
        recent_averages=recent,
        deltas=deltas,
    )
    logger.debug("season summary: window=%d deltas=%s", size, deltas)
    return summary


def summarize_season(raw_records: Iterable[Any]) -> Tuple[SeasonSummary, List[GameRecord]]:
    ordered = order_by_date(normalize_records(raw_records))
    return compute_season_summary(ordered), ordered
