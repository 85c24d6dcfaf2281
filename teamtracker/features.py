from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from .normalize import GameRecord, Number, normalize_record


@dataclass
class SeasonTotals:
    games_count: int = 0
    decided_count: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    goals_for: Number = 0
    goals_against: Number = 0
    shots_for: Number = 0
    shots_against: Number = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gamesCount": self.games_count,
            "decidedCount": self.decided_count,
            "w": self.wins,
            "l": self.losses,
            "t": self.ties,
            "gf": self.goals_for,
            "ga": self.goals_against,
            "sf": self.shots_for,
            "sa": self.shots_against,
        }


def compute_season_totals(games: Iterable[GameRecord]) -> SeasonTotals:
    totals = SeasonTotals()
    for g in games:
        totals.games_count += 1
        # A result only counts when both scores are known.
        if g.goals_for is not None and g.goals_against is not None:
            totals.decided_count += 1
            totals.goals_for += g.goals_for
            totals.goals_against += g.goals_against
            if g.goals_for > g.goals_against:
                totals.wins += 1
            elif g.goals_for < g.goals_against:
                totals.losses += 1
            else:
                totals.ties += 1
        if g.shots_for is not None:
            totals.shots_for += g.shots_for
        if g.shots_against is not None:
            totals.shots_against += g.shots_against
    return totals


def compute_goalie_line(game: GameRecord) -> Dict[str, Optional[Number]]:
    sa = game.shots_against
    ga = game.goals_against
    saves: Optional[Number] = None
    sv_pct: Optional[float] = None
    if sa is not None and ga is not None:
        saves = max(0, sa - ga)
        if sa:
            sv_pct = saves / sa
    return {"sa": sa, "ga": ga, "saves": saves, "svPct": sv_pct}


def summarize_game(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Per-game line for team reports: canonical stats plus the untouched source row."""
    game = normalize_record(raw)
    return {
        "date": game.date,
        "opp": game.opponent,
        "lvl": game.level,
        "gf": game.goals_for,
        "ga": game.goals_against,
        "sf": game.shots_for,
        "sa": game.shots_against,
        "raw": raw,
    }
