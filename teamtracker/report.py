from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .errors import InvalidPayloadError
from .features import compute_goalie_line, compute_season_totals, summarize_game
from .normalize import normalize_record, normalize_records
from .prompts import INSTRUCTIONS
from .trends import summarize_season


@dataclass
class ReportJob:
    """What to ask the language model: which report, its instruction and its data."""

    kind: str
    instruction: str
    context: Dict[str, Any]
    game_count: int = 0


def _require_games(raw_games: Optional[List[Any]]) -> List[Dict[str, Any]]:
    games = [g for g in (raw_games or []) if isinstance(g, dict)]
    if not games:
        raise InvalidPayloadError("No game data provided")
    return games


def build_season_focus_job(raw_games: Optional[List[Any]]) -> ReportJob:
    """Season trend review. Raises ``InsufficientDataError`` below three dated games.

    An empty season is not a bad request: it simply has zero games so far.
    """
    games = [g for g in (raw_games or []) if isinstance(g, dict)]
    summary, ordered = summarize_season(games)
    return ReportJob(
        kind="season_focus",
        instruction=INSTRUCTIONS["season_focus"],
        context={
            "computed": summary.to_dict(),
            "games": [g.to_dict() for g in ordered],
        },
        game_count=len(ordered),
    )


def build_season_report_job(raw_games: List[Any]) -> ReportJob:
    games = _require_games(raw_games)
    normalized = normalize_records(games)
    totals = compute_season_totals(normalized)
    return ReportJob(
        kind="season_report",
        instruction=INSTRUCTIONS["season_report"],
        context={
            "instruction": "Generate the Season Report.",
            "totals": totals.to_dict(),
            "games": [g.to_dict() for g in normalized],
        },
        game_count=len(normalized),
    )


def build_team_report_job(raw_games: List[Any]) -> ReportJob:
    games = _require_games(raw_games)
    return ReportJob(
        kind="team_report",
        instruction=INSTRUCTIONS["team_report"],
        context={
            "instruction": "Generate the Team Report.",
            "games": [summarize_game(g) for g in games],
        },
        game_count=len(games),
    )


def build_goalie_report_job(game: Any) -> ReportJob:
    (raw,) = _require_games([game])
    return ReportJob(
        kind="goalie_report",
        instruction=INSTRUCTIONS["goalie_report"],
        context={
            "instruction": "Generate the Goalie Report.",
            "game": raw,
            "computed": compute_goalie_line(normalize_record(raw)),
        },
        game_count=1,
    )


def build_practice_plan_job(game: Any, derived: Optional[Dict[str, Any]] = None) -> ReportJob:
    (raw,) = _require_games([game])
    return ReportJob(
        kind="practice_plan",
        instruction=INSTRUCTIONS["practice_plan"],
        context={
            "instruction": "Create a 45-minute practice plan from this game.",
            "game": raw,
            "derived": derived or {},
        },
        game_count=1,
    )
