"""Use case for generating coaching reports."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List

from teamtracker.errors import InsufficientDataError, InvalidPayloadError
from teamtracker.report import (
    ReportJob,
    build_goalie_report_job,
    build_practice_plan_job,
    build_season_focus_job,
    build_season_report_job,
    build_team_report_job,
)

from ..ports.game_store import GameStorePort
from ..ports.report_generator import ReportGeneratorPort

logger = logging.getLogger(__name__)

# Thread pool for running blocking I/O operations
_executor = ThreadPoolExecutor(max_workers=4)

SEASON_FOCUS = "season_focus"
SEASON_REPORT = "season_report"
TEAM_REPORT = "team_report"
GOALIE_REPORT = "goalie_report"
PRACTICE_PLAN = "practice_plan"

# Report kinds whose games may be fetched from the store by season.
_FETCHABLE = {SEASON_FOCUS, SEASON_REPORT, TEAM_REPORT}


@dataclass
class GenerateReportRequest:
    """Request to generate a report."""

    kind: str
    games: List[Dict[str, Any]] | None = None
    game: Dict[str, Any] | None = None
    season: str | None = None
    limit: int | None = None
    derived: Dict[str, Any] | None = None


@dataclass
class GenerateReportResult:
    """Result of report generation."""

    success: bool
    text: str | None = None
    games_analyzed: int = 0


def _build_job(request: GenerateReportRequest, games: List[Dict[str, Any]]) -> ReportJob:
    builders: Dict[str, Callable[[], ReportJob]] = {
        SEASON_FOCUS: lambda: build_season_focus_job(games),
        SEASON_REPORT: lambda: build_season_report_job(games),
        TEAM_REPORT: lambda: build_team_report_job(games),
        GOALIE_REPORT: lambda: build_goalie_report_job(request.game),
        PRACTICE_PLAN: lambda: build_practice_plan_job(request.game, request.derived),
    }
    builder = builders.get(request.kind)
    if builder is None:
        raise InvalidPayloadError(f"Unknown report kind: {request.kind}")
    return builder()


class GenerateReportUseCase:
    """Use case for generating a coaching report.

    This orchestrates the process of:
    1. Collecting games from the request or the game store
    2. Normalizing them and computing the report's statistics
    3. Asking the report generator for text

    Typed tracker errors (invalid payload, configuration, upstream) propagate
    to the caller; too few games for a trend is a successful result.
    """

    def __init__(
        self,
        game_store: GameStorePort,
        report_generator: ReportGeneratorPort,
    ):
        self._game_store = game_store
        self._report_generator = report_generator

    async def _collect_games(self, request: GenerateReportRequest) -> List[Dict[str, Any]]:
        if request.kind == TEAM_REPORT and request.game:
            return [request.game]
        games = list(request.games or [])
        if games or request.kind not in _FETCHABLE:
            return games
        wants_fetch = request.season or (request.kind == TEAM_REPORT and request.limit)
        if not wants_fetch:
            raise InvalidPayloadError(
                "No games provided. Send {games:[...]} or configure Airtable and send {season}."
            )

        loop = asyncio.get_event_loop()
        fetch_func = partial(
            self._game_store.fetch_games,
            season=request.season,
            limit=request.limit,
        )
        return await loop.run_in_executor(_executor, fetch_func)

    async def execute(self, request: GenerateReportRequest) -> GenerateReportResult:
        """Execute the report generation use case.

        Args:
            request: Report generation request

        Returns:
            Report generation result
        """
        games = await self._collect_games(request)

        try:
            job = _build_job(request, games)
        except InsufficientDataError as e:
            logger.info("%s: %s", request.kind, e)
            return GenerateReportResult(success=True, text=str(e), games_analyzed=e.game_count)

        loop = asyncio.get_event_loop()
        generate_func = partial(
            self._report_generator.generate,
            job.instruction,
            job.context,
        )
        text = await loop.run_in_executor(_executor, generate_func)
        logger.info("%s generated from %d games", job.kind, job.game_count)

        return GenerateReportResult(
            success=True,
            text=text,
            games_analyzed=job.game_count,
        )
