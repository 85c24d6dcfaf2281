"""REST API routes for game saving and coaching reports."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field

from teamtracker.errors import (
    ConfigurationError,
    InvalidPayloadError,
    UpstreamError,
)

from ..dependencies import get_game_store, get_report_generator
from ...application.ports.game_store import GameStorePort
from ...application.ports.report_generator import ReportGeneratorPort
from ...application.use_cases.generate_report import (
    GOALIE_REPORT,
    PRACTICE_PLAN,
    SEASON_FOCUS,
    SEASON_REPORT,
    TEAM_REPORT,
    GenerateReportRequest,
    GenerateReportUseCase,
)
from ...application.use_cases.save_game import SaveGameUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["reports"])


class SeasonRequest(BaseModel):
    """Request body for season-wide reports."""

    games: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Game rows; any accepted field aliases",
    )
    season: Optional[str] = Field(
        default=None,
        description="Season to fetch from the game store when no games are sent",
    )


class TeamReportRequest(SeasonRequest):
    """Request body for the team report."""

    game: Optional[Dict[str, Any]] = Field(default=None, description="Single game row")
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=100,
        description="Maximum rows to fetch from the game store",
    )


class GameRequest(BaseModel):
    """Request body for single-game reports."""

    game: Optional[Dict[str, Any]] = Field(default=None, description="Single game row")
    derived: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Breakdowns computed by the app (practice plan only)",
    )


class ReportResponse(BaseModel):
    """Report response model."""

    success: bool
    text: Optional[str] = None


class SaveGameResponse(BaseModel):
    """Save-game response model."""

    success: bool
    id: Optional[str] = None


def _raise_for(kind: str, e: Exception) -> None:
    """Translate tracker errors into HTTP errors."""
    if isinstance(e, InvalidPayloadError):
        logger.info("%s rejected: %s", kind, e)
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ConfigurationError):
        logger.error("%s: %s", kind, e)
        raise HTTPException(status_code=500, detail=str(e))
    if isinstance(e, UpstreamError):
        logger.error("%s: %s (detail=%r)", kind, e, e.detail)
        raise HTTPException(status_code=500, detail=f"{e.service} request failed")
    logger.exception("%s failed", kind)
    raise HTTPException(status_code=500, detail="Server error")


async def _run_report(
    request: GenerateReportRequest,
    game_store: GameStorePort,
    report_generator: ReportGeneratorPort,
) -> ReportResponse:
    use_case = GenerateReportUseCase(game_store, report_generator)
    try:
        result = await use_case.execute(request)
    except Exception as e:
        _raise_for(request.kind, e)
    return ReportResponse(success=result.success, text=result.text)


@router.post("/season-focus", response_model=ReportResponse, response_model_exclude_none=True)
async def season_focus(
    request: SeasonRequest,
    game_store: GameStorePort = Depends(get_game_store),
    report_generator: ReportGeneratorPort = Depends(get_report_generator),
):
    """Season review comparing the earliest games with the most recent ones.

    Fewer than three dated games is not an error: the response is a success
    whose text explains how many more games are needed.
    """
    return await _run_report(
        GenerateReportRequest(kind=SEASON_FOCUS, games=request.games, season=request.season),
        game_store,
        report_generator,
    )


@router.post("/season-report", response_model=ReportResponse, response_model_exclude_none=True)
async def season_report(
    request: SeasonRequest,
    game_store: GameStorePort = Depends(get_game_store),
    report_generator: ReportGeneratorPort = Depends(get_report_generator),
):
    """Season report built from record and goal/shot totals."""
    return await _run_report(
        GenerateReportRequest(kind=SEASON_REPORT, games=request.games, season=request.season),
        game_store,
        report_generator,
    )


@router.post("/team-report", response_model=ReportResponse, response_model_exclude_none=True)
async def team_report(
    request: TeamReportRequest,
    game_store: GameStorePort = Depends(get_game_store),
    report_generator: ReportGeneratorPort = Depends(get_report_generator),
):
    """Team report for one game, a list of games, or a fetched season."""
    return await _run_report(
        GenerateReportRequest(
            kind=TEAM_REPORT,
            game=request.game,
            games=request.games,
            season=request.season,
            limit=request.limit,
        ),
        game_store,
        report_generator,
    )


@router.post("/goalie-report", response_model=ReportResponse, response_model_exclude_none=True)
async def goalie_report(
    request: GameRequest,
    game_store: GameStorePort = Depends(get_game_store),
    report_generator: ReportGeneratorPort = Depends(get_report_generator),
):
    """Goalie report from one game's shots and goals against."""
    return await _run_report(
        GenerateReportRequest(kind=GOALIE_REPORT, game=request.game),
        game_store,
        report_generator,
    )


@router.post("/practice-plan", response_model=ReportResponse, response_model_exclude_none=True)
async def practice_plan(
    request: GameRequest,
    game_store: GameStorePort = Depends(get_game_store),
    report_generator: ReportGeneratorPort = Depends(get_report_generator),
):
    """45-minute practice plan targeting the issues of one game."""
    return await _run_report(
        GenerateReportRequest(kind=PRACTICE_PLAN, game=request.game, derived=request.derived),
        game_store,
        report_generator,
    )


@router.post("/save-game", response_model=SaveGameResponse, response_model_exclude_none=True)
async def save_game(
    payload: Dict[str, Any] = Body(...),
    game_store: GameStorePort = Depends(get_game_store),
):
    """Save one game row to the game table.

    Accepts either ``{"game": {...}}`` keyed by column name or the season
    tracker's ``{"meta": {...}, "aggregates": {"gameRow": {...}}}`` payload.
    """
    use_case = SaveGameUseCase(game_store)
    try:
        result = await use_case.execute(payload)
    except Exception as e:
        _raise_for("save_game", e)
    return SaveGameResponse(success=result.success, id=result.id)
