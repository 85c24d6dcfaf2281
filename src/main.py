"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from teamtracker.config import ServiceConfig, config_from_env

from . import __version__
from .api.dependencies import get_config
from .api.rest.routes import router as reports_router

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    app.state.config = config_from_env()
    logger.info(
        "config loaded (airtable=%s, openai=%s, model=%s)",
        app.state.config.airtable_configured,
        app.state.config.openai_configured,
        app.state.config.openai_model,
    )
    yield
    # Shutdown


app = FastAPI(
    title="SmartTeamTracker API",
    description="Game saving and AI coaching reports for youth hockey teams",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Every error answers with the same ``{success, error}`` body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": f"Invalid request body: {message}"},
    )


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    airtable_configured: bool
    openai_configured: bool


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "SmartTeamTracker API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "save_game": "POST /api/save-game",
            "season_focus": "POST /api/season-focus",
            "season_report": "POST /api/season-report",
            "team_report": "POST /api/team-report",
            "goalie_report": "POST /api/goalie-report",
            "practice_plan": "POST /api/practice-plan",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check(config: ServiceConfig = Depends(get_config)):
    """Check API health and configuration status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        airtable_configured=config.airtable_configured,
        openai_configured=config.openai_configured,
    )


# Include REST routes
app.include_router(reports_router)
