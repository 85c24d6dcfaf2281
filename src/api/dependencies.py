"""FastAPI dependencies wiring adapters to the service configuration."""

from typing import Iterator

from fastapi import Request

from teamtracker.config import ServiceConfig, config_from_env

from ..application.ports.game_store import GameStorePort
from ..application.ports.report_generator import ReportGeneratorPort
from ..infrastructure.adapters.airtable_game_store import AirtableGameStore
from ..infrastructure.adapters.openai_report_generator import OpenAIReportGenerator


def get_config(request: Request) -> ServiceConfig:
    """Configuration built once at startup and kept on the app state."""
    config = getattr(request.app.state, "config", None)
    if config is None:
        config = config_from_env()
        request.app.state.config = config
    return config


def get_game_store(request: Request) -> Iterator[GameStorePort]:
    """Per-request Airtable store; its session is closed once the response is sent."""
    store = AirtableGameStore(get_config(request))
    try:
        yield store
    finally:
        store.close()


def get_report_generator(request: Request) -> ReportGeneratorPort:
    return OpenAIReportGenerator(get_config(request))
