"""Application ports (interfaces)."""

from .game_store import GameStorePort
from .report_generator import ReportGeneratorPort

__all__ = [
    "GameStorePort",
    "ReportGeneratorPort",
]
