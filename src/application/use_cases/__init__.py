"""Application use cases."""

from .generate_report import (
    GenerateReportRequest,
    GenerateReportResult,
    GenerateReportUseCase,
)
from .save_game import SaveGameResult, SaveGameUseCase

__all__ = [
    "GenerateReportRequest",
    "GenerateReportResult",
    "GenerateReportUseCase",
    "SaveGameResult",
    "SaveGameUseCase",
]
