"""Infrastructure adapters."""

from .airtable_game_store import AirtableGameStore
from .openai_report_generator import OpenAIReportGenerator

__all__ = [
    "AirtableGameStore",
    "OpenAIReportGenerator",
]
