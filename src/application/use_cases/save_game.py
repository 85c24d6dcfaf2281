"""Use case for saving one game row."""

import asyncio
from dataclasses import dataclass
from functools import partial
from typing import Any, Dict

from teamtracker.game_row import build_game_fields

from ..ports.game_store import GameStorePort
from .generate_report import _executor


@dataclass
class SaveGameResult:
    """Result of saving a game."""

    success: bool
    id: str | None = None


class SaveGameUseCase:
    """Map a save-game payload to allowed columns and store it."""

    def __init__(self, game_store: GameStorePort):
        self._game_store = game_store

    async def execute(self, payload: Dict[str, Any]) -> SaveGameResult:
        fields = build_game_fields(payload)
        loop = asyncio.get_event_loop()
        record_id = await loop.run_in_executor(
            _executor, partial(self._game_store.save_game, fields)
        )
        return SaveGameResult(success=True, id=record_id)
