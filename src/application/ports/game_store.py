"""Port (interface) for the game table store."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class GameStorePort(ABC):
    """Port for reading and writing saved games."""

    @abstractmethod
    def fetch_games(
        self,
        season: str | None = None,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        """Fetch raw game rows.

        Args:
            season: Optional season filter (e.g. "2025-26")
            limit: Optional maximum number of rows

        Returns:
            Raw rows in arbitrary order
        """
        ...

    @abstractmethod
    def save_game(self, fields: Dict[str, Any]) -> str:
        """Create one game row.

        Args:
            fields: Column values, already filtered to the allowed columns

        Returns:
            Id of the created row
        """
        ...
