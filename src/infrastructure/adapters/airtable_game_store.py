"""Adapter wrapping the Airtable client as the game store."""

from typing import Any, Dict, List

from teamtracker.airtable_client import AirtableClient
from teamtracker.config import ServiceConfig

from ...application.ports.game_store import GameStorePort


class AirtableGameStore(GameStorePort):
    """Game store backed by an Airtable table."""

    def __init__(self, config: ServiceConfig):
        """Initialize with service configuration.

        The client is only built on first use so that endpoints which never
        touch Airtable work without Airtable credentials.

        Args:
            config: Service configuration holding Airtable credentials
        """
        self._config = config
        self._client: AirtableClient | None = None

    def _get_client(self) -> AirtableClient:
        if self._client is None:
            self._config.require_airtable()
            self._client = AirtableClient(
                token=self._config.airtable_token or "",
                base_id=self._config.airtable_base_id or "",
                table=self._config.airtable_table,
                timeout_s=self._config.request_timeout_s,
            )
        return self._client

    def fetch_games(
        self,
        season: str | None = None,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        return self._get_client().list_records(season=season, limit=limit)

    def save_game(self, fields: Dict[str, Any]) -> str:
        return self._get_client().create_record(fields, typecast=True)

    def close(self) -> None:
        """Release the HTTP session, if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
