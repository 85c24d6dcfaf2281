from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ConfigurationError


AIRTABLE_API_URL = "https://api.airtable.com/v0"

DEFAULT_TABLE = "Games"
DEFAULT_PAGE_SIZE = 100
DEFAULT_MODEL = "gpt-5.2"
DEFAULT_TIMEOUT_S = 30

AIRTABLE_TOKEN_VARS: List[str] = ["AIRTABLE_PAT", "AIRTABLE_TOKEN", "AIRTABLE_API_KEY"]
AIRTABLE_TABLE_VARS: List[str] = ["AIRTABLE_TABLE_ID", "AIRTABLE_TABLE", "AIRTABLE_GAMES_TABLE"]


def _first_env(names: Sequence[str]) -> Optional[str]:
    for name in names:
        val = os.environ.get(name)
        if val:
            return val
    return None


@dataclass(frozen=True)
class ServiceConfig:
    airtable_token: Optional[str] = None
    airtable_base_id: Optional[str] = None
    airtable_table: str = DEFAULT_TABLE
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    request_timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def airtable_configured(self) -> bool:
        return bool(self.airtable_token and self.airtable_base_id)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    def require_airtable(self) -> None:
        missing = []
        if not self.airtable_token:
            missing.append(" or ".join(AIRTABLE_TOKEN_VARS))
        if not self.airtable_base_id:
            missing.append("AIRTABLE_BASE_ID")
        if missing:
            raise ConfigurationError(missing)

    def require_openai(self) -> None:
        if not self.openai_api_key:
            raise ConfigurationError(["OPENAI_API_KEY"])


def config_from_env() -> ServiceConfig:
    try:
        timeout = float(os.environ.get("TRACKER_TIMEOUT_S", DEFAULT_TIMEOUT_S))
    except ValueError:
        timeout = float(DEFAULT_TIMEOUT_S)
    return ServiceConfig(
        airtable_token=_first_env(AIRTABLE_TOKEN_VARS),
        airtable_base_id=os.environ.get("AIRTABLE_BASE_ID") or None,
        airtable_table=_first_env(AIRTABLE_TABLE_VARS) or DEFAULT_TABLE,
        openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
        openai_model=os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL,
        request_timeout_s=timeout,
    )
