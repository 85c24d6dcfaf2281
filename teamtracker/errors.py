"""Exception taxonomy shared by the tracker core, adapters and API.

    TrackerError
    ├── InvalidPayloadError    caller sent a body we cannot use (HTTP 400)
    ├── InsufficientDataError  too few dated games for a trend (HTTP 200 + message)
    ├── ConfigurationError     missing service credentials (HTTP 500)
    └── UpstreamError          Airtable or the language model failed (HTTP 500)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


MIN_TREND_GAMES = 3


class TrackerError(Exception):
    """Base class for every error raised by the tracker."""


class InvalidPayloadError(TrackerError, ValueError):
    pass


class InsufficientDataError(TrackerError, ValueError):
    def __init__(self, game_count: int, required: int = MIN_TREND_GAMES):
        self.game_count = game_count
        self.required = required
        super().__init__(
            f"Not enough games saved yet ({game_count}). "
            f"Save at least {required} games for a season trend."
        )


class ConfigurationError(TrackerError, RuntimeError):
    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__("Server configuration error: missing " + ", ".join(self.missing))


class UpstreamError(TrackerError, RuntimeError):
    def __init__(
        self,
        service: str,
        message: str,
        status_code: Optional[int] = None,
        detail: Any = None,
    ):
        self.service = service
        self.status_code = status_code
        self.detail = detail
        prefix = f"{service} request failed"
        if status_code is not None:
            prefix += f" ({status_code})"
        super().__init__(f"{prefix}: {message}")
