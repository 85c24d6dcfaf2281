from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.parse import quote

import requests

from .config import AIRTABLE_API_URL, DEFAULT_PAGE_SIZE, DEFAULT_TABLE
from .errors import UpstreamError

logger = logging.getLogger(__name__)


def season_formula(season: str) -> str:
    escaped = season.replace("\\", "\\\\").replace("'", "\\'")
    return f"{{Season}}='{escaped}'"


@dataclass
class AirtableClient:
    token: str
    base_id: str
    table: str = DEFAULT_TABLE
    timeout_s: float = 30

    def __post_init__(self) -> None:
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "content-type": "application/json",
                "accept": "application/json",
            }
        )

    @property
    def table_url(self) -> str:
        return f"{AIRTABLE_API_URL}/{self.base_id}/{quote(self.table, safe='')}"

    def _request(self, method: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = self.session.request(method, self.table_url, timeout=self.timeout_s, **kwargs)
        except requests.RequestException as exc:
            raise UpstreamError("Airtable", str(exc)) from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if not resp.ok or (isinstance(body, dict) and body.get("error")):
            detail = body.get("error") if isinstance(body, dict) else None
            raise UpstreamError(
                "Airtable",
                f"{method} {self.table}",
                status_code=resp.status_code,
                detail=detail or resp.text,
            )
        if not isinstance(body, dict):
            raise UpstreamError("Airtable", "Unexpected response shape", status_code=resp.status_code)
        return body

    def close(self) -> None:
        self.session.close()

    def list_page(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("GET", params=params)

    def list_records(
        self,
        season: Optional[str] = None,
        limit: Optional[int] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[Dict[str, Any]]:
        """Return the ``fields`` of every record, optionally limited to one season."""
        params: Dict[str, Any] = {"pageSize": min(max(page_size, 1), DEFAULT_PAGE_SIZE)}
        if season:
            params["filterByFormula"] = season_formula(season)

        out: List[Dict[str, Any]] = []
        for record in paginate_records(self.list_page, params):
            out.append(record.get("fields") or {})
            if limit is not None and len(out) >= limit:
                break
        logger.info("fetched %d Airtable records (season=%s)", len(out), season)
        return out

    def create_record(self, fields: Dict[str, Any], typecast: bool = True) -> str:
        body = self._request("POST", json={"fields": fields, "typecast": typecast})
        record_id = body.get("id")
        if not record_id:
            records = body.get("records") or []
            record_id = records[0].get("id") if records else None
        if not record_id:
            raise UpstreamError("Airtable", "Create returned no record id")
        logger.info("created Airtable record %s", record_id)
        return str(record_id)


def paginate_records(
    fetch_page_fn: Callable[[Dict[str, Any]], Dict[str, Any]],
    params: Dict[str, Any],
) -> Iterable[Dict[str, Any]]:
    """
    Yield records across Airtable list pages.

    fetch_page_fn receives the query params and returns the response body;
    pages chain through the ``offset`` token until the server stops sending one.
    """
    offset: Optional[str] = None
    while True:
        page_params = dict(params)
        if offset:
            page_params["offset"] = offset

        data = fetch_page_fn(page_params)
        for record in data.get("records") or []:
            if record:
                yield record

        offset = data.get("offset")
        if not offset:
            break
