from typing import Any, Dict, List

import pytest
import requests

from teamtracker.airtable_client import AirtableClient, paginate_records, season_formula
from teamtracker.errors import UpstreamError


class _FakeResponse:
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self._body = body
        self.text = str(body)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return self._body


class _FakeSession:
    def __init__(self, responses: List[_FakeResponse]):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def _client(responses: List[_FakeResponse]) -> AirtableClient:
    client = AirtableClient(token="pat", base_id="app123", table="Game Log")
    client.session = _FakeSession(responses)  # type: ignore[assignment]
    return client


def test_season_formula_escapes_quotes() -> None:
    assert season_formula("2025-26") == "{Season}='2025-26'"
    assert season_formula("Bob's") == "{Season}='Bob\\'s'"


def test_list_records_follows_offset_pages() -> None:
    client = _client(
        [
            _FakeResponse(200, {"records": [{"fields": {"GF": 1}}, {"fields": {"GF": 2}}], "offset": "itr2"}),
            _FakeResponse(200, {"records": [{"id": "r3"}]}),
        ]
    )
    rows = client.list_records(season="2025-26")
    assert rows == [{"GF": 1}, {"GF": 2}, {}]

    calls = client.session.calls
    assert len(calls) == 2
    assert calls[0]["url"] == "https://api.airtable.com/v0/app123/Game%20Log"
    assert calls[0]["params"]["filterByFormula"] == "{Season}='2025-26'"
    assert calls[0]["params"]["pageSize"] == 100
    assert "offset" not in calls[0]["params"]
    assert calls[1]["params"]["offset"] == "itr2"


def test_list_records_stops_at_limit() -> None:
    client = _client(
        [_FakeResponse(200, {"records": [{"fields": {"GF": i}} for i in range(5)], "offset": "more"})]
    )
    rows = client.list_records(limit=3)
    assert len(rows) == 3
    assert len(client.session.calls) == 1
    assert "filterByFormula" not in client.session.calls[0]["params"]


def test_create_record_sends_typecast_and_returns_id() -> None:
    client = _client([_FakeResponse(200, {"id": "recABC", "fields": {}})])
    assert client.create_record({"GF": 2}) == "recABC"
    call = client.session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"fields": {"GF": 2}, "typecast": True}


def test_http_error_becomes_upstream_error() -> None:
    client = _client([_FakeResponse(422, {"error": {"type": "INVALID_VALUE_FOR_COLUMN"}})])
    with pytest.raises(UpstreamError) as excinfo:
        client.create_record({"GF": "x"})
    assert excinfo.value.status_code == 422
    assert excinfo.value.detail == {"type": "INVALID_VALUE_FOR_COLUMN"}


def test_network_error_becomes_upstream_error() -> None:
    client = AirtableClient(token="pat", base_id="app123")

    class _Broken:
        def request(self, *args: Any, **kwargs: Any) -> Any:
            raise requests.ConnectionError("offline")

    client.session = _Broken()  # type: ignore[assignment]
    with pytest.raises(UpstreamError):
        client.list_records()


def test_paginate_records_single_page() -> None:
    pages = iter([{"records": [{"id": "a"}, {}, {"id": "b"}]}])
    records = list(paginate_records(lambda params: next(pages), {"pageSize": 10}))
    assert records == [{"id": "a"}, {"id": "b"}]


def test_auth_header_is_bearer_token() -> None:
    client = AirtableClient(token="pat", base_id="app123")
    assert client.session.headers["Authorization"] == "Bearer pat"


def test_close_releases_session() -> None:
    client = _client([])
    client.close()
    assert client.session.closed is True
