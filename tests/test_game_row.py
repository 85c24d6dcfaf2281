import json

import pytest

from teamtracker.errors import InvalidPayloadError
from teamtracker.game_row import build_game_fields


def test_simple_game_keeps_only_allowed_columns() -> None:
    fields = build_game_fields(
        {"game": {"Date": "2025-01-08", "Opponent": "Hawks", "GA": 0, "GA_BA": 1, "Notes": "x", "Season": "2025-26"}}
    )
    assert fields == {"Date": "2025-01-08", "Opponent": "Hawks", "GA": 0, "GA_BA": 1}


def test_season_payload_maps_game_row_keys() -> None:
    payload = {
        "gameId": "g-1",
        "meta": {"date": "2025-01-15", "opponent": "Wolves", "level": "U11"},
        "aggregates": {
            "gameRow": {
                "date": "ignored",
                "teamScore": 71,
                "goalieScore": 64,
                "SF": 22,
                "SA": 19,
                "GF": 3,
                "GA": 2,
                "smothers": 4,
                "GA_off_BA": 1,
                "GA_off_DZ": 0,
                "GA_other": 1,
                "faceoffs": 12,
            }
        },
        "events": [{"t": 10, "type": "shot"}],
    }
    fields = build_game_fields(payload)
    assert fields["Date"] == "2025-01-15"
    assert fields["Opponent"] == "Wolves"
    assert fields["Level"] == "U11"
    assert fields["TeamScore"] == 71
    assert fields["Smothers"] == 4
    assert fields["GA_BA"] == 1
    assert fields["GA_DZ"] == 0
    assert fields["GA_Other"] == 1
    assert "GA_BR" not in fields
    assert "faceoffs" not in fields
    assert json.loads(fields["JSONDump"]) == payload


def test_season_payload_falls_back_to_row_date() -> None:
    fields = build_game_fields({"aggregates": {"gameRow": {"date": "2025-02-01", "GF": 1}}})
    assert fields["Date"] == "2025-02-01"
    assert fields["GF"] == 1


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"game": {}},
        {"aggregates": {}},
        {"game": {"Notes": "only unknown columns"}},
        ["not", "a", "dict"],
        {"meta": "x", "aggregates": {"gameRow": {"GA": 1}}},
        {"meta": ["x"], "aggregates": {"gameRow": {"GA": 1}}},
    ],
)
def test_invalid_payloads_are_rejected(payload) -> None:
    with pytest.raises(InvalidPayloadError):
        build_game_fields(payload)
