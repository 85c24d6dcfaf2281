from teamtracker.normalize import GameRecord
from teamtracker.render import render_text
from teamtracker.trends import compute_season_summary


def test_render_text_lists_every_metric() -> None:
    games = [
        GameRecord(date="2025-01-01", goals_for=3, goals_against=2),
        GameRecord(date="2025-01-08", goals_for=4, goals_against=1),
        GameRecord(date="2025-01-15", goals_for=2, goals_against=3),
    ]
    text = render_text(compute_season_summary(games).to_dict())
    lines = text.splitlines()

    assert lines[0] == "SEASON TREND"
    assert "Games: 3" in lines[1]
    ga_line = next(line for line in lines if line.startswith("goalsAgainst"))
    assert ga_line.split() == ["goalsAgainst", "2.00", "3.00", "+1.00"]
    share_line = next(line for line in lines if line.startswith("shotShare"))
    assert share_line.split() == ["shotShare", "n/a", "n/a", "n/a"]
