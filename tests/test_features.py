from teamtracker.features import compute_goalie_line, compute_season_totals, summarize_game
from teamtracker.normalize import GameRecord


def test_season_totals_count_results_only_when_both_scores_known() -> None:
    games = [
        GameRecord(goals_for=3, goals_against=1, shots_for=25, shots_against=18),
        GameRecord(goals_for=2, goals_against=2, shots_for=20),
        GameRecord(goals_for=0, goals_against=4, shots_against=30),
        GameRecord(goals_for=5),
    ]
    totals = compute_season_totals(games)
    assert totals.games_count == 4
    assert totals.decided_count == 3
    assert (totals.wins, totals.losses, totals.ties) == (1, 1, 1)
    assert totals.goals_for == 5
    assert totals.goals_against == 7
    assert totals.shots_for == 45
    assert totals.shots_against == 48

    d = totals.to_dict()
    assert d["w"] == 1 and d["l"] == 1 and d["t"] == 1
    assert d["gamesCount"] == 4


def test_goalie_line() -> None:
    line = compute_goalie_line(GameRecord(shots_against=25, goals_against=2))
    assert line["saves"] == 23
    assert line["svPct"] == 23 / 25


def test_goalie_line_without_shots_has_no_save_percentage() -> None:
    line = compute_goalie_line(GameRecord(shots_against=0, goals_against=0))
    assert line["saves"] == 0
    assert line["svPct"] is None

    line = compute_goalie_line(GameRecord(goals_against=3))
    assert line["saves"] is None
    assert line["svPct"] is None


def test_goalie_line_saves_never_negative() -> None:
    line = compute_goalie_line(GameRecord(shots_against=2, goals_against=3))
    assert line["saves"] == 0


def test_summarize_game_keeps_raw_row() -> None:
    raw = {"date": "2025-01-08", "opponent": "Hawks", "usGoals": 4, "themShots": "19", "notes": "PP 1/3"}
    line = summarize_game(raw)
    assert line["opp"] == "Hawks"
    assert line["gf"] == 4
    assert line["sa"] == 19
    assert line["ga"] is None
    assert line["raw"] is raw
