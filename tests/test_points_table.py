import pytest

from ipl_tracker.models import TIE_MARKER, Team
from ipl_tracker.nrr_math import derive_short_name, net_run_rate
from ipl_tracker.points_table import TeamRegistry, apply_result, build_team, compute_sorted_table, push_form


def test_net_run_rate_rounds_to_two_places():
    assert net_run_rate(500, 400, 3) == 33.33
    assert net_run_rate(400, 500, 3) == -33.33


def test_net_run_rate_halves_round_away_from_zero():
    assert net_run_rate(1, 0, 8) == 0.13
    assert net_run_rate(0, 1, 8) == -0.13
    assert net_run_rate(5, 0, 8) == 0.63


def test_net_run_rate_zero_matches():
    assert net_run_rate(0, 0, 0) == 0.0
    assert net_run_rate(150, 0, 0) == 0.0


def test_derive_short_name():
    assert derive_short_name("Mumbai Indians") == "MI"
    assert derive_short_name("royal challengers  bangalore") == "RCB"


def test_build_team_defaults():
    team = build_team({"name": "Chennai Super Kings"})
    assert team.short_name == "CSK"
    assert team.captain == ""
    assert team.home_ground == ""
    assert team.color == "#000000"
    assert team.points == 0
    assert team.matches_played == 0
    assert team.net_run_rate == 0.0
    assert team.form == []


def test_build_team_derives_nrr_from_supplied_runs():
    team = build_team({
        "name": "Gujarat Titans",
        "matches_played": 2,
        "wins": 1,
        "losses": 1,
        "points": 2,
        "runs_scored": 340,
        "runs_conceded": 320,
    })
    assert team.net_run_rate == 10.0


def test_build_team_caps_supplied_form():
    team = build_team({"name": "X", "form": ["W", "W", "L", "T", "W", "L", "L"]})
    assert team.form == ["W", "W", "L", "T", "W"]


def test_team_rejects_inconsistent_tally():
    with pytest.raises(ValueError):
        Team(name="Broken", matches_played=3, wins=1)


def test_team_rejects_negative_counters():
    with pytest.raises(ValueError):
        Team(name="Broken", runs_scored=-1)


def test_build_team_requires_name():
    with pytest.raises(ValueError):
        build_team({"name": "   "})


class TestRegistry:
    def test_insertion_order(self):
        reg = TeamRegistry()
        for name in ("C", "A", "B"):
            reg.register({"name": name})
        assert [t.name for t in reg.all()] == ["C", "A", "B"]
        assert len(reg) == 3

    def test_find_is_case_insensitive(self):
        reg = TeamRegistry()
        team = reg.register({"name": "Delhi Capitals"})
        assert reg.find("delhi capitals") is team
        assert reg.find("DELHI CAPITALS") is team
        assert reg.find("Delhi") is None

    def test_duplicates_are_stored_and_first_wins_lookup(self):
        reg = TeamRegistry()
        first = reg.register({"name": "Alpha", "captain": "one"})
        reg.register({"name": "ALPHA", "captain": "two"})
        assert len(reg) == 2
        assert reg.find("alpha") is first

    def test_standings_points_then_nrr(self):
        reg = TeamRegistry()
        reg.register({"name": "Low", "matches_played": 1, "losses": 1, "runs_scored": 100, "runs_conceded": 150})
        reg.register({"name": "TopNrr", "matches_played": 1, "wins": 1, "points": 2, "runs_scored": 200, "runs_conceded": 100})
        reg.register({"name": "Top", "matches_played": 1, "wins": 1, "points": 2, "runs_scored": 160, "runs_conceded": 150})
        assert [t.name for t in reg.standings()] == ["TopNrr", "Top", "Low"]

    def test_standings_exact_ties_keep_insertion_order(self):
        reg = TeamRegistry()
        for name in ("A", "B", "C"):
            reg.register({"name": name})
        first = [t.name for t in reg.standings()]
        assert first == ["A", "B", "C"]
        assert [t.name for t in reg.standings()] == first

    def test_rank(self):
        reg = TeamRegistry()
        reg.register({"name": "A"})
        reg.register({"name": "B", "matches_played": 1, "wins": 1, "points": 2, "runs_scored": 10})
        assert reg.rank("b") == 1
        assert reg.rank("A") == 2
        assert reg.rank("Ghost") == 0


def test_compute_sorted_table_positions():
    rows = compute_sorted_table([Team(name="A"), Team(name="B")])
    assert [(r["pos"], r["name"]) for r in rows] == [(1, "A"), (2, "B")]
    assert "netRunRate" in rows[0]


def test_push_form_caps_length():
    team = Team(name="A")
    for symbol in ("W", "L", "W", "T", "L", "W"):
        push_form(team, symbol)
    assert team.form == ["W", "L", "T", "W", "L"]


def test_apply_result_win_and_tie():
    a, b = Team(name="A"), Team(name="B")
    assert apply_result(a, b, 120, 130) == "B"
    assert (a.losses, b.wins, b.points) == (1, 1, 2)

    assert apply_result(a, b, 140, 140) == TIE_MARKER
    assert (a.no_results, b.no_results) == (1, 1)
    assert (a.points, b.points) == (1, 3)
    assert a.form == ["T", "L"]
    assert a.net_run_rate == round((260 - 270) / 2, 2)
