# ipl_tracker/points_table.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ipl_tracker.config import FORM_LENGTH
from ipl_tracker.models import DEFAULT_COLOR, TIE_MARKER, FormSymbol, Team
from ipl_tracker.nrr_math import derive_short_name, net_run_rate

WIN_POINTS = 2
TIE_POINTS = 1


def _key(name: str) -> str:
    return name.strip().lower()


def build_team(team_data: Mapping[str, Any], form_length: int = FORM_LENGTH) -> Team:
    """
    Build a Team from caller data, filling defaults for anything omitted:
    zero counters, empty text, DEFAULT_COLOR, and a short name derived from the name.
    NRR is always derived from runs and matches, never taken from the caller.
    """
    name = str(team_data.get("name") or "").strip()
    if not name:
        raise ValueError("Team name is required")

    matches_played = int(team_data.get("matches_played") or 0)
    runs_scored = int(team_data.get("runs_scored") or 0)
    runs_conceded = int(team_data.get("runs_conceded") or 0)

    return Team(
        name=name,
        short_name=team_data.get("short_name") or derive_short_name(name),
        captain=team_data.get("captain") or "",
        home_ground=team_data.get("home_ground") or "",
        color=team_data.get("color") or DEFAULT_COLOR,
        points=int(team_data.get("points") or 0),
        net_run_rate=net_run_rate(runs_scored, runs_conceded, matches_played),
        matches_played=matches_played,
        wins=int(team_data.get("wins") or 0),
        losses=int(team_data.get("losses") or 0),
        no_results=int(team_data.get("no_results") or 0),
        runs_scored=runs_scored,
        runs_conceded=runs_conceded,
        form=list(team_data.get("form") or [])[:form_length],
    )


class TeamRegistry:
    """
    Insertion-ordered team storage.

    Lookup is case-insensitive through a name -> index map kept beside the list.
    register() does not reject duplicate names; the first registration wins lookups.
    """

    def __init__(self, form_length: int = FORM_LENGTH) -> None:
        self.form_length = form_length
        self._teams: List[Team] = []
        self._index: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._teams)

    def register(self, team_data: Mapping[str, Any]) -> Team:
        team = build_team(team_data, self.form_length)
        self._index.setdefault(_key(team.name), len(self._teams))
        self._teams.append(team)
        return team

    def find(self, name: str) -> Optional[Team]:
        idx = self._index.get(_key(name))
        if idx is None:
            return None
        return self._teams[idx]

    def all(self) -> List[Team]:
        return list(self._teams)

    def standings(self) -> List[Team]:
        """
        Sorted by:
        1) Points (desc)
        2) NRR (desc)
        Exact ties keep insertion order (sorted() is stable, also with reverse=True).
        """
        return sorted(self._teams, key=lambda t: (t.points, t.net_run_rate), reverse=True)

    def rank(self, name: str) -> int:
        key = _key(name)
        for pos, team in enumerate(self.standings(), start=1):
            if _key(team.name) == key:
                return pos
        return 0


def compute_sorted_table(teams: List[Team]) -> List[dict]:
    """Standings rows with their 1-based position, ready for JSON."""
    out: List[dict] = []
    for idx, team in enumerate(teams, start=1):
        row = team.to_dict()
        row["pos"] = idx
        out.append(row)
    return out


def push_form(team: Team, symbol: FormSymbol, form_length: int = FORM_LENGTH) -> None:
    """Prepend the latest outcome and drop the oldest beyond form_length."""
    team.form.insert(0, symbol)
    del team.form[form_length:]


def apply_result(
    team_a: Team,
    team_b: Team,
    score_a: int,
    score_b: int,
    *,
    form_length: int = FORM_LENGTH,
) -> str:
    """
    Updates played/won/lost/nr/points, runs, NRR and form for both teams.
    Returns the winner's name, or TIE_MARKER.

    Rules:
    - higher score wins: WIN_POINTS to the winner, nothing to the loser
    - equal scores: TIE_POINTS each, counted as no_results
    """
    team_a.matches_played += 1
    team_b.matches_played += 1

    team_a.runs_scored += score_a
    team_a.runs_conceded += score_b
    team_b.runs_scored += score_b
    team_b.runs_conceded += score_a

    if score_a > score_b:
        team_a.wins += 1
        team_a.points += WIN_POINTS
        team_b.losses += 1
        push_form(team_a, "W", form_length)
        push_form(team_b, "L", form_length)
        winner = team_a.name
    elif score_b > score_a:
        team_b.wins += 1
        team_b.points += WIN_POINTS
        team_a.losses += 1
        push_form(team_b, "W", form_length)
        push_form(team_a, "L", form_length)
        winner = team_b.name
    else:
        team_a.no_results += 1
        team_b.no_results += 1
        team_a.points += TIE_POINTS
        team_b.points += TIE_POINTS
        push_form(team_a, "T", form_length)
        push_form(team_b, "T", form_length)
        winner = TIE_MARKER

    team_a.net_run_rate = net_run_rate(team_a.runs_scored, team_a.runs_conceded, team_a.matches_played)
    team_b.net_run_rate = net_run_rate(team_b.runs_scored, team_b.runs_conceded, team_b.matches_played)
    return winner
