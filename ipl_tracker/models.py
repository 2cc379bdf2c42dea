from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Literal


# -----------------------------
# Match result semantics
# -----------------------------
FormSymbol = Literal["W", "L", "T"]

# Reported as the winner of a match with equal scores
TIE_MARKER = "Tie"

DEFAULT_COLOR = "#000000"

_COUNTERS = (
    "points",
    "matches_played",
    "wins",
    "losses",
    "no_results",
    "runs_scored",
    "runs_conceded",
)


# -----------------------------
# Canonical Team
# -----------------------------
@dataclass
class Team:
    name: str
    short_name: str = ""
    captain: str = ""
    home_ground: str = ""
    color: str = DEFAULT_COLOR

    points: int = 0
    net_run_rate: float = 0.0

    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    no_results: int = 0

    runs_scored: int = 0
    runs_conceded: int = 0

    # Most recent outcome first
    form: List[FormSymbol] = field(default_factory=list)

    def __post_init__(self) -> None:
        for attr in _COUNTERS:
            if getattr(self, attr) < 0:
                raise ValueError(f"{attr} cannot be negative (team={self.name})")
        if self.matches_played != self.wins + self.losses + self.no_results:
            raise ValueError(
                f"matches_played must equal wins + losses + no_results (team={self.name})"
            )

    def snapshot(self) -> "Team":
        """Detached copy safe to hand out to readers."""
        return replace(self, form=list(self.form))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "shortName": self.short_name,
            "captain": self.captain,
            "homeGround": self.home_ground,
            "color": self.color,
            "points": self.points,
            "netRunRate": self.net_run_rate,
            "matchesPlayed": self.matches_played,
            "wins": self.wins,
            "losses": self.losses,
            "noResults": self.no_results,
            "runsScored": self.runs_scored,
            "runsConceded": self.runs_conceded,
            "form": list(self.form),
        }


# -----------------------------
# Canonical MatchRecord
# -----------------------------
@dataclass(frozen=True)
class MatchRecord:
    team1: str
    team2: str
    team1_score: int
    team2_score: int

    # Team name, or TIE_MARKER when tie is set
    winner: str
    date: datetime
    tie: bool = False

    @property
    def result(self) -> Dict[str, Any]:
        if self.tie:
            return {"tie": True}
        return {"winner": self.winner}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team1": self.team1,
            "team2": self.team2,
            "team1Score": self.team1_score,
            "team2Score": self.team2_score,
            "winner": self.winner,
            "result": self.result,
            "date": self.date.isoformat(),
        }
