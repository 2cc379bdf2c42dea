# ipl_tracker/tournament.py
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ipl_tracker.config import FORM_LENGTH, HISTORY_DEFAULT_LIMIT, PLAYOFF_SPOTS
from ipl_tracker.ledger import Fixture, FixtureQueue, MatchLedger
from ipl_tracker.models import TIE_MARKER, MatchRecord, Team
from ipl_tracker.points_table import TeamRegistry, apply_result

logger = logging.getLogger(__name__)


class TournamentError(Exception):
    """Base class for errors raised by the tournament engine."""
    pass


class TeamNotFound(TournamentError, LookupError):
    """Raised when a match names a team that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Team not found: {name}")
        self.name = name


class TeamAlreadyExists(TournamentError):
    """Raised when registering a name that is already taken (case-insensitive)."""

    def __init__(self, name: str):
        super().__init__(f"Team already exists: {name}")
        self.name = name


class InvalidTeam(TournamentError, ValueError):
    pass


class InvalidMatch(TournamentError, ValueError):
    pass


class TournamentEngine:
    """
    Owns the three tournament collections:
      - teams: TeamRegistry (insertion order, case-insensitive lookup)
      - match history: MatchLedger (most recent first)
      - upcoming matches: FixtureQueue (FIFO)

    Every public operation runs under one lock, and reads hand out copies,
    so callers never see a team halfway through record_match().
    """

    def __init__(
        self,
        *,
        playoff_spots: int = PLAYOFF_SPOTS,
        form_length: int = FORM_LENGTH,
    ) -> None:
        self.playoff_spots = playoff_spots
        self.form_length = form_length
        self._lock = threading.RLock()
        self._teams = TeamRegistry(self.form_length)
        self._history = MatchLedger()
        self._upcoming = FixtureQueue()

    # -----------------------------
    # Teams
    # -----------------------------
    def add_team(self, team_data: Mapping[str, Any]) -> Team:
        name = str(team_data.get("name") or "").strip()
        if not name:
            raise InvalidTeam("Team name is required")

        with self._lock:
            if self._teams.find(name) is not None:
                raise TeamAlreadyExists(name)
            try:
                team = self._teams.register({**team_data, "name": name})
            except ValueError as e:
                raise InvalidTeam(str(e)) from e
            logger.info(f"Registered team {team.name} ({team.short_name})")
            return team.snapshot()

    def seed(self, teams: Iterable[Mapping[str, Any]]) -> int:
        count = 0
        with self._lock:
            for team_data in teams:
                self.add_team(team_data)
                count += 1
        logger.info(f"Seeded {count} teams")
        return count

    def get_team(self, name: str) -> Optional[Team]:
        with self._lock:
            team = self._teams.find(name)
            return team.snapshot() if team is not None else None

    def rank(self, name: str) -> int:
        with self._lock:
            return self._teams.rank(name)

    def teams(self) -> List[Team]:
        with self._lock:
            return [t.snapshot() for t in self._teams.all()]

    def standings(self) -> List[Team]:
        with self._lock:
            return [t.snapshot() for t in self._teams.standings()]

    def playoff_teams(self) -> List[Team]:
        return self.standings()[: self.playoff_spots]

    def team_report(self, name: str) -> Optional[Tuple[Team, int]]:
        """Team copy and its standings position, read in one locked snapshot."""
        with self._lock:
            team = self._teams.find(name)
            if team is None:
                return None
            return team.snapshot(), self._teams.rank(team.name)

    # -----------------------------
    # Matches
    # -----------------------------
    def record_match(self, team1: str, team2: str, score1: int, score2: int) -> MatchRecord:
        """
        Apply a completed match to both teams and push it onto the history.

        Both teams are resolved and the input checked before anything is mutated,
        so a failed call leaves the tournament unchanged.
        """
        if score1 < 0 or score2 < 0:
            raise InvalidMatch("Scores cannot be negative")

        with self._lock:
            t1 = self._teams.find(team1)
            t2 = self._teams.find(team2)
            if t1 is None or t2 is None:
                missing = team1 if t1 is None else team2
                logger.debug(f"record_match rejected: unknown team {missing!r}")
                raise TeamNotFound(missing)
            if t1 is t2:
                raise InvalidMatch("team1 and team2 must be different")

            winner = apply_result(t1, t2, int(score1), int(score2), form_length=self.form_length)

            match = MatchRecord(
                team1=t1.name,
                team2=t2.name,
                team1_score=int(score1),
                team2_score=int(score2),
                winner=winner,
                date=datetime.now(timezone.utc),
                tie=winner == TIE_MARKER,
            )
            self._history.record(match)

        logger.info(f"Recorded {match.team1} {match.team1_score} vs {match.team2} {match.team2_score}: {match.winner}")
        return match

    def match_history(self, limit: int = HISTORY_DEFAULT_LIMIT) -> List[MatchRecord]:
        with self._lock:
            return self._history.recent(limit)

    # -----------------------------
    # Fixtures
    # -----------------------------
    def add_upcoming_match(self, fixture: Mapping[str, Any]) -> Fixture:
        entry = dict(fixture)
        with self._lock:
            self._upcoming.enqueue(entry)
        return dict(entry)

    def upcoming_matches(self) -> List[Fixture]:
        with self._lock:
            return [dict(f) for f in self._upcoming.all()]

    def next_fixture(self) -> Optional[Fixture]:
        with self._lock:
            return self._upcoming.dequeue()

    # -----------------------------
    # Tournament
    # -----------------------------
    def tournament_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "totalTeams": len(self._teams),
                "matchesPlayed": self._history.size(),
                "upcomingMatches": self._upcoming.size(),
                "playoffTeams": [t.name for t in self.playoff_teams()],
            }

    def summary(self) -> Dict[str, Any]:
        """Stats, standings and playoff cut taken from the same state."""
        with self._lock:
            standings = self.standings()
            return {
                "stats": self.tournament_stats(),
                "standings": standings,
                "playoff_teams": standings[: self.playoff_spots],
            }

    def reset(self) -> None:
        with self._lock:
            self._teams = TeamRegistry(self.form_length)
            self._history = MatchLedger()
            self._upcoming = FixtureQueue()
        logger.warning("Tournament reset: teams, match history and fixtures cleared")
