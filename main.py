# main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from ipl_tracker.config import (
    validate_config,
    CORS_ORIGINS,
    HISTORY_DEFAULT_LIMIT,
    HOST,
    LOG_LEVEL,
    PORT,
    SEED_TEAMS,
    TOURNAMENT_NAME,
)
from ipl_tracker.points_table import compute_sorted_table
from ipl_tracker.seed import create_ipl_roster
from ipl_tracker.tournament import (
    InvalidMatch,
    InvalidTeam,
    TeamAlreadyExists,
    TeamNotFound,
    TournamentEngine,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# -----------------------
# Engine lifecycle: construct -> seed -> serve -> (optional) reset
# -----------------------
def get_engine(request: Request) -> TournamentEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Tournament engine not initialized")
    return engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    validate_config()
    engine = TournamentEngine()
    if SEED_TEAMS:
        engine.seed(create_ipl_roster())
    app.state.engine = engine
    logger.info(f"{TOURNAMENT_NAME} tracker ready with {engine.tournament_stats()['totalTeams']} teams")
    yield
    app.state.engine = None


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
    )


def _ok(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        out["message"] = message
    return out


# -----------------------
# Request models
# -----------------------
FormSymbolIn = Literal["W", "L", "T"]


class TeamIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, description="Unique team name, e.g. Mumbai Indians")
    short_name: Optional[str] = Field(None, alias="shortName", description="Derived from the name if omitted")
    captain: Optional[str] = None
    home_ground: Optional[str] = Field(None, alias="homeGround")
    color: Optional[str] = Field(None, description="Display colour, e.g. #004B9B")

    points: Optional[int] = Field(None, ge=0)
    matches_played: Optional[int] = Field(None, ge=0, alias="matchesPlayed")
    wins: Optional[int] = Field(None, ge=0)
    losses: Optional[int] = Field(None, ge=0)
    no_results: Optional[int] = Field(None, ge=0, alias="noResults")
    runs_scored: Optional[int] = Field(None, ge=0, alias="runsScored")
    runs_conceded: Optional[int] = Field(None, ge=0, alias="runsConceded")
    form: Optional[List[FormSymbolIn]] = Field(None, description="Most recent result first")


class MatchIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team1: Optional[str] = None
    team2: Optional[str] = None
    team1_score: Optional[int] = Field(None, ge=0, alias="team1Score")
    team2_score: Optional[int] = Field(None, ge=0, alias="team2Score")


class FixtureIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    team1: str
    team2: str
    date: Optional[str] = Field(None, description="Scheduled start, e.g. 2026-04-12T19:30:00+05:30")
    venue: Optional[str] = None


# -----------------------
# App
# -----------------------
def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{TOURNAMENT_NAME} Tournament Tracker API",
        version="0.1.0",
        description="Team registry, match results, standings with NRR tie-break, and upcoming fixtures",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    @app.get("/api/health")
    def health_check(engine: TournamentEngine = Depends(get_engine)):
        return {
            "success": True,
            "status": "ok",
            "message": "API running",
            "time": datetime.now(timezone.utc).isoformat(),
            "tournament": engine.tournament_stats(),
            "dataStructures": {
                "teams": "TeamRegistry (insertion order, case-insensitive index)",
                "matchHistory": "MatchLedger (most recent first)",
                "upcomingMatches": "FixtureQueue (first in, first out)",
            },
        }

    # -----------------------
    # Standings + teams
    # -----------------------
    @app.get("/api/standings")
    def get_standings(engine: TournamentEngine = Depends(get_engine)):
        return _ok(compute_sorted_table(engine.standings()))

    @app.get("/api/teams")
    def get_teams(engine: TournamentEngine = Depends(get_engine)):
        return _ok([t.to_dict() for t in engine.teams()])

    @app.get("/api/teams/{name}")
    def get_team_stats(name: str, engine: TournamentEngine = Depends(get_engine)):
        report = engine.team_report(name)
        if report is None:
            raise HTTPException(status_code=404, detail=f"Unknown team: {name}")
        team, rank = report
        data = team.to_dict()
        data["rank"] = rank
        return _ok(data)

    @app.post("/api/teams", status_code=201)
    def add_team(req: TeamIn, engine: TournamentEngine = Depends(get_engine)):
        name = (req.name or "").strip()
        if not name:
            raise HTTPException(status_code=400, detail="Team name is required")

        team_data = req.model_dump(exclude_none=True)
        team_data["name"] = name
        try:
            team = engine.add_team(team_data)
        except TeamAlreadyExists:
            raise HTTPException(status_code=409, detail="Team already exists")
        except InvalidTeam as e:
            raise HTTPException(status_code=400, detail=str(e))

        return _ok(team.to_dict(), "Team added successfully")

    # -----------------------
    # Matches
    # -----------------------
    @app.post("/api/matches")
    def record_match(req: MatchIn, engine: TournamentEngine = Depends(get_engine)):
        t1 = (req.team1 or "").strip()
        t2 = (req.team2 or "").strip()
        if not t1 or not t2:
            raise HTTPException(status_code=400, detail="Both teams are required")

        score1 = req.team1_score or 0
        score2 = req.team2_score or 0

        # 0-0 means the scores were never entered
        if score1 == 0 and score2 == 0:
            raise HTTPException(status_code=400, detail="Please enter scores for both teams")

        try:
            match = engine.record_match(t1, t2, score1, score2)
        except TeamNotFound as e:
            raise HTTPException(status_code=400, detail=str(e))
        except InvalidMatch as e:
            raise HTTPException(status_code=400, detail=str(e))

        if match.tie:
            message = "Match recorded - Tie!"
        else:
            message = f"Match recorded - {match.winner} won!"
        return _ok(match.to_dict(), message)

    @app.get("/api/matches/history")
    def get_match_history(limit: int = HISTORY_DEFAULT_LIMIT, engine: TournamentEngine = Depends(get_engine)):
        if limit <= 0:
            raise HTTPException(status_code=400, detail="limit must be positive")
        return _ok([m.to_dict() for m in engine.match_history(limit)])

    # -----------------------
    # Upcoming fixtures
    # -----------------------
    @app.get("/api/fixtures")
    def get_upcoming_matches(engine: TournamentEngine = Depends(get_engine)):
        return _ok(engine.upcoming_matches())

    @app.post("/api/fixtures", status_code=201)
    def add_upcoming_match(req: FixtureIn, engine: TournamentEngine = Depends(get_engine)):
        t1 = req.team1.strip()
        t2 = req.team2.strip()
        if not t1 or not t2:
            raise HTTPException(status_code=400, detail="Both teams are required")

        fixture = req.model_dump(exclude_none=True)
        fixture["team1"] = t1
        fixture["team2"] = t2
        return _ok(engine.add_upcoming_match(fixture), "Fixture scheduled")

    # -----------------------
    # Tournament
    # -----------------------
    @app.get("/api/tournament")
    def get_tournament(engine: TournamentEngine = Depends(get_engine)):
        summary = engine.summary()
        return _ok({
            "name": TOURNAMENT_NAME,
            "tournament": summary["stats"],
            "standings": compute_sorted_table(summary["standings"]),
            "playoffTeams": [t.to_dict() for t in summary["playoff_teams"]],
        })

    @app.post("/api/tournament/reset")
    def reset_tournament(engine: TournamentEngine = Depends(get_engine)):
        engine.reset()
        return _ok(engine.tournament_stats(), "Tournament reset")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
