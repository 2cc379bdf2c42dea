"""
tests/conftest.py - shared fixtures.

The HTTP client is built without the app lifespan, so each test gets its
own engine through a dependency override instead of the seeded roster.
"""

import pytest
from fastapi.testclient import TestClient

from ipl_tracker.seed import create_ipl_roster
from ipl_tracker.tournament import TournamentEngine
from main import app, get_engine


@pytest.fixture
def engine():
    """Empty engine with Alpha and Beta registered."""
    eng = TournamentEngine()
    eng.add_team({"name": "Alpha"})
    eng.add_team({"name": "Beta"})
    return eng


@pytest.fixture
def seeded_engine():
    eng = TournamentEngine()
    eng.seed(create_ipl_roster())
    return eng


@pytest.fixture
def client(seeded_engine):
    app.dependency_overrides[get_engine] = lambda: seeded_engine
    yield TestClient(app)
    app.dependency_overrides.clear()
