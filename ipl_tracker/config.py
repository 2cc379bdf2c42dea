# ipl_tracker/config.py
from __future__ import annotations

import logging
import os
from typing import List

from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, "1" if default else "0").lower()
    return raw in {"1", "true", "yes", "on"}


def _get_env_list(name: str, default: str) -> List[str]:
    return [part.strip() for part in _get_env(name, default).split(",") if part.strip()]


# -------------------------
# Tournament
# -------------------------
TOURNAMENT_NAME: str = _get_env("TOURNAMENT_NAME", "Indian Premier League")

# If 0, the server starts with an empty roster instead of the ten IPL franchises
SEED_TEAMS: bool = _get_env_bool("SEED_TEAMS", True)

# Top-N of the standings qualify for the playoffs
PLAYOFF_SPOTS: int = _get_env_int("PLAYOFF_SPOTS", 4)

# Number of recent results kept in a team's form guide
FORM_LENGTH: int = _get_env_int("FORM_LENGTH", 5)

# Default page size for /api/matches/history
HISTORY_DEFAULT_LIMIT: int = _get_env_int("HISTORY_DEFAULT_LIMIT", 50)


# -------------------------
# Server
# -------------------------
HOST: str = _get_env("HOST", "0.0.0.0")
PORT: int = _get_env_int("PORT", 3000)
CORS_ORIGINS: List[str] = _get_env_list("CORS_ORIGINS", "*")
LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    if not TOURNAMENT_NAME:
        raise RuntimeError("TOURNAMENT_NAME must not be empty")

    # Sizes
    if PLAYOFF_SPOTS <= 0:
        raise RuntimeError("PLAYOFF_SPOTS must be positive")

    if FORM_LENGTH <= 0:
        raise RuntimeError("FORM_LENGTH must be positive")

    if HISTORY_DEFAULT_LIMIT <= 0:
        raise RuntimeError("HISTORY_DEFAULT_LIMIT must be positive")

    if not 0 < PORT < 65536:
        raise RuntimeError(f"PORT must be between 1 and 65535 (got {PORT})")

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise RuntimeError(f"Unknown LOG_LEVEL: {LOG_LEVEL}")
