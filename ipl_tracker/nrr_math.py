# ipl_tracker/nrr_math.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

NRR_QUANTUM = Decimal("0.01")


def net_run_rate(runs_scored: int, runs_conceded: int, matches_played: int) -> float:
    """
    Net Run Rate = (runs_scored - runs_conceded) / matches_played, rounded to 2 d.p.

    Note:
    - This is the tournament's per-match run differential, not the overs-based ICC formula.
    - A team that has not played yet has NRR 0.
    - Halves round away from zero on the binary quotient: +1 run over 8 matches -> 0.13.
    """
    if matches_played < 0:
        raise ValueError("Matches played cannot be negative")
    if matches_played == 0:
        return 0.0
    quotient = (runs_scored - runs_conceded) / matches_played
    return float(Decimal(quotient).quantize(NRR_QUANTUM, rounding=ROUND_HALF_UP))


def derive_short_name(name: str) -> str:
    """
    First letter of each word, upper-cased.
    Example:
      derive_short_name("Mumbai Indians") -> "MI"
    """
    return "".join(word[0] for word in name.split()).upper()
