"""
Ranking score for league entrants.

Points per game alone flatters agents with few games, so the table is sorted
on the lower end of the Wilson score interval around ppg instead. With the
default z=1.28 that is a one-sided 90% bound.
"""

from __future__ import annotations

from math import sqrt

from .league_types import Agg

DEFAULT_Z = 1.28


def wilson_lcb(p: float, n: int, z: float = DEFAULT_Z) -> float:
    if n <= 0:
        return 0.0
    p = min(1.0, max(0.0, p))
    spread = z * sqrt(p * (1.0 - p) / n + z * z / (4.0 * n * n))
    lower = (p + z * z / (2.0 * n) - spread) / (1.0 + z * z / n)
    return max(0.0, lower)


def strength_score(a: Agg, z: float = DEFAULT_Z) -> float:
    return wilson_lcb(a.ppg, a.games, z)


def sort_key(a: Agg, z: float = DEFAULT_Z) -> tuple[float, float]:
    # disc margin settles entrants with the same bound
    return strength_score(a, z), a.avg_margin
