from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from othello.ai.base import Agent


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], Agent]  # crosses process boundaries: a functools.partial, never a lambda


@dataclass
class Agg:
    """Running totals for one league entrant."""
    games: int = 0
    points: float = 0.0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    margin_sum: int = 0  # own discs minus opponent discs, summed over games

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    def add_side(self, side: Mapping[str, int]) -> None:
        """Fold in the per-side search stats of one headless game."""
        self.moves += side["moves"]
        self.time_ms += side["time_ms"]
        self.nodes += side["nodes"]
        self.depth_sum += side["depth"]

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.draws}-{self.losses}"

    @property
    def ppg(self) -> float:
        return self.points / self.games if self.games else 0.0

    @property
    def avg_margin(self) -> float:
        return self.margin_sum / self.games if self.games else 0.0

    @property
    def avg_ms_per_move(self) -> float:
        return self.time_ms / self.moves if self.moves else 0.0

    @property
    def avg_depth(self) -> float:
        return self.depth_sum / self.moves if self.moves else 0.0
