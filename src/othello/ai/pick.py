from __future__ import annotations

import random
from typing import Callable, Dict, Optional

from othello.ai.base import Agent
from othello.ai.greedy_agent import GreedyAgent
from othello.ai.minimax_agent import MinimaxAgent
from othello.ai.random_agent import RandomAgent
from othello.config import MINIMAX_DEPTH
from othello.types import Difficulty


def _easy(rng: Optional[random.Random]) -> Agent:
    return RandomAgent(name="Easy (random)", rng=rng or random.Random())


def _medium(rng: Optional[random.Random]) -> Agent:
    return GreedyAgent(name="Medium (greedy)")


def _hard(rng: Optional[random.Random]) -> Agent:
    return MinimaxAgent(name=f"Hard (minimax d{MINIMAX_DEPTH})", depth=MINIMAX_DEPTH)


AGENT_FACTORIES: Dict[Difficulty, Callable[[Optional[random.Random]], Agent]] = {
    Difficulty.EASY: _easy,
    Difficulty.MEDIUM: _medium,
    Difficulty.HARD: _hard,
}


def make_agent(difficulty: Difficulty, rng: Optional[random.Random] = None) -> Agent:
    """
    One agent per difficulty tier. `rng` only matters for Easy; pass a seeded
    random.Random for reproducible games.
    """
    return AGENT_FACTORIES[Difficulty(difficulty)](rng)
