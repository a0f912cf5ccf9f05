from __future__ import annotations

from functools import partial
from typing import List, Sequence

from othello.ai.greedy_agent import GreedyAgent
from othello.ai.minimax_agent import MinimaxAgent
from othello.ai.random_agent import RandomAgent

from .league_types import Team


def _make_random(name: str) -> RandomAgent:
    return RandomAgent(name=name)


def _make_greedy(name: str) -> GreedyAgent:
    return GreedyAgent(name=name)


def _make_minimax(name: str, depth: int) -> MinimaxAgent:
    return MinimaxAgent(name=name, depth=depth)


def build_roster(random_copies: int = 2, depths: Sequence[int] = (1, 2, 3)) -> List[Team]:
    """
    Easy/Medium/Hard as the game ships them, plus shallower minimax depths
    for comparison. Random agents get reseeded per game by the league.
    """
    teams: List[Team] = []

    for i in range(random_copies):
        name = f"Easy random #{i + 1}"
        teams.append(Team(name, partial(_make_random, name)))

    teams.append(Team("Medium greedy", partial(_make_greedy, "Medium greedy")))

    for d in depths:
        name = f"Hard minimax d{d}"
        teams.append(Team(name, partial(_make_minimax, name, d)))

    return teams
