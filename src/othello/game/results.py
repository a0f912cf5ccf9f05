from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from othello.core.board import Board
from othello.core.scoring import disc_counts
from othello.types import Player


@dataclass(frozen=True, slots=True)
class Outcome:
    winner: Optional[Player]  # None means a tie
    score_one: int
    score_two: int

    @property
    def is_tie(self) -> bool:
        return self.winner is None


def decide_outcome(board: Board) -> Outcome:
    """Majority of discs wins; equal counts tie. Nothing else decides a game."""
    counts = disc_counts(board)
    one, two = counts[Player.ONE], counts[Player.TWO]
    if one > two:
        winner: Optional[Player] = Player.ONE
    elif two > one:
        winner = Player.TWO
    else:
        winner = None
    return Outcome(winner=winner, score_one=one, score_two=two)
