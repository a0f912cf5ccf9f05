# src/othello/core/scoring.py

from __future__ import annotations
from typing import Dict

from othello.core.board import Board
from othello.types import Player


def disc_counts(board: Board) -> Dict[Player, int]:
    one, two, _ = board.counts()
    return {Player.ONE: one, Player.TWO: two}


def evaluate(board: Board) -> int:
    """
    Static evaluation: disc-count differential.
    Positive favours Two, negative favours One, whoever is searching.
    """
    one, two, _ = board.counts()
    return two - one
