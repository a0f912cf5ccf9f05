# src/othello/types.py

from __future__ import annotations
from enum import IntEnum, StrEnum
from typing import NewType, Optional, Tuple


class Player(IntEnum):
    ONE = 1  # human by convention
    TWO = 2  # AI by convention


Cell = Optional[Player]
Move = NewType("Move", Tuple[int, int])   # (row, col), 0-based


class Difficulty(StrEnum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Phase(StrEnum):
    AWAITING_CONFIG = "awaiting config"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


def other(player: Player) -> Player:
    return Player.TWO if player == Player.ONE else Player.ONE
