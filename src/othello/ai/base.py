from __future__ import annotations
from typing import Protocol

from othello.core.board import Board
from othello.types import Move, Player


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board, player: Player) -> Move:
        ...
