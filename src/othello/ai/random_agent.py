from __future__ import annotations

from dataclasses import dataclass, field
import random
import time

from othello.core.board import Board
from othello.core.rules import legal_moves
from othello.errors import NoLegalMovesError
from othello.types import Move, Player


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board, player: Player) -> Move:
        start = time.perf_counter()
        moves = legal_moves(board, player)
        if not moves:
            raise NoLegalMovesError("No valid moves.")

        choice = self.rng.choice(moves)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 0,
            "nodes": len(moves),
            "eval": None,
            "move": choice,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return choice
