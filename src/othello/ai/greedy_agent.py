from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time

from othello.core.board import Board
from othello.core.rules import flippable_count, legal_moves
from othello.errors import NoLegalMovesError
from othello.types import Move, Player

log = logging.getLogger(__name__)


@dataclass(slots=True)
class GreedyAgent:
    """
    1-ply greedy: take the move that flips the most discs right now.
    Ties go to the first such move in row-major order, so the choice is
    deterministic.
    """
    name: str = "Greedy AI"

    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board, player: Player) -> Move:
        moves = legal_moves(board, player)
        if not moves:
            raise NoLegalMovesError("No valid moves.")

        start = time.perf_counter()

        best_move = moves[0]
        best_count = -1
        for m in moves:
            n = flippable_count(board, m, player)
            # strict: an equal count later in the scan does not replace the first
            if n > best_count:
                best_count = n
                best_move = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 1,
            "nodes": len(moves),
            "eval": best_count,
            "move": best_move,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        log.debug("%s picks %s flipping %d", self.name, best_move, best_count)
        return best_move
