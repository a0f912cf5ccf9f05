from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import Optional, Tuple

from othello.config import MINIMAX_DEPTH
from othello.core.board import Board
from othello.core.rules import apply_move, legal_moves
from othello.core.scoring import evaluate
from othello.errors import NoLegalMovesError
from othello.types import Move, Player, other

log = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Fixed-depth minimax over the disc differential.

    Two always maximizes and One always minimizes, whichever side asked.
    Every branch works on its own clone of the board, so the caller's
    board is never touched and siblings never see each other's moves.
    """
    name: str = "Minimax AI"
    depth: int = MINIMAX_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}.")

    def choose_move(self, board: Board, player: Player) -> Move:
        start = time.perf_counter()
        self._nodes = 0

        best_move, best_score = self.search(board, player, self.depth)
        if best_move is None:
            raise NoLegalMovesError("No valid moves.")

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "eval": best_score,
            "move": best_move,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        log.debug("%s picks %s (eval=%s, nodes=%d)", self.name, best_move, best_score, self._nodes)
        return best_move

    def search(self, board: Board, to_play: Player, depth: int) -> Tuple[Optional[Move], float]:
        """
        Returns (best move, score) for `to_play`. A side with no moves is a
        leaf for that branch only: it scores the position as it stands.
        """
        self._nodes += 1

        moves = legal_moves(board, to_play) if depth > 0 else []
        if not moves:
            return None, evaluate(board)

        maximizing = to_play == Player.TWO
        best_score = -inf if maximizing else inf
        best_move: Optional[Move] = None

        for m in moves:
            child = board.clone()
            apply_move(child, m, to_play)
            _, score = self.search(child, other(to_play), depth - 1)

            # strict comparisons keep the first-seen move on ties
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = m

        return best_move, best_score
