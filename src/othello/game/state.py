from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from othello.core.board import Board, Grid
from othello.game.results import Outcome
from othello.types import Difficulty, Move, Phase, Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player
    difficulty: Difficulty
    round: int = 1
    phase: Phase = Phase.IN_PROGRESS
    last_move: Optional[Move] = None
    flipped: List[Tuple[int, int]] = field(default_factory=list)
    skipped: Optional[Player] = None
    outcome: Optional[Outcome] = None
    last_status: str = "Player 1 starts."


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only picture of a session handed to the presentation layer."""
    cells: Grid
    size: int
    mover: Optional[Player]
    round: int
    phase: Phase
    difficulty: Optional[Difficulty]
    last_move: Optional[Move] = None
    flipped: Tuple[Tuple[int, int], ...] = ()
    skipped: Optional[Player] = None
    legal_moves: Tuple[Move, ...] = ()
    outcome: Optional[Outcome] = None  # only set once phase is FINISHED
