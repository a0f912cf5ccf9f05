# src/othello/core/rules.py

from __future__ import annotations
from typing import List, Tuple

from othello.core.board import Board
from othello.errors import IllegalMoveError
from othello.types import Move, Player, other

Coord = Tuple[int, int]  # (row, col)

# Every compass offset except (0, 0)
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _ray_flips(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> List[Coord]:
    """
    Opponent discs captured along one ray from (row, col), or [] when the ray
    runs off the board, hits an empty cell, or has no opponent discs before
    reaching a disc of `player`.
    """
    opp = other(player)
    g = board.grid
    r, c = row + dr, col + dc
    run: List[Coord] = []

    while board.in_bounds(r, c) and g[r][c] == opp:
        run.append((r, c))
        r += dr
        c += dc

    if run and board.in_bounds(r, c) and g[r][c] == player:
        return run
    return []


def flips_for_move(board: Board, move: Move, player: Player) -> List[Coord]:
    """All discs `player` would capture by playing `move`; [] if illegal."""
    row, col = move
    if board.get(row, col) is not None:
        return []

    flips: List[Coord] = []
    for dr, dc in DIRECTIONS:
        flips.extend(_ray_flips(board, row, col, dr, dc, player))
    return flips


def is_legal(board: Board, move: Move, player: Player) -> bool:
    row, col = move
    if board.get(row, col) is not None:
        return False
    return any(_ray_flips(board, row, col, dr, dc, player) for dr, dc in DIRECTIONS)


def flippable_count(board: Board, move: Move, player: Player) -> int:
    return len(flips_for_move(board, move, player))


def apply_move(board: Board, move: Move, player: Player) -> List[Coord]:
    """
    Place a disc for `player` and recolour every captured disc.
    Mutates `board` in place and returns the flipped coordinates.
    """
    flips = flips_for_move(board, move, player)
    if not flips:
        raise IllegalMoveError(f"Illegal move for player {int(player)} at {tuple(move)}.")

    row, col = move
    board.grid[row][col] = player
    for r, c in flips:
        board.grid[r][c] = player
    return flips


def legal_moves(board: Board, player: Player) -> List[Move]:
    # Row-major order; the Easy/Medium/Hard tie-breaks depend on it.
    return [Move((r, c)) for (r, c) in board.coords() if is_legal(board, Move((r, c)), player)]


def has_any_move(board: Board, player: Player) -> bool:
    return len(legal_moves(board, player)) > 0


def is_game_over(board: Board) -> bool:
    """Neither side can move. A full board is just a special case of this."""
    return not (has_any_move(board, Player.ONE) or has_any_move(board, Player.TWO))
