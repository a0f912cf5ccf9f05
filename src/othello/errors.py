# src/othello/errors.py

from __future__ import annotations


class OthelloError(Exception):
    """Base exception for the game engine."""


class InvalidSizeError(OthelloError, ValueError):
    """Board size is odd or smaller than the minimum."""


class OutOfBoundsError(OthelloError, IndexError):
    """Coordinate outside the board."""


class IllegalMoveError(OthelloError, ValueError):
    """Move not legal under the current board state (or not the mover's turn)."""


class NoLegalMovesError(OthelloError, RuntimeError):
    """An agent was asked for a move although the side to move has none."""


class SessionStateError(OthelloError, RuntimeError):
    """Session operation invoked in the wrong phase."""
