from __future__ import annotations
from typing import Optional

from othello.types import Move


def parse_move(raw: str, size: int) -> Optional[Move]:
    """'3 4' or '3,4' (1-based) -> Move((2, 3)); None when the player quits."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter a row and a column, e.g. 3 4, or q.")
    row, col = (int(p) - 1 for p in parts)
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return Move((row, col))


def parse_choice(raw: str, options: tuple, default):
    """Menu helper: blank keeps the default, otherwise 1-based index into options."""
    s = raw.strip()
    if not s:
        return default
    if not s.isdigit() or not (1 <= int(s) <= len(options)):
        raise ValueError(f"Choose a number between 1 and {len(options)}.")
    return options[int(s) - 1]
