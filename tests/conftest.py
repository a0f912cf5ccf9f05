"""
Shared fixtures. Positions are written as text rows: '.' empty, '1' Player One, '2' Player Two.
"""

import random
from typing import Callable

import pytest

from othello.core.board import Board
from othello.types import Player

SYMBOLS = {".": None, "1": Player.ONE, "2": Player.TWO}


def parse_rows(*rows: str) -> Board:
    return Board.from_rows([[SYMBOLS[ch] for ch in row.replace(" ", "")] for row in rows])


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Call the returned function with one string per row."""
    return parse_rows


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def opening() -> Board:
    return Board.create(8)
