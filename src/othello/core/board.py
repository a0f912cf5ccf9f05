# src/othello/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from othello.config import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from othello.errors import InvalidSizeError, OutOfBoundsError
from othello.types import Cell, Player

Grid = Tuple[Tuple[Cell, ...], ...]  # immutable view handed to callers


def validate_size(size: int) -> int:
    if size < MIN_BOARD_SIZE or size % 2 != 0:
        raise InvalidSizeError(f"Board size must be even and at least {MIN_BOARD_SIZE}, got {size}.")
    return size


@dataclass(slots=True)
class Board:
    """
    Square grid of cells. No game rules live here.

    Board.create() gives the standard opening; Board.from_rows() is for
    constructed positions (tests, resumed sessions).
    """
    size: int = DEFAULT_BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_size(self.size)
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]

    @classmethod
    def create(cls, size: int = DEFAULT_BOARD_SIZE) -> "Board":
        b = cls(validate_size(size))
        mid = size // 2
        b.grid[mid - 1][mid - 1] = Player.TWO
        b.grid[mid][mid] = Player.TWO
        b.grid[mid - 1][mid] = Player.ONE
        b.grid[mid][mid - 1] = Player.ONE
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        size = len(rows)
        if any(len(r) != size for r in rows):
            raise InvalidSizeError("Board rows must form a square.")
        b = cls(validate_size(size))
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                b.set(r, c, cell)
        return b

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is outside a {self.size}x{self.size} board.")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self.grid[row][col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        self._check(row, col)
        if cell is not None and not isinstance(cell, Player):
            raise ValueError(f"Invalid cell: {cell!r}")
        self.grid[row][col] = cell

    def clone(self) -> "Board":
        b = Board(self.size)
        b.grid = [row[:] for row in self.grid]
        return b

    def cells(self) -> Grid:
        return tuple(tuple(row) for row in self.grid)

    def coords(self) -> Iterator[Tuple[int, int]]:
        """Row-major walk over every coordinate."""
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.grid)

    def counts(self) -> Tuple[int, int, int]:
        """(discs of One, discs of Two, empty cells)"""
        one = self.count(Player.ONE)
        two = self.count(Player.TWO)
        return one, two, self.size * self.size - one - two

    def __str__(self) -> str:
        symbols = {None: ".", Player.ONE: "1", Player.TWO: "2"}
        lines = ["   " + " ".join(str(c + 1) for c in range(self.size))]
        for r in range(self.size):
            lines.append(f"{r + 1:>2} " + " ".join(symbols[cell] for cell in self.grid[r]))
        return "\n".join(lines)
