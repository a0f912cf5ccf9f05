from __future__ import annotations
from typing import Set, Tuple

from othello.config import CLEAR_SCREEN, SHOW_LEGAL_MOVES, USE_COLOR
from othello.game.state import BoardSnapshot
from othello.types import Cell, Player

Coord = Tuple[int, int]

# ANSI SGR codes
_RESET = "\033[0m"
STYLE_TITLE = "1"
STYLE_FRAME = "2"
STYLE_STATUS = "36"
STYLE_HINT = "32"
STYLE_EMPTY = "90"
STYLE_LAST = "7"
DISC = {
    # One has the black discs and moves first
    Player.ONE: ("●", "1;30"),
    Player.TWO: ("○", "1;97"),
}


def paint(text: str, style: str) -> str:
    if not USE_COLOR:
        return text
    return f"\033[{style}m{text}{_RESET}"


def _cell(cell: Cell, hint: bool, last: bool) -> str:
    if cell is None:
        out = paint("+", STYLE_HINT) if hint else paint("·", STYLE_EMPTY)
    else:
        glyph, style = DISC[cell]
        out = paint(glyph, style)
    if last and USE_COLOR:
        out = f"\033[{STYLE_LAST}m{out}{_RESET}"
    return out


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(snap: BoardSnapshot, status: str = "") -> None:
    clear_screen()

    hints: Set[Coord] = set(snap.legal_moves) if SHOW_LEGAL_MOVES else set()
    last = tuple(snap.last_move) if snap.last_move is not None else None

    print(paint("OTHELLO", STYLE_TITLE) + paint(f"  {snap.size}x{snap.size}  {snap.difficulty}  Round: {snap.round}", STYLE_FRAME))
    print(paint(status, STYLE_STATUS) if status else "")

    print(paint("    " + " ".join(f"{i + 1:>2}" for i in range(snap.size)), STYLE_FRAME))
    for r, row in enumerate(snap.cells):
        line = " ".join(f" {_cell(cell, (r, col) in hints, (r, col) == last)}" for col, cell in enumerate(row))
        print(paint(f"{r + 1:>3} ", STYLE_FRAME) + line)

    one = sum(row.count(Player.ONE) for row in snap.cells)
    two = sum(row.count(Player.TWO) for row in snap.cells)
    print(paint(f"    {DISC[Player.ONE][0]} {one}   {DISC[Player.TWO][0]} {two}", STYLE_FRAME))
    print(paint("    Enter 'row col' (e.g. 3 4) to place a disc. Enter q to quit.", STYLE_FRAME))
