from __future__ import annotations

from typing import Tuple

from othello.config import BOARD_SIZES, DEFAULT_BOARD_SIZE, DEFAULT_DIFFICULTY
from othello.types import Difficulty
from othello.ui.prompts import parse_choice


def ask_settings() -> Tuple[int, Difficulty]:
    difficulties = tuple(Difficulty)

    print("Select difficulty:")
    for i, d in enumerate(difficulties, start=1):
        print(f"{i}) {d}")
    while True:
        try:
            difficulty = parse_choice(input(f"Choice (default {DEFAULT_DIFFICULTY}): "), difficulties, DEFAULT_DIFFICULTY)
            break
        except ValueError as e:
            print(e)

    print("\nSelect board size:")
    for i, n in enumerate(BOARD_SIZES, start=1):
        print(f"{i}) {n}x{n}")
    while True:
        try:
            size = parse_choice(input(f"Choice (default {DEFAULT_BOARD_SIZE}x{DEFAULT_BOARD_SIZE}): "), BOARD_SIZES, DEFAULT_BOARD_SIZE)
            break
        except ValueError as e:
            print(e)

    return size, difficulty


def ask_play_again() -> bool:
    return input("\nPlay again? [y/N]: ").strip().lower() in {"y", "yes"}
