from __future__ import annotations

import argparse
import logging

from othello.config import AI_THINK_DELAY_SEC, LOG_DATEFMT, LOG_FORMAT
from othello.errors import InvalidSizeError
from othello.game.controller import run_game
from othello.game.session import GameSession
from othello.types import Difficulty, Player
from othello.ui.menu import ask_play_again, ask_settings


def setup_logging(verbose: bool, default: int = logging.WARNING) -> None:
    level = logging.DEBUG if verbose else default
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def _difficulty(raw: str) -> Difficulty:
    try:
        return Difficulty(raw.strip().capitalize())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Unknown difficulty: {raw!r}")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello", description="Othello against the computer in your terminal.")
    ap.add_argument("--size", type=int, default=None, help="Board size (even, >= 4). If omitted, asks.")
    ap.add_argument(
        "--difficulty",
        type=_difficulty,
        choices=list(Difficulty),
        default=None,
        help="Easy (random), Medium (greedy) or Hard (minimax). If omitted, asks.",
    )
    ap.add_argument("--human", type=int, choices=[1, 2], default=1, help="Which side you play; 1 moves first.")
    ap.add_argument("--no-delay", action="store_true", help="Let the AI answer instantly")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.verbose)

    session = GameSession(human=Player(args.human))
    delay = 0 if args.no_delay else AI_THINK_DELAY_SEC

    while True:
        if args.size is not None and args.difficulty is not None:
            size, difficulty = args.size, args.difficulty
        else:
            size, difficulty = ask_settings()

        try:
            session.start(size, difficulty)
        except InvalidSizeError as e:
            print(e)
            return 2

        run_game(session, think_delay=delay)
        session.reset()

        if not ask_play_again():
            return 0
        # flags only pin the first game
        args.size = args.difficulty = None


if __name__ == "__main__":
    raise SystemExit(main())
