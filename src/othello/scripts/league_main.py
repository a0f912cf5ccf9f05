from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from othello.config import DEFAULT_BOARD_SIZE, LOG_DATEFMT, LOG_FORMAT
from othello.core.board import validate_size
from othello.errors import InvalidSizeError

from .league_core import print_standings, round_robin, write_results_csv
from .league_format import A
from .league_scoring import DEFAULT_Z
from .league_roster import build_roster


def _depth(raw: str) -> int:
    depth = int(raw)
    if depth < 1:
        raise argparse.ArgumentTypeError(f"search depth must be at least 1, got {depth}")
    return depth


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello-league", description="Round-robin league between the Othello AIs.")
    ap.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="Board size (even, >= 4)")
    ap.add_argument("--games-per-pair", type=int, default=4, help="Games per pairing, sides alternate")
    ap.add_argument("--random-copies", type=int, default=2, help="How many Easy (random) entrants")
    ap.add_argument("--depths", type=_depth, nargs="+", default=[1, 2, 3], help="Minimax depths to enter")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=1, help="Worker processes (1 = inline)")
    ap.add_argument("--z", type=float, default=DEFAULT_Z, help="Z for the Wilson lower bound")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where league_results_*.csv goes")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    try:
        validate_size(args.size)
    except InvalidSizeError as e:
        print(e)
        return 2

    roster = build_roster(random_copies=args.random_copies, depths=args.depths)
    print(A.bold(f"Roster size: {len(roster)} teams"))

    start = time.perf_counter()
    agg = round_robin(
        roster,
        size=args.size,
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        max_workers=args.workers,
    )
    print_standings(agg, z=args.z)

    if not args.no_csv:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = write_results_csv(Path(args.results_dir) / f"league_results_{ts}.csv", agg, z=args.z)
        print(f"Wrote CSV: {out_path}")

    elapsed = time.perf_counter() - start
    h = int(elapsed // 3600)
    m = int((elapsed % 3600) // 60)
    s = elapsed % 60
    print(A.bold(f"Total runtime: {h}:{m:02d}:{s:06.3f}"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
