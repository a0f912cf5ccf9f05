from __future__ import annotations

import csv
import logging
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from itertools import combinations
from pathlib import Path
from typing import Dict, List, Tuple

from othello.types import Player

from .league_format import A, Col, hr, print_table, term_width
from .league_play import add_result, chunked, run_pairings_batch
from .league_scoring import DEFAULT_Z, sort_key, strength_score
from .league_types import Agg, Team

log = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_margin",
    "moves", "time_ms", "nodes", "avg_depth",
]


def round_robin(
    teams: List[Team],
    size: int = 8,
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: int | None = 1,
    batch_pairings: int = 4,
) -> Dict[str, Agg]:
    """
    Every team plays every other team `games_per_pair` times, alternating who
    moves first. max_workers=1 plays inline; anything else uses a process pool.
    """
    rng = random.Random(seed)
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    pair_items = [
        (a.name, b.name, a.make, b.make, rng.randrange(1_000_000_000))
        for a, b in combinations(teams, 2)
    ]
    log.info("Round robin: %d teams, %d pairings, %d games each, %dx%d.",
             len(teams), len(pair_items), games_per_pair, size, size)

    def apply_game_result(A_name: str, B_name: str, a_is_one: bool, outcome: str, stats, margin: int) -> None:
        add_result(agg[A_name], agg[B_name], outcome, a_is_one, margin)
        agg[A_name].add_side(stats[Player.ONE if a_is_one else Player.TWO])
        agg[B_name].add_side(stats[Player.TWO if a_is_one else Player.ONE])

    batches = [(chunk, games_per_pair, size) for chunk in chunked(pair_items, batch_pairings)]

    if max_workers == 1:
        for batch in batches:
            for result in run_pairings_batch(batch):
                apply_game_result(*result)
        return agg

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
        for done, fut in enumerate(as_completed(futures), start=1):
            for result in fut.result():
                apply_game_result(*result)
            log.info("Batch %d/%d done.", done, len(futures))

    return agg


def ranking(agg: Dict[str, Agg], z: float = DEFAULT_Z) -> List[Tuple[str, Agg]]:
    return sorted(agg.items(), key=lambda r: sort_key(r[1], z), reverse=True)


def print_standings(agg: Dict[str, Agg], z: float = DEFAULT_Z, title: str = "Final standings") -> None:
    w = term_width(100)
    cols = [
        Col("rk", 3, "right"),
        Col("agent", 24, "left"),
        Col("strength", 9, "right"),
        Col("ppg", 5, "right"),
        Col("g", 4, "right"),
        Col("W-D-L", 9, "right"),
        Col("margin", 7, "right"),
        Col("ms/mv", 7, "right"),
    ]

    rows: List[List[str]] = []
    for i, (name, a) in enumerate(ranking(agg, z), start=1):
        p = a.ppg
        p_txt = f"{p:0.3f}"
        if p >= 0.75:
            p_txt = A.green(p_txt)
        elif p >= 0.5:
            p_txt = A.yellow(p_txt)
        else:
            p_txt = A.red(p_txt)
        rows.append([
            str(i),
            name,
            f"{strength_score(a, z):0.4f}",
            p_txt,
            str(a.games),
            a.record,
            f"{a.avg_margin:+0.1f}",
            f"{a.avg_ms_per_move:0.1f}",
        ])

    print("\n" + A.bold(f"=== {title} ==="))
    print(A.dim(hr("═", w)))
    print_table("Ranked by strength (Wilson lower bound on points per game)", cols, rows, width=w)


def write_results_csv(path: Path, agg: Dict[str, Agg], z: float = DEFAULT_Z) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in agg.items():
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(a.ppg, 6),
                round(strength_score(a, z), 6),
                round(a.avg_ms_per_move, 3),
                round(a.avg_margin, 3),
                a.moves, a.time_ms, a.nodes, round(a.avg_depth, 3),
            ])
    log.info("Wrote %s", path)
    return path
