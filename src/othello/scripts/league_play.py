from __future__ import annotations

import random
from typing import Dict, Iterator, List, Sequence, Tuple

from othello.core.board import Board
from othello.core.rules import apply_move, has_any_move, is_game_over, legal_moves
from othello.game.results import decide_outcome
from othello.types import Player, other

from .league_types import Agg

Stats = Dict[Player, Dict[str, int]]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(
    agent_one,
    agent_two,
    size: int = 8,
    seed_base: int = 0,
    opening_moves: int = 2,
) -> Tuple[str, Stats, int]:
    """
    Play one AI-vs-AI game under the normal pass and end-of-game rules.

    The first `opening_moves` half-moves are random (seeded) so that the
    deterministic agents do not replay the same game every time.
    Returns ("1" | "2" | "D", per-side stats, discs of One minus discs of Two).
    """
    board = Board.create(size)
    current = Player.ONE
    stats: Stats = {
        Player.ONE: {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        Player.TWO: {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }

    seed_agent(agent_one, seed_base + 101)
    seed_agent(agent_two, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(opening_moves):
        moves = legal_moves(board, current)
        if not moves:
            break
        apply_move(board, rng.choice(moves), current)
        current = other(current)

    while True:
        if not has_any_move(board, current):
            if is_game_over(board):
                break
            current = other(current)  # pass
            continue

        agent = agent_one if current == Player.ONE else agent_two
        move = agent.choose_move(board, current)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["depth"] += int(info.get("depth", 0))

        apply_move(board, move, current)
        current = other(current)

    result = decide_outcome(board)
    label = "D" if result.is_tie else str(int(result.winner))
    return label, stats, result.score_one - result.score_two


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_one: bool, margin: int) -> None:
    """`margin` is from Player One's point of view."""
    agg_a.games += 1
    agg_b.games += 1

    a_margin = margin if a_is_one else -margin
    agg_a.margin_sum += a_margin
    agg_b.margin_sum -= a_margin

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "1" and a_is_one) or (outcome == "2" and not a_is_one)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def run_pairings_batch(args):
    (batch_items, games_per_pair, size) = args
    out = []
    for (A_name, B_name, A_make, B_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            if g % 2 == 0:
                outcome, stats, margin = play_headless(A_make(), B_make(), size=size, seed_base=(base_seed + g))
                out.append((A_name, B_name, True, outcome, stats, margin))
            else:
                outcome, stats, margin = play_headless(B_make(), A_make(), size=size, seed_base=(base_seed + g))
                out.append((A_name, B_name, False, outcome, stats, margin))
    return out


def chunked(lst: Sequence, size: int) -> Iterator[List]:
    for i in range(0, len(lst), size):
        yield list(lst[i : i + size])
