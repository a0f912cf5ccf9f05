"""Unit tests for the move-selection agents in src/othello/ai/"""

import random

import pytest

from othello.ai.greedy_agent import GreedyAgent
from othello.ai.minimax_agent import MinimaxAgent
from othello.ai.pick import make_agent
from othello.ai.random_agent import RandomAgent
from othello.core.board import Board
from othello.core.rules import legal_moves
from othello.errors import NoLegalMovesError
from othello.types import Difficulty, Player

FULL = ("1122", "1122", "1122", "1122")


@pytest.fixture
def greedy_board(make_board):
    """Two to move: (0, 2) flips one disc, (3, 0) flips two."""
    return make_board(
        "21..",
        "....",
        "....",
        ".112",
    )


@pytest.fixture
def mirrored_board(make_board):
    """Same shape with the colours swapped, One to move."""
    return make_board(
        "12..",
        "....",
        "....",
        ".221",
    )


@pytest.fixture
def lookahead_board(make_board):
    """
    Two to move. (0, 1) flips two discs and scores 6 at one ply, but One's
    best answer drops that line to -1. (0, 0) flips one disc and holds 4
    after One's best answer and Two's reply.
    """
    return make_board(
        "...1",
        "2121",
        "1122",
        "2221",
    )


@pytest.fixture
def lookahead_mirrored(make_board):
    """lookahead_board with the colours swapped, One to move."""
    return make_board(
        "...2",
        "1212",
        "2211",
        "1112",
    )


# --- Easy ---
def test_random_agent_picks_a_legal_move(opening, rng):
    agent = RandomAgent(rng=rng)
    for _ in range(20):
        assert agent.choose_move(opening, Player.ONE) in legal_moves(opening, Player.ONE)


def test_random_agent_is_reproducible_with_a_seed(opening):
    a = RandomAgent(rng=random.Random(42))
    b = RandomAgent(rng=random.Random(42))
    picks_a = [a.choose_move(opening, Player.TWO) for _ in range(10)]
    picks_b = [b.choose_move(opening, Player.TWO) for _ in range(10)]
    assert picks_a == picks_b


# --- Medium ---
def test_greedy_takes_the_biggest_capture(greedy_board):
    assert legal_moves(greedy_board, Player.TWO) == [(0, 2), (3, 0)]
    agent = GreedyAgent()
    assert agent.choose_move(greedy_board, Player.TWO) == (3, 0)
    assert agent.last_info["eval"] == 2


def test_greedy_ties_go_to_the_first_move(opening):
    # every opening move flips exactly one disc
    assert GreedyAgent().choose_move(opening, Player.ONE) == (2, 3)
    assert GreedyAgent().choose_move(opening, Player.TWO) == (2, 4)


def test_greedy_is_deterministic(greedy_board):
    agent = GreedyAgent()
    assert {agent.choose_move(greedy_board, Player.TWO) for _ in range(5)} == {(3, 0)}


# --- Hard ---
def test_minimax_depth_one_maximizes_for_two(greedy_board):
    move, score = MinimaxAgent(depth=1).search(greedy_board, Player.TWO, 1)
    assert move == (3, 0)
    assert score == 4


def test_minimax_depth_one_minimizes_for_one(mirrored_board):
    move, score = MinimaxAgent(depth=1).search(mirrored_board, Player.ONE, 1)
    assert move == (3, 0)
    assert score == -4


def test_minimax_scores_a_blocked_side_as_a_leaf(make_board):
    b = make_board(*FULL)
    move, score = MinimaxAgent().search(b, Player.TWO, 3)
    assert move is None
    assert score == 0


def test_minimax_handles_opponent_wipeout(make_board):
    # after Two's only move One has no discs left, so the branch ends early
    b = make_board(
        ".112",
        "1...",
        "1...",
        "2...",
    )
    agent = MinimaxAgent(depth=3)
    assert agent.choose_move(b, Player.TWO) == (0, 0)
    assert agent.last_info["eval"] == 7


def test_minimax_one_minimizes_below_the_root(lookahead_board):
    assert GreedyAgent().choose_move(lookahead_board, Player.TWO) == (0, 1)
    assert MinimaxAgent(depth=1).search(lookahead_board, Player.TWO, 1) == ((0, 1), 6)

    agent = MinimaxAgent(depth=3)
    assert agent.search(lookahead_board, Player.TWO, 3) == ((0, 0), 4)
    assert agent.choose_move(lookahead_board, Player.TWO) == (0, 0)
    assert agent.last_info["eval"] == 4


def test_minimax_two_maximizes_below_the_root(lookahead_mirrored):
    assert MinimaxAgent(depth=1).search(lookahead_mirrored, Player.ONE, 1) == ((0, 1), -6)

    agent = MinimaxAgent(depth=3)
    assert agent.search(lookahead_mirrored, Player.ONE, 3) == ((0, 0), -4)
    assert agent.choose_move(lookahead_mirrored, Player.ONE) == (0, 0)
    assert agent.last_info["eval"] == -4


def test_minimax_two_ply_answers(lookahead_board):
    # One's best answer after each root move, with no reply from Two
    assert MinimaxAgent(depth=2).search(lookahead_board, Player.TWO, 2) == ((0, 0), 1)


@pytest.mark.parametrize("depth", [0, -2])
def test_minimax_rejects_depth_below_one(depth):
    with pytest.raises(ValueError):
        MinimaxAgent(depth=depth)


def test_minimax_on_small_board_is_legal_and_pure():
    board = Board.create(4)
    before = board.cells()

    agent = MinimaxAgent(depth=3)
    move = agent.choose_move(board, Player.ONE)

    assert move in legal_moves(board, Player.ONE)
    assert board.cells() == before
    assert agent.last_info["nodes"] > 1


def test_minimax_is_deterministic(opening):
    agent = MinimaxAgent(depth=3)
    first = agent.choose_move(opening, Player.TWO)
    assert all(agent.choose_move(opening, Player.TWO) == first for _ in range(3))
    assert first in legal_moves(opening, Player.TWO)


# --- contract ---
@pytest.mark.parametrize("agent", [RandomAgent(), GreedyAgent(), MinimaxAgent()])
def test_agents_refuse_positions_without_moves(make_board, agent):
    with pytest.raises(NoLegalMovesError):
        agent.choose_move(make_board(*FULL), Player.ONE)


# --- dispatch ---
@pytest.mark.parametrize(
    "difficulty, cls",
    [
        (Difficulty.EASY, RandomAgent),
        (Difficulty.MEDIUM, GreedyAgent),
        (Difficulty.HARD, MinimaxAgent),
    ],
)
def test_make_agent_dispatches_on_difficulty(difficulty, cls):
    assert isinstance(make_agent(difficulty), cls)


def test_make_agent_accepts_the_display_name():
    assert isinstance(make_agent("Hard"), MinimaxAgent)
    assert make_agent(Difficulty.HARD).depth == 3


def test_make_agent_rejects_unknown_names():
    with pytest.raises(ValueError):
        make_agent("Impossible")


def test_easy_agent_uses_the_given_rng(opening):
    a = make_agent(Difficulty.EASY, random.Random(3))
    b = make_agent(Difficulty.EASY, random.Random(3))
    assert a.choose_move(opening, Player.ONE) == b.choose_move(opening, Player.ONE)
