"""Unit tests for src/othello/game/session.py"""

import logging
import random

import pytest

from othello.ai.greedy_agent import GreedyAgent
from othello.core.rules import legal_moves
from othello.errors import IllegalMoveError, InvalidSizeError, OutOfBoundsError, SessionStateError
from othello.game.session import GameSession, new_session
from othello.types import Difficulty, Phase, Player


@pytest.fixture
def one_then_blocked(make_board):
    """
    One to move. After One plays (0, 2) Two is blocked while One can still
    play (1, 0); after that nobody can move.
    """
    return make_board(
        "12..",
        "....",
        "2...",
        "1...",
    )


def _play_out(session: GameSession, max_half_moves: int = 200) -> None:
    """Human always takes the first legal move; the AI answers."""
    for _ in range(max_half_moves):
        if session.phase == Phase.FINISHED:
            return
        if session.is_human_turn():
            row, col = session.query_state().legal_moves[0]
            session.submit_human_move(row, col)
        else:
            session.advance_ai_turn()
    raise AssertionError("game did not finish")


# --- lifecycle ---
def test_fresh_session_awaits_config():
    snap = GameSession().query_state()
    assert snap.phase == Phase.AWAITING_CONFIG
    assert snap.mover is None
    assert snap.cells == ()
    assert snap.outcome is None


def test_new_session_starts_in_progress():
    session = new_session(8, Difficulty.MEDIUM)
    snap = session.query_state()

    assert snap.phase == Phase.IN_PROGRESS
    assert snap.mover == Player.ONE
    assert snap.round == 1
    assert snap.size == 8
    assert snap.difficulty == Difficulty.MEDIUM
    assert snap.legal_moves == ((2, 3), (3, 2), (4, 5), (5, 4))
    assert snap.outcome is None
    assert isinstance(session.agent, GreedyAgent)


@pytest.mark.parametrize("size", [3, 5, 2])
def test_invalid_size_leaves_session_unconfigured(size):
    session = GameSession()
    with pytest.raises(InvalidSizeError):
        session.start(size, Difficulty.EASY)
    assert session.phase == Phase.AWAITING_CONFIG


def test_cannot_start_twice():
    session = new_session(4, Difficulty.EASY)
    with pytest.raises(SessionStateError):
        session.start(4, Difficulty.EASY)


def test_reset_returns_to_config_and_allows_a_new_game():
    session = new_session(4, Difficulty.EASY)
    session.reset()
    assert session.phase == Phase.AWAITING_CONFIG

    session.start(6, Difficulty.HARD)
    assert session.query_state().size == 6


def test_moves_need_a_game_in_progress():
    session = GameSession()
    with pytest.raises(SessionStateError):
        session.submit_human_move(2, 3)
    with pytest.raises(SessionStateError):
        session.advance_ai_turn()


# --- human moves ---
def test_human_move_updates_board_round_and_mover():
    session = new_session(8, Difficulty.EASY)
    snap = session.submit_human_move(2, 3)

    assert snap.round == 2
    assert snap.mover == Player.TWO
    assert snap.last_move == (2, 3)
    assert snap.flipped == ((3, 3),)
    assert snap.cells[3][3] == Player.ONE
    flat = [c for row in snap.cells for c in row]
    assert flat.count(Player.ONE) == 4
    assert flat.count(Player.TWO) == 1


def test_illegal_human_move_changes_nothing():
    session = new_session(8, Difficulty.EASY)
    before = session.query_state()

    with pytest.raises(IllegalMoveError):
        session.submit_human_move(0, 0)

    after = session.query_state()
    assert after == before
    assert after.mover == Player.ONE
    assert after.round == 1


def test_out_of_bounds_human_move_is_surfaced():
    session = new_session(8, Difficulty.EASY)
    with pytest.raises(OutOfBoundsError):
        session.submit_human_move(8, 0)
    assert session.query_state().round == 1


def test_human_cannot_move_on_the_ai_turn():
    session = new_session(8, Difficulty.EASY)
    session.submit_human_move(2, 3)
    with pytest.raises(IllegalMoveError):
        session.submit_human_move(2, 2)


def test_ai_cannot_move_on_the_human_turn():
    session = new_session(8, Difficulty.EASY)
    with pytest.raises(SessionStateError):
        session.advance_ai_turn()


# --- AI moves ---
def test_medium_ai_reply():
    session = new_session(8, Difficulty.MEDIUM)
    session.submit_human_move(2, 3)
    snap = session.advance_ai_turn()

    # all three replies flip one disc; the first in row-major order wins
    assert snap.last_move == (2, 2)
    assert snap.flipped == ((3, 3),)
    assert snap.round == 3
    assert snap.mover == Player.ONE


def test_easy_ai_reply_is_legal():
    session = new_session(8, Difficulty.EASY, rng=random.Random(5))
    session.submit_human_move(2, 3)
    options = legal_moves(session.state.board, Player.TWO)

    snap = session.advance_ai_turn()
    assert snap.last_move in options


def test_human_can_play_second():
    session = new_session(6, Difficulty.MEDIUM, human=Player.TWO)
    assert not session.is_human_turn()
    with pytest.raises(IllegalMoveError):
        session.submit_human_move(1, 2)

    session.advance_ai_turn()
    assert session.is_human_turn()
    assert session.query_state().mover == Player.TWO


# --- skips and the end of the game ---
def test_blocked_side_is_skipped_without_a_round(one_then_blocked):
    session = GameSession.from_position(one_then_blocked, Difficulty.EASY)
    assert session.query_state().skipped is None

    snap = session.submit_human_move(0, 2)

    assert snap.phase == Phase.IN_PROGRESS
    assert snap.skipped == Player.TWO
    assert snap.mover == Player.ONE
    assert snap.round == 2
    assert "AI has no valid moves" in session.state.last_status


def test_game_ends_when_nobody_can_move(one_then_blocked):
    session = GameSession.from_position(one_then_blocked, Difficulty.EASY)
    session.submit_human_move(0, 2)
    snap = session.submit_human_move(1, 0)

    assert snap.phase == Phase.FINISHED
    assert snap.round == 3
    assert snap.legal_moves == ()
    assert snap.outcome is not None
    assert snap.outcome.winner == Player.ONE
    assert (snap.outcome.score_one, snap.outcome.score_two) == (6, 0)
    assert session.state.last_status.startswith("You Win!")


def test_final_position_is_logged_at_debug(one_then_blocked, caplog):
    session = GameSession.from_position(one_then_blocked, Difficulty.EASY)
    with caplog.at_level(logging.DEBUG, logger="othello.game.session"):
        session.submit_human_move(0, 2)
        session.submit_human_move(1, 0)

    assert "Game over after round 3: 6-0, winner 1." in caplog.text
    assert "Final position:" in caplog.text
    assert " 1 1 1 1 ." in caplog.text


def test_resuming_a_blocked_ai_hands_the_turn_back(make_board):
    b = make_board(
        "111.",
        "....",
        "2...",
        "1...",
    )
    session = GameSession.from_position(b, Difficulty.HARD, mover=Player.TWO, round_no=4)
    snap = session.query_state()

    assert snap.skipped == Player.TWO
    assert snap.mover == Player.ONE
    assert snap.round == 4
    assert snap.phase == Phase.IN_PROGRESS


@pytest.mark.parametrize(
    "rows, winner, scores",
    [
        (("1122", "1122", "1122", "1122"), None, (8, 8)),
        (("1111", "1111", "1122", "2222"), Player.ONE, (10, 6)),
        (("2222", "2222", "2211", "1111"), Player.TWO, (6, 10)),
    ],
)
def test_full_board_finishes_on_disc_count(make_board, rows, winner, scores):
    session = GameSession.from_position(make_board(*rows), Difficulty.EASY)
    snap = session.query_state()

    assert snap.phase == Phase.FINISHED
    assert snap.outcome.winner == winner
    assert snap.outcome.is_tie == (winner is None)
    assert (snap.outcome.score_one, snap.outcome.score_two) == scores


def test_finished_session_rejects_moves(make_board):
    session = GameSession.from_position(make_board("1122", "1122", "1122", "1122"), Difficulty.EASY)
    with pytest.raises(SessionStateError):
        session.submit_human_move(0, 0)
    with pytest.raises(SessionStateError):
        session.advance_ai_turn()


def test_from_position_does_not_share_the_board(one_then_blocked):
    session = GameSession.from_position(one_then_blocked, Difficulty.EASY)
    session.submit_human_move(0, 2)
    assert one_then_blocked.get(0, 2) is None


# --- whole games ---
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_game_on_small_board(difficulty):
    session = new_session(4, difficulty, rng=random.Random(11))
    _play_out(session)

    snap = session.query_state()
    assert snap.phase == Phase.FINISHED
    one = sum(row.count(Player.ONE) for row in snap.cells)
    two = sum(row.count(Player.TWO) for row in snap.cells)
    assert (snap.outcome.score_one, snap.outcome.score_two) == (one, two)
    # every applied half-move added exactly one disc
    assert one + two == 4 + (snap.round - 1)


def test_hard_game_on_six_by_six_finishes():
    session = new_session(6, Difficulty.HARD)
    _play_out(session)
    assert session.phase == Phase.FINISHED
