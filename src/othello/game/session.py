"""
Turn controller for one human-vs-AI game.

Phases run AWAITING_CONFIG -> IN_PROGRESS -> FINISHED, and reset() goes back
to AWAITING_CONFIG from anywhere. The presentation layer drives it:

    session = new_session(8, Difficulty.HARD)
    session.submit_human_move(2, 3)     # IllegalMoveError leaves state as it was
    session.advance_ai_turn()           # whenever the UI is ready for the reply
    session.query_state()

After every half-move the side now to move is checked: if it is blocked but
the other side is not, its turn is skipped (no round is counted for it); if
both are blocked the game is over and the disc majority decides.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from othello.ai.base import Agent
from othello.ai.pick import make_agent
from othello.config import DEFAULT_BOARD_SIZE, DEFAULT_DIFFICULTY
from othello.core.board import Board
from othello.core.rules import apply_move, has_any_move, is_game_over, is_legal, legal_moves
from othello.errors import IllegalMoveError, SessionStateError
from othello.game.results import Outcome, decide_outcome
from othello.game.state import BoardSnapshot, GameState
from othello.types import Difficulty, Move, Phase, Player, other

log = logging.getLogger(__name__)


def _fmt(move: Move) -> str:
    r, c = move
    return f"{r + 1} {c + 1}"


def outcome_message(outcome: Outcome, human: Player) -> str:
    if outcome.is_tie:
        headline = "It's a Tie!"
    elif outcome.winner == human:
        headline = "You Win!"
    else:
        headline = "AI Wins!"
    you = outcome.score_one if human == Player.ONE else outcome.score_two
    ai = outcome.score_two if human == Player.ONE else outcome.score_one
    return f"{headline} Final Score: You {you} | AI {ai}"


class GameSession:
    def __init__(
        self,
        human: Player = Player.ONE,
        rng: Optional[random.Random] = None,
        agent: Optional[Agent] = None,
    ) -> None:
        self.human = Player(human)
        self.ai = other(self.human)
        self._rng = rng
        self._agent_override = agent
        self.agent: Optional[Agent] = None
        self.state: Optional[GameState] = None

    # -- lifecycle --
    @property
    def phase(self) -> Phase:
        return self.state.phase if self.state is not None else Phase.AWAITING_CONFIG

    def start(self, size: int = DEFAULT_BOARD_SIZE, difficulty: Difficulty = DEFAULT_DIFFICULTY) -> BoardSnapshot:
        if self.phase != Phase.AWAITING_CONFIG:
            raise SessionStateError(f"Cannot start a game while {self.phase}.")
        board = Board.create(size)  # InvalidSizeError leaves the session unconfigured
        return self._begin(board, Difficulty(difficulty), Player.ONE, 1)

    @classmethod
    def from_position(
        cls,
        board: Board,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        mover: Player = Player.ONE,
        round_no: int = 1,
        *,
        human: Player = Player.ONE,
        rng: Optional[random.Random] = None,
        agent: Optional[Agent] = None,
    ) -> "GameSession":
        """Resume from an arbitrary position; skip/finish rules apply right away."""
        session = cls(human=human, rng=rng, agent=agent)
        session._begin(board.clone(), Difficulty(difficulty), Player(mover), round_no)
        return session

    def reset(self) -> None:
        if self.state is not None:
            log.info("Session reset (was %s, round %d).", self.state.phase, self.state.round)
        self.state = None
        self.agent = None

    def _begin(self, board: Board, difficulty: Difficulty, mover: Player, round_no: int) -> BoardSnapshot:
        self.agent = self._agent_override or make_agent(difficulty, self._rng)
        self.state = st = GameState(
            board=board,
            current=mover,
            difficulty=difficulty,
            round=round_no,
            last_status="Your turn." if mover == self.human else "AI's turn.",
        )
        log.info("New game: %dx%d, difficulty %s, human plays %d.", board.size, board.size, difficulty, int(self.human))
        self._resolve_turn(st)
        self._annotate(st)
        return self.snapshot()

    # -- moves --
    def submit_human_move(self, row: int, col: int) -> BoardSnapshot:
        st = self._in_progress()
        if st.current != self.human:
            raise IllegalMoveError("Not your turn.")

        move = Move((row, col))
        # OutOfBoundsError from the board propagates untouched
        if not is_legal(st.board, move, self.human):
            log.debug("Rejected human move %s.", move)
            raise IllegalMoveError("Invalid Move! Please select a valid position.")

        self._apply(st, move, self.human)
        st.last_status = f"You played {_fmt(move)}."
        self._annotate(st)
        return self.snapshot()

    def advance_ai_turn(self) -> BoardSnapshot:
        st = self._in_progress()
        if st.current != self.ai or self.agent is None:
            raise SessionStateError("It is not the AI's turn.")

        # The turn controller never hands a blocked side to an agent
        move = self.agent.choose_move(st.board, self.ai)
        self._apply(st, move, self.ai)
        st.last_status = f"AI played {_fmt(move)}."
        self._annotate(st)
        return self.snapshot()

    def _apply(self, st: GameState, move: Move, player: Player) -> None:
        flips = apply_move(st.board, move, player)
        st.last_move = move
        st.flipped = flips
        st.round += 1
        st.current = other(player)
        log.debug("Player %d played %s flipping %d; round %d.", int(player), move, len(flips), st.round)
        self._resolve_turn(st)

    def _resolve_turn(self, st: GameState) -> None:
        st.skipped = None

        if has_any_move(st.board, st.current):
            return

        if not is_game_over(st.board):
            waiting = other(st.current)
            log.info("Player %d has no valid moves; turn passes to player %d.", int(st.current), int(waiting))
            st.skipped = st.current
            st.current = waiting
            return

        st.phase = Phase.FINISHED
        st.outcome = outcome = decide_outcome(st.board)
        log.info(
            "Game over after round %d: %d-%d, winner %s.",
            st.round,
            outcome.score_one,
            outcome.score_two,
            "tie" if outcome.winner is None else int(outcome.winner),
        )
        log.debug("Final position:\n%s", st.board)

    def _annotate(self, st: GameState) -> None:
        if st.outcome is not None:
            st.last_status = outcome_message(st.outcome, self.human)
        elif st.skipped == self.human:
            st.last_status += " You have no valid moves. AI's turn."
        elif st.skipped == self.ai:
            st.last_status += " AI has no valid moves. Your turn."

    def _in_progress(self) -> GameState:
        if self.state is None or self.state.phase != Phase.IN_PROGRESS:
            raise SessionStateError(f"No game in progress ({self.phase}).")
        return self.state

    # -- queries --
    def is_human_turn(self) -> bool:
        return self.phase == Phase.IN_PROGRESS and self.state is not None and self.state.current == self.human

    def snapshot(self) -> BoardSnapshot:
        st = self.state
        if st is None:
            return BoardSnapshot(
                cells=(),
                size=0,
                mover=None,
                round=0,
                phase=Phase.AWAITING_CONFIG,
                difficulty=None,
            )

        finished = st.phase == Phase.FINISHED
        flipped: Tuple[Tuple[int, int], ...] = tuple(st.flipped)
        moves: List[Move] = [] if finished else legal_moves(st.board, st.current)
        return BoardSnapshot(
            cells=st.board.cells(),
            size=st.board.size,
            mover=st.current,
            round=st.round,
            phase=st.phase,
            difficulty=st.difficulty,
            last_move=st.last_move,
            flipped=flipped,
            skipped=st.skipped,
            legal_moves=tuple(moves),
            outcome=st.outcome if finished else None,
        )

    def query_state(self) -> BoardSnapshot:
        return self.snapshot()


def new_session(
    size: int = DEFAULT_BOARD_SIZE,
    difficulty: Difficulty = DEFAULT_DIFFICULTY,
    *,
    human: Player = Player.ONE,
    rng: Optional[random.Random] = None,
    agent: Optional[Agent] = None,
) -> GameSession:
    session = GameSession(human=human, rng=rng, agent=agent)
    session.start(size, difficulty)
    return session
