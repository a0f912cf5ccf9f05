from __future__ import annotations

from othello.config import AI_THINK_DELAY_SEC
from othello.game.session import GameSession
from othello.types import Phase
from othello.ui.effects import ai_thinking
from othello.ui.prompts import parse_move
from othello.ui.render import render


def _agent_name(session: GameSession) -> str:
    name = getattr(session.agent, "name", None)
    return str(name) if name else "AI"


def _with_stats(session: GameSession, status: str) -> str:
    """Append the search stats of the AI's last decision, if it left any."""
    info = getattr(session.agent, "last_info", None)
    if not info:
        return status
    return (
        f"{status} | {_agent_name(session)} "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(session: GameSession, think_delay: float = AI_THINK_DELAY_SEC) -> None:
    """
    Drive a started session from the console until it finishes or the human quits.
    """
    status = session.state.last_status if session.state else ""

    while True:
        snap = session.query_state()
        render(snap, status)

        if snap.phase == Phase.FINISHED:
            return

        if session.is_human_turn():
            try:
                move = parse_move(input("Your move: "), snap.size)
                if move is None:
                    render(snap, "Game quit.")
                    return
                session.submit_human_move(*move)
                status = session.state.last_status
            except ValueError as e:
                # bad input and IllegalMoveError alike: same player, same board
                status = str(e)
            continue

        ai_thinking(_agent_name(session), think_delay)
        session.advance_ai_turn()
        status = _with_stats(session, session.state.last_status)
