from __future__ import annotations
import itertools
import sys
import time

from othello.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

SPINNER_FRAMES = "|/-\\"
FRAME_SEC = 0.08


def ai_thinking(label: str = "AI is thinking", delay: float = AI_THINK_DELAY_SEC) -> None:
    """Hold the AI's reply for `delay` seconds so the human sees each move land."""
    if delay <= 0:
        return
    if not AI_THINKING_SPINNER or not sys.stdout.isatty():
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    line = ""
    for frame in itertools.cycle(SPINNER_FRAMES):
        if time.monotonic() >= deadline:
            break
        line = f"\r{label} is thinking... {frame}"
        sys.stdout.write(line)
        sys.stdout.flush()
        time.sleep(FRAME_SEC)
    sys.stdout.write("\r" + " " * len(line) + "\r")
    sys.stdout.flush()
