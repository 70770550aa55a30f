from __future__ import annotations
import sys
import time

from tictactoe import config


def ai_thinking(label: str = "AI is thinking") -> None:
    """
    Small user-visible delay + optional spinner so AI moves are not instant.
    """
    delay = config.AI_THINK_DELAY_SEC
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()


def pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)
