from __future__ import annotations

from tictactoe.ai.base import Agent

AGENT_KINDS = ("human", "random", "perfect")


def make_agent(kind: str) -> Agent:
    """Build a player from its command-line / menu name."""
    from tictactoe.ai.perfect_agent import PerfectAgent
    from tictactoe.ai.random_agent import RandomAgent
    from tictactoe.ui.human import HumanAgent

    k = kind.strip().lower()
    if k == "human":
        return HumanAgent()
    if k == "random":
        return RandomAgent()
    if k == "perfect":
        return PerfectAgent(shuffle_ties=True)
    raise ValueError(f"Unknown player type {kind!r}. Choose one of: {', '.join(AGENT_KINDS)}.")
