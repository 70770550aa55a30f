from __future__ import annotations

from functools import partial
from typing import List

from .league_types import Team


def _make_random(name: str, seed: int):
    import random
    from tictactoe.ai.random_agent import RandomAgent

    return RandomAgent(name=name, rng=random.Random(seed))


def _make_perfect(name: str, shuffle_ties: bool, seed: int):
    import random
    from tictactoe.ai.perfect_agent import PerfectAgent

    return PerfectAgent(name=name, shuffle_ties=shuffle_ties, rng=random.Random(seed))


def build_roster() -> List[Team]:
    teams: List[Team] = []

    for seed in [0, 1]:
        name = f"Random seed{seed}"
        teams.append(Team(name, partial(_make_random, name, seed)))

    teams.append(Team("Perfect first-max", partial(_make_perfect, "Perfect first-max", False, 0)))
    teams.append(Team("Perfect shuffled", partial(_make_perfect, "Perfect shuffled", True, 0)))

    return teams
