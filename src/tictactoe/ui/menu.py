from __future__ import annotations

import time

from tictactoe.ai.perfect_agent import PerfectAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.board import Board
from tictactoe.game.controller import run_game
from tictactoe.ui.human import HumanAgent


def _start(agent_x, agent_o, length: int, win_row_length: int) -> None:
    print(f"\nStarting game: {agent_x.name} (X) vs {agent_o.name} (O)")
    print("Game will start in 3 seconds...\n")
    time.sleep(3)
    run_game(agent_x, agent_o, Board(length, win_row_length))


def run_menu(length: int, win_row_length: int) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Random AI")
    print("3) Human vs Perfect AI")
    print("4) Random AI vs Perfect AI (watch)")
    print("5) Run AI League")

    choice = input("Choice: ").strip()

    if choice == "1":
        _start(HumanAgent(), HumanAgent(), length, win_row_length)
        return

    if choice == "2":
        _start(HumanAgent(), RandomAgent(), length, win_row_length)
        return

    if choice == "3":
        _start(HumanAgent(), PerfectAgent(shuffle_ties=True), length, win_row_length)
        return

    if choice == "4":
        _start(RandomAgent(), PerfectAgent(shuffle_ties=True), length, win_row_length)
        return

    if choice == "5":
        print("\nStarting AI League in 3 seconds...\n")
        time.sleep(3)
        from tictactoe.scripts.league import main as league_main
        league_main(["--size", str(length), "--win", str(win_row_length)])
        return

    print("\nInvalid choice. Defaulting to Human vs Random AI.\n")
    _start(HumanAgent(), RandomAgent(), length, win_row_length)
