from __future__ import annotations

import argparse
import logging

from tictactoe import config
from tictactoe.ai.pick import AGENT_KINDS, make_agent
from tictactoe.core.board import Board
from tictactoe.game.controller import run_game
from tictactoe.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Terminal n-in-a-row tic-tac-toe.")
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE, help="Board length (NxN)")
    ap.add_argument("--win", type=int, default=config.WIN_ROW_LENGTH, help="Cells in a row needed to win")
    ap.add_argument("-x", "--cross", choices=AGENT_KINDS, default=None, help="Player type for X")
    ap.add_argument("-o", "--nought", choices=AGENT_KINDS, default=None, help="Player type for O")
    ap.add_argument("--pause", type=float, default=config.RESPONSE_PAUSE_SEC, help="Seconds to pause after every move")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        board = Board(args.size, args.win)
    except ValueError as e:
        ap.error(str(e))

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config.RESPONSE_PAUSE_SEC = args.pause
    if args.no_color:
        config.USE_COLOR = False

    if args.cross is None and args.nought is None:
        run_menu(args.size, args.win)
        return 0

    # Unset sides default to human X vs random O.
    agent_x = make_agent(args.cross or "human")
    agent_o = make_agent(args.nought or "random")
    run_game(agent_x, agent_o, board)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
