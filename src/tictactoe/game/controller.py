from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe import config
from tictactoe.ai.base import Agent
from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner_with_line
from tictactoe.game.state import GameState
from tictactoe.types import Cell, GameStatus, Move, Side, Tie, Winner, other
from tictactoe.ui.effects import ai_thinking, pause
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, current: Side) -> str:
    """
    Prepend a persistent header showing who X and O are.
    """
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {current.glyph}"
    if status:
        return f"{header}\n{status}"
    return header


def _read_human_move(state: GameState, read_line: Callable[[str], str]) -> Optional[Move]:
    raw = read_line(f"Player {state.current.glyph} move (x, y): ")
    move = parse_move(raw)
    if move is not None:
        state.board.set(state.current, move.row, move.col)
    return move


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    board: Optional[Board] = None,
    show_thinking: bool = True,
    pause_sec: Optional[float] = None,
    read_line: Callable[[str], str] = input,
) -> Optional[GameStatus]:
    """
    Play one game to the end. Returns the final Winner/Tie status, or None if a human quit.
    """
    if pause_sec is None:
        pause_sec = config.RESPONSE_PAUSE_SEC

    state = GameState(board=board if board is not None else Board(), current=Cell.CROSS)

    while True:
        render(state.board, _status_with_agents(state.last_status, agent_x, agent_o, state.current))

        status = state.board.status()
        if isinstance(status, Winner):
            res = check_winner_with_line(state.board)
            line = res[1] if res else None
            render(
                state.board,
                _status_with_agents(f"{status.side.glyph} has won!", agent_x, agent_o, state.current),
                highlight=line,
            )
            logger.info("game over: %s wins", status.side.glyph)
            return status

        if isinstance(status, Tie):
            render(state.board, _status_with_agents("Tie!", agent_x, agent_o, state.current))
            logger.info("game over: tie")
            return status

        current_agent = agent_x if state.current is Cell.CROSS else agent_o

        if isinstance(current_agent, HumanAgent):
            try:
                move = _read_human_move(state, read_line)
            except ValueError as e:
                # Bad input or an illegal cell: show why and ask again.
                state.last_status = str(e)
                logger.debug("rejected human input: %s", e)
                pause(pause_sec)
                continue

            if move is None:
                render(state.board, _status_with_agents("Game quit.", agent_x, agent_o, state.current))
                return None
            state.last_status = f"Player {state.current.glyph} played x={move.col}, y={move.row}"

        else:
            if show_thinking:
                ai_thinking(current_agent.name)

            move = current_agent.choose_move(state)
            state.board.set(state.current, move.row, move.col)

            info = getattr(current_agent, "last_info", None) or {}
            state.last_status = f"{current_agent.name} played x={move.col}, y={move.row}"
            if info.get("nodes"):
                state.last_status += f" | nodes={info['nodes']} | {info.get('time_ms')}ms"

        logger.debug("%s -> %s", state.current.glyph, move)
        state.current = other(state.current)
        pause(pause_sec)
