import random

import pytest

from tictactoe.ai.perfect_agent import PerfectAgent
from tictactoe.ai.pick import AGENT_KINDS, make_agent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.game.state import GameState
from tictactoe.types import Cell, Move
from tictactoe.ui.human import HumanAgent


class TestRandomAgent:

    def test_chooses_an_empty_cell_without_playing_it(self, board_from):
        b = board_from(["XOX", "OX_", "O_X"])
        agent = RandomAgent(rng=random.Random(3))
        move = agent.choose_move(GameState(board=b, current=Cell.NOUGHT))
        assert move in (Move(1, 2), Move(2, 1))
        assert b.get(*move) is Cell.EMPTY
        assert agent.last_info["move"] == move

    def test_seeded_agents_agree(self, board_from):
        b = board_from(["X__", "___", "___"])
        a = RandomAgent(rng=random.Random(11)).choose_move(GameState(board=b))
        c = RandomAgent(rng=random.Random(11)).choose_move(GameState(board=b))
        assert a == c


class TestPerfectAgent:

    def test_plays_for_the_side_to_move(self, board_from):
        b = board_from(["OO_", "XX_", "O__"])
        # X to move wins at (1,2); O to move wins at (0,2).
        assert PerfectAgent().choose_move(GameState(board=b, current=Cell.CROSS)) == Move(1, 2)
        assert PerfectAgent().choose_move(GameState(board=b, current=Cell.NOUGHT)) == Move(0, 2)

    def test_reports_search_effort(self, board_from):
        agent = PerfectAgent()
        agent.choose_move(GameState(board=board_from(["XOX", "OX_", "O__"]), current=Cell.CROSS))
        assert agent.last_info["nodes"] > 0
        assert agent.last_info["time_ms"] >= 1


class TestAgentContract:

    @pytest.mark.parametrize("agent", [RandomAgent(rng=random.Random(5)), PerfectAgent()], ids=["random", "perfect"])
    def test_returns_an_empty_cell_and_leaves_the_board_alone(self, agent, board_from):
        b = board_from(["XO_", "_X_", "O__"])
        before = b.rows()
        move = agent.choose_move(GameState(board=b, current=Cell.NOUGHT))
        assert isinstance(move, Move)
        assert b.get(move.row, move.col) is Cell.EMPTY
        assert b.rows() == before
        assert isinstance(agent.name, str) and agent.name


class TestMakeAgent:

    def test_kinds(self):
        assert AGENT_KINDS == ("human", "random", "perfect")
        assert isinstance(make_agent("human"), HumanAgent)
        assert isinstance(make_agent("Random"), RandomAgent)
        assert isinstance(make_agent(" perfect "), PerfectAgent)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            make_agent("minimax")

    def test_human_agent_is_never_asked_directly(self):
        with pytest.raises(RuntimeError):
            HumanAgent().choose_move(None)
