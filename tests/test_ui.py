import pytest

from tictactoe.types import Move
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import board_lines, render


class TestParseMove:

    @pytest.mark.parametrize("raw, expected", [
        ("1, 2", Move(row=2, col=1)),
        ("0,0", Move(0, 0)),
        ("  2 ,1 \n", Move(row=1, col=2)),
        ("2 1", Move(row=1, col=2)),
    ])
    def test_x_then_y(self, raw, expected):
        assert parse_move(raw) == expected

    @pytest.mark.parametrize("raw", ["q", "QUIT", " exit "])
    def test_quit(self, raw):
        assert parse_move(raw) is None

    @pytest.mark.parametrize("raw", ["a, b", "1,", "1.5, 2"])
    def test_not_numbers(self, raw):
        with pytest.raises(ValueError, match="proper numbers"):
            parse_move(raw)

    @pytest.mark.parametrize("raw", ["", "1", "1, 2, 3"])
    def test_wrong_count(self, raw):
        with pytest.raises(ValueError, match="Incorrect number of arguments"):
            parse_move(raw)

    def test_out_of_range_is_left_to_the_board(self):
        assert parse_move("7, -1") == Move(row=-1, col=7)


class TestRender:

    def test_grid_layout(self, board_from):
        lines = board_lines(board_from(["XO_", "___", "__X"]))
        assert lines == [
            "   0 1 2",
            "  =======",
            "0 |X|O| |",
            "  =======",
            "1 | | | |",
            "  =======",
            "2 | | |X|",
            "  =======",
        ]

    def test_highlight_keeps_glyphs(self, board_from):
        lines = board_lines(board_from(["XXX", "OO_", "___"]), highlight=[(0, 0), (0, 1), (0, 2)])
        assert lines[2] == "0 |X|X|X|"

    def test_render_prints_status_and_board(self, board_from, capsys):
        render(board_from(["X__", "___", "___"]), "X has won!")
        out = capsys.readouterr().out
        assert "TIC-TAC-TOE" in out
        assert "X has won!" in out
        assert "0 |X| | |" in out
