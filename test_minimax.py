"""
Tests for the Minimax search.
"""

from logic.board import Board, Cell
from logic.config import GameConfig
from logic.minimax import Minimax


def test_x_already_won():
    board = Board.from_rows(["XXX", "OO ", "   "])
    assert Minimax().score(board, 5, False) == GameConfig.WIN_SCORE


def test_o_already_won():
    board = Board.from_rows(["OOO", "XX ", "X  "])
    assert Minimax().score(board, 6, True) == -GameConfig.WIN_SCORE


def test_full_board_scores_zero():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    assert Minimax().score(board, 8, False) == 0


def test_depth_limit_scores_zero():
    board = Board.from_rows(["X  ", "   ", "   "])
    assert Minimax().score(board, 9, True) == 0


def test_immediate_x_win_is_biased_by_depth():
    # X to move and wins at (0, 2): best child is +10, minus the depth
    board = Board.from_rows(["XX ", "OO ", "   "])
    assert Minimax().score(board, 3, True) == GameConfig.WIN_SCORE - 3


def test_immediate_o_win_is_biased_by_depth():
    # O to move and wins at (0, 2): best child is -10, plus the depth
    board = Board.from_rows(["OO ", "XX ", "X  "])
    assert Minimax().score(board, 4, False) == -GameConfig.WIN_SCORE + 4


def test_last_empty_cell():
    # X fills the last cell for a draw: child scores 0, node returns 0 - depth
    board = Board.from_rows(["XOX", "XOO", "OX "])
    assert Minimax().score(board, 7, True) == -7


def test_search_restores_board():
    board = Board.from_rows(["X  ", " O ", "   "])
    before = board.cells()
    minimax = Minimax()
    minimax.score(board, 1, True)
    assert board.cells() == before
    assert minimax.positions_evaluated > 1


def test_score_bound():
    minimax = Minimax()
    bound = GameConfig.SCORE_BOUND
    boards = [
        Board.from_rows(["X  ", " O ", "   "]),
        Board.from_rows(["XO ", " X ", "   "]),
        Board.from_rows(["XO ", " X ", "  O"]),
        Board.from_rows(["X O", " X ", "O  "]),
    ]
    for board in boards:
        marks = 9 - len(board.get_empty_cells())
        for maximizing in (True, False):
            for depth in (marks - 1, marks):
                score = minimax.score(board, depth, maximizing)
                assert -bound <= score <= bound
