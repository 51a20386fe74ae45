"""
Minimax search for TicTacToe.
Scores a board by playing out every continuation on the board itself.
"""

from typing import Optional

from .board import Board, Cell
from .config import GameConfig
from .win_checker import Outcome, WinChecker


class Minimax:
    """
    Exhaustive minimax over a scratch board.

    X is the maximizing player (+WIN_SCORE when X has won), O the minimizing
    one (-WIN_SCORE). Every node biases its result by how many turns have
    been played, so faster wins and slower losses score better.

    The search places a mark, recurses and clears the mark again on the
    board it was handed; it never copies the board. No pruning: a 3x3 tree
    is small enough to walk completely.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def score(self, board: Board, depth_so_far: int, maximizing_turn: bool) -> int:
        """
        Score a position.

        Args:
            board: Scratch board. Restored to its original contents on return.
            depth_so_far: Number of turns already counted for this position.
            maximizing_turn: True if X places the next mark, False for O.

        Returns:
            The depth-biased minimax score.
        """
        self.positions_evaluated += 1

        # Check terminal states
        outcome = self.win_checker.evaluate(board)

        if outcome == Outcome.X_WINS:
            return self.config.WIN_SCORE
        if outcome == Outcome.O_WINS:
            return -self.config.WIN_SCORE
        if depth_so_far >= self.config.MAX_TURNS or outcome == Outcome.DRAW:
            return 0

        mark = Cell.X if maximizing_turn else Cell.O
        best = None

        for row, col in board.get_empty_cells():
            board.grid[row][col] = mark
            try:
                child = self.score(board, depth_so_far + 1, not maximizing_turn)
            finally:
                board.grid[row][col] = Cell.EMPTY

            if best is None:
                best = child
            elif maximizing_turn:
                best = max(best, child)
            else:
                best = min(best, child)

        if maximizing_turn:
            return best - depth_so_far
        return best + depth_so_far
