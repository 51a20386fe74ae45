"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still in play.
"""

from enum import Enum
from typing import Optional, List, Tuple

from .board import Board, Cell


class Outcome(Enum):
    """Verdict for a board."""
    NONE = "none"        # Still in play
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.NONE

    @property
    def winner(self) -> Optional[Cell]:
        """The winning mark, or None for NONE/DRAW."""
        if self == Outcome.X_WINS:
            return Cell.X
        if self == Outcome.O_WINS:
            return Cell.O
        return None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Lines are scanned diagonals first, then rows, then columns. The first
    complete line decides the verdict, so boards with more than one complete
    line (which the search can build while exploring) still get a single,
    deterministic answer.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
    ]

    def evaluate(self, board: Board) -> Outcome:
        """
        Get the verdict for a board.

        Args:
            board: The board to inspect. It is not modified.

        Returns:
            X_WINS or O_WINS for the first complete line found, DRAW if the
            board is full with no complete line, NONE otherwise.
        """
        winner = self.check_winner(board)

        if winner == Cell.X:
            return Outcome.X_WINS
        if winner == Cell.O:
            return Outcome.O_WINS
        if board.is_full():
            return Outcome.DRAW
        return Outcome.NONE

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning mark, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: List[Tuple[int, int]]) -> Optional[Cell]:
        """
        Check if a single line has a winner.

        Counts the marks of each player on the line; a line is won when one
        player holds all of its cells.
        """
        x_count = 0
        o_count = 0
        for row, col in line:
            cell = board.grid[row][col]
            if cell == Cell.X:
                x_count += 1
            elif cell == Cell.O:
                o_count += 1

        if x_count == len(line):
            return Cell.X
        if o_count == len(line):
            return Cell.O
        return None

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
