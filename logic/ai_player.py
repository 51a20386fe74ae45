"""
AI player for TicTacToe.
Uses the Minimax search to choose the computer's move.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Cell
from .config import GameConfig
from .exceptions import InvalidAITurn
from .minimax import Minimax


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"    # Scores moves from the human's side, often fails to block
    HARD = "hard"    # Full minimax, never loses


class AIPlayer:
    """
    The computer opponent. Always plays O.

    HARD tries O on every empty cell and keeps the lowest minimax score,
    taking a winning cell straight away.

    EASY tries X (the human's mark) on every empty cell and keeps the
    highest score, i.e. it picks the cell the human would most like to
    have. The session then places an O there, which frequently leaves the
    human's real threats open.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self.minimax = Minimax(self.config)

    def choose_move(
        self,
        board: Board,
        turn_count: int,
        difficulty: Difficulty
    ) -> Tuple[int, int]:
        """
        Choose the computer's move.

        Args:
            board: Current board. Used as scratch space, left unchanged.
            turn_count: Moves already played this round.
            difficulty: Which policy to use.

        Returns:
            (row, col) of the chosen cell.
        """
        if not board.get_empty_cells():
            raise InvalidAITurn("the board is full")

        self.minimax.positions_evaluated = 0

        if difficulty == Difficulty.HARD:
            move, score = self._choose_hard(board, turn_count)
        else:
            move, score = self._choose_easy(board, turn_count)

        if self.config.VERBOSE:
            print(f"AI evaluated {self.minimax.positions_evaluated} positions. "
                  f"Best move: {move} (score: {score})")

        return move

    def _choose_hard(self, board: Board, turn_count: int) -> Tuple[Tuple[int, int], int]:
        best_score = None
        best_move = None

        for row, col in board.get_empty_cells():
            board.grid[row][col] = Cell.O
            try:
                score = self.minimax.score(board, turn_count, True)
            finally:
                board.grid[row][col] = Cell.EMPTY

            # O already has three in a row
            if score == -self.config.WIN_SCORE:
                return (row, col), score

            if best_score is None or score < best_score:
                best_score = score
                best_move = (row, col)

        return best_move, best_score

    def _choose_easy(self, board: Board, turn_count: int) -> Tuple[Tuple[int, int], int]:
        # Lower than any score the search can return
        best_score = -self.config.SCORE_BOUND - 1
        best_move = None

        for row, col in board.get_empty_cells():
            board.grid[row][col] = Cell.X
            try:
                score = self.minimax.score(board, turn_count, False)
            finally:
                board.grid[row][col] = Cell.EMPTY

            if score > best_score:
                best_score = score
                best_move = (row, col)

        return best_move, best_score

