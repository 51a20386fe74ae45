"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List, TYPE_CHECKING
from dataclasses import dataclass

from .board import Cell
from .exceptions import CellOccupied, GameError, InvalidCoordinate, RoundAlreadyOver

if TYPE_CHECKING:
    from .game_state import GameSession


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves without raising.

    Rules:
    1. Round must not be over
    2. Position must be on the board
    3. Can only place on empty cells

    A failed result carries the exception GameSession.submit_move would
    raise for the same move.
    """

    def validate_move(self, session: "GameSession", row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Session the move would be played in.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error.
        """
        # Check if round is over
        if session.is_round_over:
            return ValidationResult(is_valid=False, error=RoundAlreadyOver())

        # Check if row/col are in valid range
        if not session.config.in_bounds(row, col):
            return ValidationResult(is_valid=False, error=InvalidCoordinate(row, col))

        # Check if cell is empty
        if session.board.get(row, col) != Cell.EMPTY:
            return ValidationResult(is_valid=False, error=CellOccupied(row, col))

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: "GameSession") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of (row, col) positions, empty once the round is over.
        """
        if session.is_round_over:
            return []
        return session.board.get_empty_cells()
