"""
Errors raised by the TicTacToe engine.
All of them are recoverable: the operation that raised changed nothing.
"""


class GameError(Exception):
    """Base class for every engine error"""


class InvalidCoordinate(GameError):
    """Raised when a row or column is outside the board"""

    def __init__(self, row: int, col: int, *args: object) -> None:
        self.row = row
        self.col = col
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Invalid position ({self.row}, {self.col}). Must be 0-2."


class CellOccupied(GameError):
    """Raised when a move targets a cell that already holds a mark"""

    def __init__(self, row: int, col: int, *args: object) -> None:
        self.row = row
        self.col = col
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Cell ({self.row}, {self.col}) is already occupied"


class RoundAlreadyOver(GameError):
    """Raised when a move is submitted after the round has a verdict"""

    def __str__(self) -> str:
        return "Round is already over!"


class InvalidAITurn(GameError):
    """Raised when the computer is asked to move when it cannot"""

    def __init__(self, reason: str, *args: object) -> None:
        self.reason = reason
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Computer cannot move: {self.reason}"
