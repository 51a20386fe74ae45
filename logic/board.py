"""
Board for TicTacToe.
A 3x3 grid of cells, each empty or holding an X or O mark.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .exceptions import CellOccupied, InvalidCoordinate


class Cell(Enum):
    """What a board cell holds."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell.O if self == Cell.X else Cell.X


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are addressed by zero-based (row, col). A cell that holds a mark
    keeps it until reset() or clear().
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.size = self.config.BOARD_SIZE
        self.grid: List[List[Cell]] = [
            [Cell.EMPTY for _ in range(self.size)] for _ in range(self.size)
        ]

    def _check_coordinate(self, row: int, col: int):
        if not self.config.in_bounds(row, col):
            raise InvalidCoordinate(row, col)

    def get(self, row: int, col: int) -> Cell:
        """
        Get the contents of a cell.

        Raises:
            InvalidCoordinate: If row or col is outside the board.
        """
        self._check_coordinate(row, col)
        return self.grid[row][col]

    def set(self, row: int, col: int, mark: Cell):
        """
        Place a mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Cell.X or Cell.O.

        Raises:
            InvalidCoordinate: If row or col is outside the board.
            CellOccupied: If the cell already holds a mark.
        """
        if mark == Cell.EMPTY:
            raise ValueError("Use clear() to empty a cell")
        self._check_coordinate(row, col)
        if self.grid[row][col] != Cell.EMPTY:
            raise CellOccupied(row, col)
        self.grid[row][col] = mark

    def clear(self, row: int, col: int):
        """Empty a single cell (used to undo a tentative placement)."""
        self._check_coordinate(row, col)
        self.grid[row][col] = Cell.EMPTY

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return all(cell != Cell.EMPTY for line in self.grid for cell in line)

    def reset(self):
        """Empty every cell."""
        for row in range(self.size):
            for col in range(self.size):
                self.grid[row][col] = Cell.EMPTY

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(self.size):
            for col in range(self.size):
                if self.grid[row][col] == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def count(self, mark: Cell) -> int:
        """Number of cells holding the given mark."""
        return sum(1 for line in self.grid for cell in line if cell == mark)

    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(line) for line in self.grid)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self.config)
        new_board.grid = [list(line) for line in self.grid]
        return new_board

    @classmethod
    def from_rows(cls, rows: List[str], config: Optional[GameConfig] = None) -> "Board":
        """
        Build a board from text rows, e.g. ["XX ", "OO ", "   "].
        Any character other than X or O is read as empty.
        """
        board = cls(config)
        for row, text in enumerate(rows):
            for col, char in enumerate(text):
                if char.upper() in ("X", "O"):
                    board.grid[row][col] = Cell(char.upper())
        return board

    def to_array(self) -> np.ndarray:
        """The grid as a 3x3 numpy array of mark strings ("X", "O", " ")."""
        return np.array([[cell.value for cell in line] for line in self.grid])

    @classmethod
    def from_array(cls, array: np.ndarray, config: Optional[GameConfig] = None) -> "Board":
        """Build a board from an array produced by to_array()."""
        board = cls(config)
        for row in range(board.size):
            for col in range(board.size):
                board.grid[row][col] = Cell(str(array[row][col]))
        return board

    def render(self) -> str:
        """
        Text picture of the board with row and column numbers, e.g.

                0   1   2
            0   X | O |
               ---+---+---
            1     | X |
        """
        lines = ["    " + "   ".join(str(col) for col in range(self.size))]
        for row in range(self.size):
            marks = " | ".join(cell.value for cell in self.grid[row])
            lines.append(f"{row}   {marks}")
            if row < self.size - 1:
                lines.append("   " + "+".join(["---"] * self.size))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        return self.render()
