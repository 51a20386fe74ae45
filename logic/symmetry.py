"""
Board symmetries for TicTacToe.
The square has 8 symmetries: 4 rotations, each with or without a mirror.
"""

from typing import Callable, List, Tuple

import numpy as np

from .board import Board

# Each transform maps a 3x3 array to its rotated/reflected version
TRANSFORMS: List[Tuple[str, Callable[[np.ndarray], np.ndarray]]] = [
    ("identity", lambda a: a),
    ("rot90", lambda a: np.rot90(a, 1)),
    ("rot180", lambda a: np.rot90(a, 2)),
    ("rot270", lambda a: np.rot90(a, 3)),
    ("flip", lambda a: np.fliplr(a)),
    ("flip_rot90", lambda a: np.rot90(np.fliplr(a), 1)),
    ("flip_rot180", lambda a: np.rot90(np.fliplr(a), 2)),
    ("flip_rot270", lambda a: np.rot90(np.fliplr(a), 3)),
]


def transform_board(board: Board, name: str) -> Board:
    """
    Apply one named symmetry to a board.

    Args:
        board: Board to transform. It is not modified.
        name: One of the names in TRANSFORMS.

    Returns:
        A new, transformed board.
    """
    func = dict(TRANSFORMS)[name]
    return Board.from_array(func(board.to_array()), board.config)


def transform_cell(row: int, col: int, name: str, size: int = 3) -> Tuple[int, int]:
    """
    Where a cell ends up under a named symmetry.

    Works by tagging the cell in an index grid and transforming the grid the
    same way transform_board() does.
    """
    index = np.arange(size * size).reshape(size, size)
    moved = dict(TRANSFORMS)[name](index)
    new_row, new_col = np.argwhere(moved == row * size + col)[0]
    return int(new_row), int(new_col)


def all_symmetries(board: Board) -> List[Tuple[str, Board]]:
    """All 8 symmetric versions of a board, identity first."""
    return [(name, transform_board(board, name)) for name, _ in TRANSFORMS]
