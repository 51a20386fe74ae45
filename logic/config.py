"""
Game configuration for TicTacToe.
Board dimensions, scoring constants and defaults.
"""


class GameConfig:
    """
    Configuration for the game engine.

    These are fixed rules of 3x3 TicTacToe, except the defaults and
    diagnostics at the bottom which you can change freely.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Total number of moves in a round (one per cell)
    MAX_TURNS = BOARD_SIZE * BOARD_SIZE  # 9

    # Fewest moves after which someone can have 3 in a row
    # (X needs 3 marks, O has placed 2 by then)
    MIN_TURNS_FOR_WIN = 5

    # ==================== SEARCH SETTINGS ====================
    # Score of a position where X has won (O wins is the negative)
    WIN_SCORE = 10

    # Scores are biased by depth, so they can stray this far from WIN_SCORE
    SCORE_BOUND = WIN_SCORE + MAX_TURNS  # 19

    # ==================== SESSION DEFAULTS ====================
    # Used by the console driver when no option is given
    DEFAULT_MODE = "single"        # "single" or "two"
    DEFAULT_DIFFICULTY = "hard"    # "easy" or "hard"

    # ==================== DIAGNOSTICS ====================
    # Print one line per AI decision (positions searched, chosen cell)
    VERBOSE = False

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        """
        Check that a cell position is on the board.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if both indices are in [0, BOARD_SIZE - 1].
        """
        return 0 <= row < cls.BOARD_SIZE and 0 <= col < cls.BOARD_SIZE
