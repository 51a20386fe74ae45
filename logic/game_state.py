"""
Game session management for TicTacToe.
Tracks the board, whose turn it is, the round verdict and the scores.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .ai_player import AIPlayer, Difficulty
from .board import Board, Cell
from .config import GameConfig
from .exceptions import InvalidAITurn
from .move_validator import MoveValidator
from .win_checker import Outcome, WinChecker


class GameMode(Enum):
    """Who plays O."""
    SINGLE_PLAYER = "single"   # Human is X, computer is O
    TWO_PLAYER = "two"         # Two humans share the board


class RoundState(Enum):
    """Where the current round is."""
    AWAITING_MOVE = "awaiting_move"
    ROUND_OVER = "round_over"


# The computer always plays O in single player mode
COMPUTER_MARK = Cell.O


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    mark: Cell              # Cell.X or Cell.O
    turn_number: int        # Which move of the round this is (1-9)


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything needed to rebuild a session, e.g. after the screen showing
    it is torn down and recreated.
    """
    cells: Tuple[Tuple[Cell, ...], ...]
    turn_count: int
    current_mark: Cell
    mode: GameMode
    difficulty: Difficulty
    player1_score: int
    player2_score: int
    state: RoundState
    verdict: Outcome
    moves: Tuple[Move, ...] = field(default_factory=tuple)


class GameSession:
    """
    One match of TicTacToe: a sequence of rounds sharing running scores.

    Player 1 plays X and always moves first; player 2 plays O (the computer
    in single player mode). Mode and difficulty are fixed when the session
    is created.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.SINGLE_PLAYER,
        difficulty: Difficulty = Difficulty.HARD,
        config: Optional[GameConfig] = None
    ):
        """
        Start a session with an empty board and zero scores.

        Args:
            mode: Single player (against the computer) or two player.
            difficulty: AI policy, only used in single player mode.
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self._mode = mode
        self._difficulty = difficulty

        self._board = Board(self.config)
        self.win_checker = WinChecker()
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.config)

        self.player1_score = 0
        self.player2_score = 0

        self.turn_count = 0
        self.current_mark = Cell.X
        self.state = RoundState.AWAITING_MOVE
        self.verdict = Outcome.NONE
        self.moves: List[Move] = []

    # ==================== ACCESSORS ====================

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def board(self) -> Board:
        return self._board

    def board_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Current board as an immutable grid."""
        return self._board.cells()

    @property
    def is_round_over(self) -> bool:
        return self.state == RoundState.ROUND_OVER

    @property
    def is_computer_turn(self) -> bool:
        """True if the computer should move next."""
        return (
            self._mode == GameMode.SINGLE_PLAYER
            and not self.is_round_over
            and self.current_mark == COMPUTER_MARK
        )

    # ==================== MOVES ====================

    def submit_move(self, row: int, col: int) -> Outcome:
        """
        Place the current player's mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The verdict after the move (Outcome.NONE if the round goes on).

        Raises:
            RoundAlreadyOver: If the round already has a verdict.
            InvalidCoordinate: If the position is off the board.
            CellOccupied: If the cell already holds a mark.
        """
        result = self.validator.validate_move(self, row, col)
        if not result.is_valid:
            raise result.error

        mark = self.current_mark
        self._board.set(row, col, mark)
        self.turn_count += 1
        self.moves.append(Move(row=row, col=col, mark=mark, turn_number=self.turn_count))

        outcome = self.win_checker.evaluate(self._board)

        if outcome in (Outcome.X_WINS, Outcome.O_WINS) \
                and self.turn_count >= self.config.MIN_TURNS_FOR_WIN:
            self._finish_round(outcome)
        elif outcome == Outcome.DRAW and self.turn_count == self.config.MAX_TURNS:
            self._finish_round(outcome)
        else:
            self.current_mark = mark.opposite()

        return self.verdict

    def request_ai_move(self) -> Tuple[int, int]:
        """
        Let the computer play its move.

        Returns:
            (row, col) where the computer placed its O.

        Raises:
            InvalidAITurn: If not in single player mode, the round is over,
                or it is the human's turn.
        """
        if self._mode != GameMode.SINGLE_PLAYER:
            raise InvalidAITurn("not a single player game")
        if self.is_round_over:
            raise InvalidAITurn("the round is over")
        if self.current_mark != COMPUTER_MARK:
            raise InvalidAITurn("it is the human's turn")

        row, col = self.ai.choose_move(self._board, self.turn_count, self._difficulty)
        self.submit_move(row, col)
        return row, col

    def _finish_round(self, outcome: Outcome):
        self.state = RoundState.ROUND_OVER
        self.verdict = outcome

        if outcome == Outcome.X_WINS:
            self.player1_score += 1
        elif outcome == Outcome.O_WINS:
            self.player2_score += 1

    # ==================== RESETS ====================

    def reset_round(self):
        """Clear the board for a new round. Scores are kept."""
        self._board.reset()
        self.turn_count = 0
        self.current_mark = Cell.X
        self.state = RoundState.AWAITING_MOVE
        self.verdict = Outcome.NONE
        self.moves = []

    def reset_scores(self):
        """Set both scores back to 0. The current round is untouched."""
        self.player1_score = 0
        self.player2_score = 0

    # ==================== SNAPSHOTS ====================

    def snapshot(self) -> SessionSnapshot:
        """Capture the whole session."""
        return SessionSnapshot(
            cells=self._board.cells(),
            turn_count=self.turn_count,
            current_mark=self.current_mark,
            mode=self._mode,
            difficulty=self._difficulty,
            player1_score=self.player1_score,
            player2_score=self.player2_score,
            state=self.state,
            verdict=self.verdict,
            moves=tuple(self.moves)
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: SessionSnapshot,
        config: Optional[GameConfig] = None
    ) -> "GameSession":
        """Rebuild a session from snapshot()."""
        session = cls(snapshot.mode, snapshot.difficulty, config)
        for row, line in enumerate(snapshot.cells):
            for col, cell in enumerate(line):
                session._board.grid[row][col] = cell
        session.turn_count = snapshot.turn_count
        session.current_mark = snapshot.current_mark
        session.player1_score = snapshot.player1_score
        session.player2_score = snapshot.player2_score
        session.state = snapshot.state
        session.verdict = snapshot.verdict
        session.moves = list(snapshot.moves)
        return session
