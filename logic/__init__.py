"""
Logic module for TicTacToe.
Handles the board, rules, game session and AI opponent.
"""

from .config import GameConfig
from .exceptions import (
    GameError,
    InvalidCoordinate,
    CellOccupied,
    RoundAlreadyOver,
    InvalidAITurn,
)
from .board import Board, Cell
from .win_checker import WinChecker, Outcome
from .minimax import Minimax
from .ai_player import AIPlayer, Difficulty
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameSession, GameMode, RoundState, Move, SessionSnapshot
