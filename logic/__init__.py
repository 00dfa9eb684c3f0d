"""
Logic module for VR TicTacToe.
Handles game state, rules, and win/draw detection.
"""

from .models import (
    BOARD_SIZE,
    GameMode,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
    RejectReason,
)
from .game_state import GameState
from .move_validator import InvalidCoordinatesError, MoveValidator, ValidationResult
from .win_checker import WinChecker
