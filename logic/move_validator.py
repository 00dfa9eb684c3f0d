"""
Move validator for VR TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List, TYPE_CHECKING
from dataclasses import dataclass

import numpy as np

from .models import BOARD_SIZE, GameMode, Player, RejectReason

if TYPE_CHECKING:
    from .game_state import GameState


class InvalidCoordinatesError(ValueError):
    """Raised when a move targets a cell outside the 3x3 grid."""

    def __init__(self, row, col):
        super().__init__(
            f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        )
        self.row = row
        self.col = col


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    player: Player = Player.NONE
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order (first failure wins):
    1. Game must not be over
    2. Can only place on empty cells
    3. In strict-turns mode, only the current player may move
    """

    @staticmethod
    def check_coordinates(row, col):
        """
        Make sure (row, col) is on the board.

        Raises:
            InvalidCoordinatesError: if either index is not an int in 0-2.
        """
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidCoordinatesError(row, col)
            if not 0 <= value < BOARD_SIZE:
                raise InvalidCoordinatesError(row, col)

    @staticmethod
    def resolve_player(game_state: "GameState", player: Optional[Player]) -> Player:
        """
        Work out which mark a move request places.

        In free-play the caller has to name X or O. In strict-turns mode a
        missing player means "whoever's turn it is"; a named one is kept so
        it can be checked against the current player.

        Raises:
            ValueError: if the player is missing (free-play) or not X/O.
        """
        if player is None:
            if game_state.mode == GameMode.FREE_PLAY:
                raise ValueError("Free-play moves must say which player is placing")
            return game_state.current_player()

        if not isinstance(player, Player) or player == Player.NONE:
            raise ValueError(f"Cannot place {player!r}, expected Player.X or Player.O")

        return player

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).
            player: Mark to place (see resolve_player).

        Returns:
            ValidationResult with is_valid, the resolved player and, when
            invalid, the reason and a readable message.

        Raises:
            InvalidCoordinatesError: for cells outside the grid.
            ValueError: for an unusable player argument.
        """
        self.check_coordinates(row, col)
        player = self.resolve_player(game_state, player)

        # Check if game is over
        if game_state.is_game_over():
            return ValidationResult(
                is_valid=False,
                player=player,
                reason=RejectReason.GAME_ALREADY_OVER,
                error_message="Game has already ended!"
            )

        # Check if cell is empty
        occupant = game_state.get_cell(row, col)
        if occupant != Player.NONE:
            return ValidationResult(
                is_valid=False,
                player=player,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Square [{row}, {col}] is already occupied by {occupant.name}"
            )

        # Check whose turn it is
        if (game_state.mode == GameMode.STRICT_TURNS
                and player != game_state.current_player()):
            return ValidationResult(
                is_valid=False,
                player=player,
                reason=RejectReason.NOT_YOUR_TURN,
                error_message=(
                    f"It's not {player.name}'s turn! "
                    f"Current turn: {game_state.current_player().name}"
                )
            )

        # All checks passed!
        return ValidationResult(is_valid=True, player=player)

    def get_valid_moves(self, game_state: "GameState") -> List[Tuple[int, int]]:
        """
        Get all cells a move could go to right now.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if game_state.is_game_over():
            return []

        return game_state.get_empty_cells()
