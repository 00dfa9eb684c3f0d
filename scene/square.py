"""
Board squares for VR TicTacToe.
Each square turns a controller trigger into a move request.
"""

from enum import Enum

import numpy as np

from logic.models import MoveResult, Player


class Trigger(Enum):
    """Which controller trigger was pressed."""
    LEFT = "left"     # Places X
    RIGHT = "right"   # Places O

    @property
    def player(self) -> Player:
        return Player.X if self == Trigger.LEFT else Player.O


class Square:
    """
    One cell of the board in the scene.

    Knows its grid position and world position and forwards trigger
    presses to the session that owns it.
    """

    def __init__(self, row: int, col: int, position, manager):
        """
        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            position: World position of the square's center.
            manager: Object with
                make_move_with_trigger(row, col, position, player, trigger=None).
        """
        self.row = row
        self.col = col
        self.position = np.asarray(position, dtype=float)
        self.manager = manager

    def press(self, trigger: Trigger) -> MoveResult:
        """Handle a trigger press while this square is targeted."""
        return self.manager.make_move_with_trigger(
            self.row,
            self.col,
            self.position,
            trigger.player,
            trigger=trigger
        )

    def __repr__(self):
        return f"Square(row={self.row}, col={self.col})"
