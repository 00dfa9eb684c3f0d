"""
Scene configuration for VR TicTacToe.
Board placement in world space and how pieces are spawned.
"""

import numpy as np

from logic.models import BOARD_SIZE, GameMode


class SceneConfig:
    """
    Configuration for the VR scene.

    World space is Y-up. All distances are in METERS.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE

    # Board origin (corner of square [0, 0])
    # x = left/right, y = table height, z = away from the player
    BOARD_ORIGIN_X = -0.45
    BOARD_ORIGIN_Y = 0.75
    BOARD_ORIGIN_Z = 0.50

    # Size of one square
    CELL_SIZE = 0.30

    # ==================== PIECE SETTINGS ====================
    PIECE_Y_OFFSET = 0.1            # Height offset for pieces above the square
    PIECE_ROTATION = (-90, 0, 0)    # Euler angles (degrees) for spawned pieces
    PIECE_TAG = "GamePiece"         # Tag used to find pieces again on reset

    # ==================== TURN SETTINGS ====================
    # If False, alternates turns. If True, either trigger may play anytime
    ALLOW_BOTH_PLAYERS = True

    @classmethod
    def default_mode(cls) -> GameMode:
        """Game mode implied by ALLOW_BOTH_PLAYERS."""
        return GameMode.FREE_PLAY if cls.ALLOW_BOTH_PLAYERS else GameMode.STRICT_TURNS

    @classmethod
    def cell_to_xyz(cls, row: int, col: int) -> np.ndarray:
        """
        Convert a square position to world coordinates.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            Center of the square as a numpy (x, y, z) vector.
        """
        x = cls.BOARD_ORIGIN_X + (col + 0.5) * cls.CELL_SIZE
        y = cls.BOARD_ORIGIN_Y
        z = cls.BOARD_ORIGIN_Z + (row + 0.5) * cls.CELL_SIZE

        return np.array([x, y, z], dtype=float)

    @classmethod
    def piece_offset(cls) -> np.ndarray:
        """Offset added to a square's position when spawning a piece on it."""
        return np.array([0.0, cls.PIECE_Y_OFFSET, 0.0])
