"""
Piece spawner for VR TicTacToe.
Keeps track of the X/O pieces placed in the scene.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from logic.models import Player
from .config import SceneConfig


@dataclass(eq=False)
class SpawnedPiece:
    """
    A piece sitting in the scene.
    """
    player: Player                        # X or O
    position: np.ndarray                  # World position (x, y, z)
    rotation: Tuple[float, float, float]  # Euler angles in degrees
    tag: str                              # Used to find pieces on reset


class PieceSpawner:
    """
    Spawns and destroys the visual pieces.

    No engine is driven here; pieces are recorded so the rest of the game
    (and the tests) can see what would be on the board.
    """

    def __init__(self, config: Optional[SceneConfig] = None, verbose: bool = True):
        """
        Initialize the spawner.

        Args:
            config: Scene configuration.
            verbose: Print a line for every spawn/clear.
        """
        self.config = config or SceneConfig()
        self.verbose = verbose
        self.pieces: List[SpawnedPiece] = []

    def spawn(self, player: Player, square_position) -> Optional[SpawnedPiece]:
        """
        Spawn a piece on top of a square.

        Args:
            player: Which piece to spawn (X or O).
            square_position: World position of the square.

        Returns:
            The spawned piece, or None if there is no piece for `player`.
        """
        if player not in (Player.X, Player.O):
            print(f"ERROR: No piece available for player {player.name}!")
            return None

        position = np.asarray(square_position, dtype=float) + self.config.piece_offset()
        piece = SpawnedPiece(
            player=player,
            position=position,
            rotation=tuple(self.config.PIECE_ROTATION),
            tag=self.config.PIECE_TAG
        )
        self.pieces.append(piece)

        if self.verbose:
            x, y, z = position
            print(f"Spawned {player.name} piece at ({x:.2f}, {y:.2f}, {z:.2f})")

        return piece

    def find_with_tag(self, tag: Optional[str] = None) -> List[SpawnedPiece]:
        """Get all pieces carrying `tag` (defaults to the configured piece tag)."""
        tag = tag or self.config.PIECE_TAG
        return [piece for piece in self.pieces if piece.tag == tag]

    def clear(self) -> int:
        """
        Destroy all spawned game pieces.

        Returns:
            How many pieces were removed.
        """
        doomed = self.find_with_tag()
        self.pieces = [piece for piece in self.pieces if piece.tag != self.config.PIECE_TAG]

        if self.verbose:
            print(f"Removed {len(doomed)} pieces from the board")

        return len(doomed)
