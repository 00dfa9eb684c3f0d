"""
Scene module for VR TicTacToe.
Handles board placement, squares, and spawning pieces.
"""

from .config import SceneConfig
from .pieces import PieceSpawner, SpawnedPiece
from .square import Square, Trigger
