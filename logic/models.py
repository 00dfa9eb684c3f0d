"""
Shared types for the tic-tac-toe game core.
Players, modes, statuses and the result of a move request.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass


# The board is always 3x3
BOARD_SIZE = 3


class Player(IntEnum):
    """
    A cell value / game mark.

    NONE marks an empty cell. The integer values are what the board
    array stores.
    """
    NONE = 0
    X = 1
    O = 2

    def opposite(self) -> "Player":
        """Get the opposite player (NONE stays NONE)."""
        if self == Player.X:
            return Player.O
        if self == Player.O:
            return Player.X
        return Player.NONE

    @property
    def symbol(self) -> str:
        """Single character used when printing the board."""
        return " " if self == Player.NONE else self.name


class GameMode(Enum):
    """How turns are enforced."""
    STRICT_TURNS = "strict-turns"   # Players alternate, X first
    FREE_PLAY = "free-play"         # Either symbol may play any time


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class MoveOutcome(Enum):
    """What an accepted move did to the game."""
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


class RejectReason(Enum):
    """Why a move request was turned down."""
    GAME_ALREADY_OVER = "game_already_over"
    CELL_OCCUPIED = "cell_occupied"
    NOT_YOUR_TURN = "not_your_turn"


@dataclass
class Move:
    """
    An accepted move.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # 0-based index in the game


@dataclass
class MoveResult:
    """
    Result of a move request.

    Rejected results carry a reason and leave the board untouched.
    Accepted results carry the placed symbol and the outcome; a winning
    move also carries the line it completed.
    """
    accepted: bool
    row: int
    col: int
    player: Player = Player.NONE
    outcome: Optional[MoveOutcome] = None
    reason: Optional[RejectReason] = None
    winning_line: Optional[List[Tuple[int, int]]] = None
    message: Optional[str] = None          # Why a move was rejected, readable

    @classmethod
    def rejected(cls, row: int, col: int, reason: RejectReason,
                 player: Player = Player.NONE,
                 message: Optional[str] = None) -> "MoveResult":
        return cls(
            accepted=False,
            row=row,
            col=col,
            player=player,
            reason=reason,
            message=message
        )

    @classmethod
    def placed(cls, row: int, col: int, player: Player, outcome: MoveOutcome,
               winning_line: Optional[List[Tuple[int, int]]] = None) -> "MoveResult":
        return cls(
            accepted=True,
            row=row,
            col=col,
            player=player,
            outcome=outcome,
            winning_line=winning_line
        )

    @property
    def is_win(self) -> bool:
        return self.accepted and self.outcome == MoveOutcome.WIN

    @property
    def is_draw(self) -> bool:
        return self.accepted and self.outcome == MoveOutcome.DRAW

    @property
    def ends_game(self) -> bool:
        """True if this move finished the game."""
        return self.is_win or self.is_draw
