"""
Game state management for VR TicTacToe.
Tracks the board, current player, status and move history.
"""

from typing import Optional, List, Tuple

import numpy as np

from .models import (
    BOARD_SIZE,
    GameMode,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is where)
    - Current player (strict-turns mode only)
    - Game status (in progress, won, drawn) and the winner
    - Move history

    The board only changes through submit_move() and reset(). Rejected
    moves come back as MoveResult values, nothing is printed here.
    """

    def __init__(self, mode: GameMode = GameMode.STRICT_TURNS):
        """
        Initialize the game.

        Args:
            mode: Turn rules, fixed for the lifetime of this object.
        """
        self._mode = mode
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.moves: List[Move] = []

    @property
    def mode(self) -> GameMode:
        return self._mode

    def current_player(self) -> Player:
        """
        Whose turn it is.

        Only tracked in strict-turns mode. In free-play this stays at X and
        should not be relied on.
        """
        return self._current_player

    def is_game_over(self) -> bool:
        """True once somebody has won or the board filled up."""
        return self.status != GameStatus.IN_PROGRESS

    def submit_move(
        self,
        row: int,
        col: int,
        player: Optional[Player] = None
    ) -> MoveResult:
        """
        Try to place a mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: Mark to place. Required in free-play; in strict-turns
                mode it defaults to the current player and is otherwise
                checked against it.

        Returns:
            A rejected MoveResult (board unchanged) or an accepted one with
            the outcome of the move.

        Raises:
            InvalidCoordinatesError: if row/col are off the board.
            ValueError: if player is not usable for this mode.
        """
        validation = self.validator.validate_move(self, row, col, player)
        player = validation.player

        if not validation.is_valid:
            return MoveResult.rejected(
                row, col, validation.reason, player, validation.error_message
            )

        # Place the mark
        self.board[row, col] = int(player)
        self.moves.append(Move(
            player=player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        # Win is checked before draw: a full board with a line is a win
        winning_line = self.win_checker.get_winning_line(self.board, player)
        if winning_line is not None:
            self.status = GameStatus.WON
            self.winner = player
            return MoveResult.placed(row, col, player, MoveOutcome.WIN, winning_line)

        if self.win_checker.is_board_full(self.board):
            self.status = GameStatus.DRAWN
            return MoveResult.placed(row, col, player, MoveOutcome.DRAW)

        # Switch to next player (only in turn-based mode)
        if self._mode == GameMode.STRICT_TURNS:
            self._current_player = self._current_player.opposite()

        return MoveResult.placed(row, col, player, MoveOutcome.CONTINUE)

    def reset(self):
        """Clear the board and start over with X to move. Safe to call any time."""
        self.board.fill(int(Player.NONE))
        self._current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner = None
        self.moves.clear()

    def get_cell(self, row: int, col: int) -> Player:
        """Get the mark at (row, col)."""
        return Player(int(self.board[row, col]))

    def get_board(self) -> np.ndarray:
        """Get a copy of the board."""
        return self.board.copy()

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        rows, cols = np.nonzero(self.board == int(Player.NONE))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        new_state = GameState(self._mode)
        new_state.board = self.board.copy()
        new_state._current_player = self._current_player
        new_state.status = self.status
        new_state.winner = self.winner
        new_state.moves = list(self.moves)
        return new_state

    def board_to_string(self) -> str:
        """Render the board as text, with row/column indices."""
        lines = ["  0   1   2", "┌───┬───┬───┐"]

        for row in range(BOARD_SIZE):
            cells = " │ ".join(self.get_cell(row, col).symbol for col in range(BOARD_SIZE))
            lines.append(f"│ {cells} │ {row}")

            if row < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board_to_string())

        # Print game info
        if self.status == GameStatus.WON:
            print(f"\n🏆 {self.winner.name} WINS!")
        elif self.status == GameStatus.DRAWN:
            print("\n🤝 It's a DRAW!")
        elif self._mode == GameMode.STRICT_TURNS:
            print(f"\nCurrent turn: {self._current_player.name}")
