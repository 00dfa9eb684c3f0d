"""
Win checker for VR TicTacToe.
Checks if a player has completed a line or if the board is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .models import Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self):
        # Index arrays so each line can be pulled out of the board in one go
        self._line_rows = np.array([[r for r, _ in line] for line in self.WINNING_LINES])
        self._line_cols = np.array([[c for _, c in line] for line in self.WINNING_LINES])

    def _line_matches(self, board: np.ndarray, player: Player) -> np.ndarray:
        """Boolean array, one entry per line, True where the line is all `player`."""
        return np.all(board[self._line_rows, self._line_cols] == int(player), axis=1)

    def check_win(self, board: np.ndarray, player: Player) -> bool:
        """
        Check if a player owns any full line.

        Args:
            board: 3x3 board array.
            player: The player to check (usually the one who just moved).

        Returns:
            True if every cell of some line belongs to `player`.
        """
        if player == Player.NONE:
            return False
        return bool(self._line_matches(board, player).any())

    def get_winning_line(
        self,
        board: np.ndarray,
        player: Player
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first line completed by `player`, or None.
        """
        if player == Player.NONE:
            return None
        matches = np.flatnonzero(self._line_matches(board, player))
        if matches.size == 0:
            return None
        return list(self.WINNING_LINES[int(matches[0])])

    def check_winner(self, board: np.ndarray) -> Optional[Player]:
        """
        Check if there's a winner on the board.

        Args:
            board: 3x3 board array.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.X, Player.O):
            if self.check_win(board, player):
                return player

        return None

    def is_board_full(self, board: np.ndarray) -> bool:
        """True if no cell is empty."""
        return bool(np.all(board != int(Player.NONE)))

    def check_draw(self, board: np.ndarray) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody owns a line.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_board_full(board)
