"""
Main orchestration script for VR TicTacToe.

This script ties together:
- Logic (game state, move validation, win/draw detection)
- Scene (board squares, spawning and clearing pieces)

Run this script to play from a terminal: each command stands in for
pointing at a square and pulling a trigger.
"""

from typing import Optional, List, Tuple

from logic.game_state import GameState
from logic.models import GameMode, MoveResult, Player
from logic.move_validator import InvalidCoordinatesError, MoveValidator

from scene.config import SceneConfig
from scene.pieces import PieceSpawner
from scene.square import Square, Trigger


class TicTacToeSession:
    """
    Main controller for one VR TicTacToe board.

    Game flow:
    1. A square is targeted and a trigger pressed (left = X, right = O)
    2. The game state validates and applies the move
    3. On acceptance a piece is spawned on the square
    4. Win/draw ends the game until reset_game() is called
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        config: Optional[SceneConfig] = None,
        verbose: bool = True
    ):
        """
        Initialize the session.

        Args:
            mode: Turn rules. Defaults to the one implied by the config.
            config: Scene configuration.
            verbose: Print game progress to the console.
        """
        self.config = config or SceneConfig()
        self.verbose = verbose

        self.game_state = GameState(mode or self.config.default_mode())
        self.spawner = PieceSpawner(self.config, verbose=verbose)

        # One square per cell, each wired back to this session
        self.squares: List[List[Square]] = [
            [
                Square(row, col, self.config.cell_to_xyz(row, col), self)
                for col in range(self.config.BOARD_SIZE)
            ]
            for row in range(self.config.BOARD_SIZE)
        ]

        self._log("VR Tic-Tac-Toe game started.")
        if self.mode == GameMode.STRICT_TURNS:
            self._log(f"Turn-based mode. Current player: {self.game_state.current_player().name}")
        else:
            self._log("Free-play mode. Left trigger = X, Right trigger = O")

    @property
    def mode(self) -> GameMode:
        return self.game_state.mode

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def get_square(self, row: int, col: int) -> Square:
        """
        Get the square at (row, col).

        Raises:
            InvalidCoordinatesError: if (row, col) is off the board.
        """
        MoveValidator.check_coordinates(row, col)
        return self.squares[row][col]

    def press(self, row: int, col: int, trigger: Trigger) -> MoveResult:
        """Press a trigger while pointing at square (row, col)."""
        return self.get_square(row, col).press(trigger)

    def make_move_with_trigger(
        self,
        row: int,
        col: int,
        square_position,
        player: Player,
        trigger: Optional[Trigger] = None
    ) -> MoveResult:
        """
        Process a move request coming from a square.

        Args:
            row: Row of the square.
            col: Column of the square.
            square_position: World position to spawn the piece at.
            player: Mark picked by the trigger.
            trigger: Trigger that was pressed, if the request came from one.

        Returns:
            The MoveResult from the game state.
        """
        result = self.game_state.submit_move(row, col, player)

        if not result.accepted:
            self._log(result.message)
            return result

        placed = f"Player {result.player.name} placed at [{row}, {col}]"
        if trigger is not None:
            placed += f" using {trigger.value} trigger"
        self._log(placed)
        self.spawner.spawn(result.player, square_position)

        if result.is_win:
            self._log(f"Player {result.player.name} wins!")
        elif result.is_draw:
            self._log("It's a draw!")
        elif self.mode == GameMode.STRICT_TURNS:
            self._log(f"Current player is now: {self.game_state.current_player().name}")

        return result

    def reset_game(self):
        """Reset the game and remove every spawned piece."""
        self.game_state.reset()
        self.spawner.clear()

        self._log("Game reset!")
        if self.mode == GameMode.STRICT_TURNS:
            self._log(f"Current player: {self.game_state.current_player().name}")


# Console commands: x/o ROW COL place a mark, r resets, b shows the board, q quits
COMMAND_TRIGGERS = {
    "x": Trigger.LEFT,
    "o": Trigger.RIGHT,
}


def parse_command(line: str) -> Tuple[str, Optional[Trigger], Optional[int], Optional[int]]:
    """
    Parse a console command.

    Returns:
        (command, trigger, row, col). command is "move", "reset", "board"
        or "quit"; trigger/row/col are only set for moves.

    Raises:
        ValueError: for anything that isn't a known command.
    """
    parts = line.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")

    name = parts[0]
    if name in ("q", "quit"):
        return "quit", None, None, None
    if name in ("r", "reset"):
        return "reset", None, None, None
    if name in ("b", "board"):
        return "board", None, None, None

    if name in COMMAND_TRIGGERS:
        if len(parts) != 3:
            raise ValueError(f"Usage: {name} ROW COL")
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            raise ValueError(f"Row and column must be numbers, got '{parts[1]} {parts[2]}'")
        return "move", COMMAND_TRIGGERS[name], row, col

    raise ValueError(f"Unknown command '{parts[0]}'")


def run_console(session: TicTacToeSession, read_line=None):
    """
    Play on the console until the user quits.

    Args:
        session: The session to drive.
        read_line: Function returning the next input line. Defaults to input().
    """
    read_line = read_line or input
    print("Commands: x ROW COL (left trigger), o ROW COL (right trigger), "
          "r = reset, b = board, q = quit\n")

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break

        try:
            command, trigger, row, col = parse_command(line)
        except ValueError as e:
            print(f"ERROR: {e}")
            continue

        if command == "quit":
            break
        if command == "reset":
            session.reset_game()
            continue
        if command == "board":
            session.game_state.print_board()
            continue

        try:
            result = session.press(row, col, trigger)
        except InvalidCoordinatesError as e:
            print(f"ERROR: {e}")
            continue

        if result.accepted:
            session.game_state.print_board()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="VR TicTacToe (console)")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--strict-turns",
        action="store_true",
        help="Players must alternate, X first"
    )
    mode_group.add_argument(
        "--free-play",
        action="store_true",
        help="Either trigger may place a piece at any time"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only show the board"
    )

    args = parser.parse_args(argv)

    mode = None
    if args.strict_turns:
        mode = GameMode.STRICT_TURNS
    elif args.free_play:
        mode = GameMode.FREE_PLAY

    session = TicTacToeSession(mode=mode, verbose=not args.quiet)

    try:
        run_console(session)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
