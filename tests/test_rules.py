import itertools

import numpy as np
import pytest

from logic.game_state import GameState
from logic.models import GameMode, Player, RejectReason
from logic.move_validator import InvalidCoordinatesError, MoveValidator
from logic.win_checker import WinChecker


def make_board(rows):
    marks = {".": Player.NONE, "X": Player.X, "O": Player.O}
    return np.array([[int(marks[ch]) for ch in row] for row in rows], dtype=np.int8)


@pytest.fixture
def checker():
    return WinChecker()


def test_eight_winning_lines(checker):
    assert len(checker.WINNING_LINES) == 8
    assert len({tuple(line) for line in checker.WINNING_LINES}) == 8


def test_horizontal_win(checker):
    board = make_board(["XXX", ".O.", "O.."])

    assert checker.check_win(board, Player.X)
    assert not checker.check_win(board, Player.O)
    assert checker.check_winner(board) == Player.X
    assert checker.get_winning_line(board, Player.X) == [(0, 0), (0, 1), (0, 2)]


def test_vertical_win(checker):
    board = make_board(["OX.", "OX.", "O.."])

    assert checker.check_winner(board) == Player.O
    assert checker.get_winning_line(board, Player.O) == [(0, 0), (1, 0), (2, 0)]


def test_anti_diagonal_win(checker):
    board = make_board(["O.X", ".X.", "XO."])

    assert checker.get_winning_line(board, Player.X) == [(0, 2), (1, 1), (2, 0)]


def test_no_winner(checker):
    board = make_board(["XO.", ".O.", "..."])

    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board, Player.O) is None
    assert not checker.check_draw(board)


def test_empty_never_wins(checker):
    board = make_board(["...", "...", "..."])

    assert not checker.check_win(board, Player.NONE)
    assert checker.get_winning_line(board, Player.NONE) is None


def test_draw(checker):
    board = make_board(["XOX", "XOO", "OXX"])

    assert checker.is_board_full(board)
    assert checker.check_draw(board)


def test_full_board_with_line_is_not_draw(checker):
    board = make_board(["XOX", "OOX", "OXX"])

    assert checker.is_board_full(board)
    assert not checker.check_draw(board)


def test_validator_reports_reason_and_message():
    validator = MoveValidator()
    game = GameState(GameMode.STRICT_TURNS)
    game.submit_move(1, 1)

    occupied = validator.validate_move(game, 1, 1)
    wrong_turn = validator.validate_move(game, 0, 0, Player.X)
    ok = validator.validate_move(game, 0, 0)

    assert occupied.reason == RejectReason.CELL_OCCUPIED
    assert "already occupied by X" in occupied.error_message
    assert wrong_turn.reason == RejectReason.NOT_YOUR_TURN
    assert "Current turn: O" in wrong_turn.error_message
    assert ok.is_valid and ok.player == Player.O


def test_validator_does_not_touch_state():
    validator = MoveValidator()
    game = GameState(GameMode.FREE_PLAY)

    validator.validate_move(game, 2, 2, Player.O)

    assert game.get_cell(2, 2) == Player.NONE
    assert game.moves == []


def test_valid_moves():
    validator = MoveValidator()
    game = GameState(GameMode.FREE_PLAY)
    game.submit_move(0, 0, Player.X)

    assert (0, 0) not in validator.get_valid_moves(game)
    assert len(validator.get_valid_moves(game)) == 8

    game.submit_move(1, 1, Player.X)
    game.submit_move(2, 2, Player.X)

    assert validator.get_valid_moves(game) == []


def test_invalid_coordinates_error_carries_position():
    with pytest.raises(InvalidCoordinatesError) as excinfo:
        MoveValidator.check_coordinates(3, -1)

    assert (excinfo.value.row, excinfo.value.col) == (3, -1)
    assert isinstance(excinfo.value, ValueError)


def test_draw_matches_no_uniform_line_on_every_full_board(checker):
    for cells in itertools.product((Player.X, Player.O), repeat=9):
        board = np.array([int(c) for c in cells], dtype=np.int8).reshape(3, 3)
        has_line = any(
            len({cells[r * 3 + c] for r, c in line}) == 1
            for line in checker.WINNING_LINES
        )

        assert checker.check_draw(board) == (not has_line), cells
