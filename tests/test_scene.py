import numpy as np
import pytest

from logic.models import GameMode, Player
from scene.config import SceneConfig
from scene.pieces import PieceSpawner
from scene.square import Square, Trigger


class RecordingManager:
    def __init__(self):
        self.calls = []

    def make_move_with_trigger(self, row, col, position, player, trigger=None):
        self.calls.append((row, col, tuple(position), player, trigger))
        return "result"


def test_cell_to_xyz_spacing():
    first = SceneConfig.cell_to_xyz(0, 0)
    right = SceneConfig.cell_to_xyz(0, 1)
    down = SceneConfig.cell_to_xyz(1, 0)

    assert np.allclose(right - first, [SceneConfig.CELL_SIZE, 0, 0])
    assert np.allclose(down - first, [0, 0, SceneConfig.CELL_SIZE])
    assert first[1] == pytest.approx(SceneConfig.BOARD_ORIGIN_Y)


def test_default_mode_follows_allow_both_players():
    class TurnBased(SceneConfig):
        ALLOW_BOTH_PLAYERS = False

    assert SceneConfig.default_mode() == GameMode.FREE_PLAY
    assert TurnBased.default_mode() == GameMode.STRICT_TURNS


def test_spawn_applies_offset_rotation_and_tag():
    spawner = PieceSpawner(verbose=False)

    piece = spawner.spawn(Player.O, [1.0, 2.0, 3.0])

    assert piece.player == Player.O
    assert np.allclose(piece.position, [1.0, 2.0 + SceneConfig.PIECE_Y_OFFSET, 3.0])
    assert piece.rotation == (-90, 0, 0)
    assert piece.tag == "GamePiece"
    assert spawner.pieces == [piece]


def test_spawn_without_piece_for_player(capsys):
    spawner = PieceSpawner(verbose=False)

    assert spawner.spawn(Player.NONE, [0, 0, 0]) is None
    assert spawner.pieces == []
    assert "ERROR" in capsys.readouterr().out


def test_clear_removes_only_tagged_pieces():
    spawner = PieceSpawner(verbose=False)
    spawner.spawn(Player.X, [0, 0, 0])
    spawner.spawn(Player.O, [1, 0, 0])
    spawner.pieces[1].tag = "Decoration"

    removed = spawner.clear()

    assert removed == 1
    assert [p.tag for p in spawner.pieces] == ["Decoration"]
    assert spawner.clear() == 0


def test_spawn_prints_position_when_verbose(capsys):
    spawner = PieceSpawner(verbose=True)

    spawner.spawn(Player.X, [0.0, 0.5, 1.0])

    assert "Spawned X piece at (0.00, 0.60, 1.00)" in capsys.readouterr().out


@pytest.mark.parametrize("trigger, player", [(Trigger.LEFT, Player.X), (Trigger.RIGHT, Player.O)])
def test_square_forwards_trigger(trigger, player):
    manager = RecordingManager()
    square = Square(2, 1, [0.1, 0.2, 0.3], manager)

    assert square.press(trigger) == "result"
    assert manager.calls == [(2, 1, (0.1, 0.2, 0.3), player, trigger)]


def test_spawned_pieces_compare_by_identity():
    spawner = PieceSpawner(verbose=False)
    first = spawner.spawn(Player.X, [0, 0, 0])
    second = spawner.spawn(Player.X, [0, 0, 0])

    assert first == first
    assert first != second
    assert spawner.pieces.index(second) == 1
