import pytest

from logic.game_state import GameState
from logic.models import GameMode
from main import TicTacToeSession


@pytest.fixture
def strict_game():
    return GameState(GameMode.STRICT_TURNS)


@pytest.fixture
def free_game():
    return GameState(GameMode.FREE_PLAY)


@pytest.fixture
def strict_session():
    return TicTacToeSession(mode=GameMode.STRICT_TURNS, verbose=False)


@pytest.fixture
def free_session():
    return TicTacToeSession(mode=GameMode.FREE_PLAY, verbose=False)
