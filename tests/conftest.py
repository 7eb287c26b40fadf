import pytest

from connect_four.core.config import reset_settings
from connect_four.core.types import Player


# Alternating A/B fill of a 6x7 grid that never lines up four:
# columns 0, 1, 4, 5 read A,B,A,B,A,B from the bottom, columns 2, 3, 6 read B,A,...
DRAW_SEQUENCE = [0, 2, 1, 3, 4, 6, 5, 0, 2, 1, 3, 4, 6, 5] * 3


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate tests from the developer's .env and GAME_/PLAYER_ variables."""
    monkeypatch.chdir(tmp_path)
    for key in ("GAME_HEIGHT", "GAME_WIDTH", "GAME_WIN_LENGTH",
                "PLAYER_P1_COLOR", "PLAYER_P2_COLOR", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def red():
    return Player(color="red")


@pytest.fixture
def blue():
    return Player(color="blue")


def play(game, columns):
    """Drop pieces into each column in turn; return the list of results."""
    return [game.drop_piece(column) for column in columns]
