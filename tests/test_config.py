import pytest
from pydantic import ValidationError

from connect_four.core.config import (
    GameSettings,
    LogLevel,
    LogSettings,
    get_settings,
    reset_settings,
)


def test_defaults():
    settings = get_settings()
    assert (settings.game.height, settings.game.width) == (6, 7)
    assert settings.game.win_length == 4
    assert settings.players.p1_color != settings.players.p2_color
    assert settings.log.level == "INFO"


def test_singleton():
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GAME_HEIGHT", "5")
    monkeypatch.setenv("GAME_WIDTH", "8")
    monkeypatch.setenv("PLAYER_P1_COLOR", "purple")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert (settings.game.height, settings.game.width) == (5, 8)
    assert settings.players.p1_color == "purple"
    assert settings.log.level == "DEBUG"


def test_dotenv_file(tmp_path):
    # conftest switches the working directory to tmp_path
    (tmp_path / ".env").write_text("GAME_WIDTH=9\nPLAYER_P2_COLOR=teal\n", encoding="utf-8")

    settings = get_settings()

    assert settings.game.width == 9
    assert settings.players.p2_color == "teal"
    assert GameSettings(_env_file=None).width == 7


def test_rejects_empty_board(monkeypatch):
    monkeypatch.setenv("GAME_HEIGHT", "0")
    with pytest.raises(ValidationError):
        GameSettings()


def test_log_level_is_validated(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        LogSettings()

    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert LogSettings().level is LogLevel.WARNING
