import pytest
from conftest import DRAW_SEQUENCE

from connect_four.app.session import (
    GAME_OVER_MESSAGE,
    GameSession,
    can_start,
    describe_result,
    validate_setup,
)
from connect_four.core.config import Settings
from connect_four.core.errors import InvalidSetupError
from connect_four.core.types import ColumnFull, Draw, GameOverRejected, Placed, Player, Win


@pytest.fixture
def session():
    return GameSession(settings=Settings())


def test_validate_setup_trims_colors():
    setup = validate_setup("  red ", "blue")
    assert setup.players() == (Player(color="red"), Player(color="blue"))


@pytest.mark.parametrize("p1, p2", [("", "blue"), ("red", "   "), (None, "blue")])
def test_missing_color(p1, p2):
    with pytest.raises(InvalidSetupError, match="must select a player color"):
        validate_setup(p1, p2)


@pytest.mark.parametrize("p1, p2", [("red", "red"), ("#FF0000", "#ff0000")])
def test_same_color(p1, p2):
    with pytest.raises(InvalidSetupError, match="different colors"):
        validate_setup(p1, p2)


def test_can_start():
    assert can_start("red", "blue")
    assert not can_start("red", "RED")
    assert not can_start("", "blue")


def test_describe_result():
    red = Player(color="red")
    assert describe_result(Win(player=red)) == "Player red won!"
    assert describe_result(Draw()) == "Tie!"
    assert describe_result(GameOverRejected()) == GAME_OVER_MESSAGE
    assert describe_result(ColumnFull(column=0)) is None
    assert describe_result(Placed(row=5, column=0, player=red)) is None


def test_click_before_start(session):
    with pytest.raises(RuntimeError):
        session.click_column(0)


def test_start_uses_configured_dimensions():
    settings = Settings()
    settings.game.height = 4
    settings.game.width = 5
    game = GameSession(settings=settings).start("red", "blue")
    assert (game.height, game.width) == (4, 5)


def test_bad_setup_keeps_previous_game(session):
    game = session.start("red", "blue")
    with pytest.raises(InvalidSetupError):
        session.start("red", "red")
    assert session.game is game


def test_inputs_locked_while_playing(session):
    assert not session.inputs_locked
    session.start("red", "blue")
    assert session.inputs_locked
    assert not session.is_over

    for column in [0, 1, 0, 1, 0, 1, 0]:
        session.click_column(column)

    assert session.is_over
    assert not session.inputs_locked
    assert session.last_message == "Player red won!"


def test_rejection_after_game_over(session):
    session.start("red", "blue")
    for column in DRAW_SEQUENCE:
        session.click_column(column)
    assert session.last_message == "Tie!"

    assert session.click_column(3) == GameOverRejected()
    assert session.last_message == GAME_OVER_MESSAGE
    assert session.log[-1] == "Move rejected: game is over"


def test_restart_gives_fresh_game(session):
    first = session.start("red", "blue")
    session.click_column(0)
    second = session.start("green", "blue")

    assert second is not first
    assert second.grid.piece_count() == 0
    assert second.current_player == Player(color="green")
    assert session.log == ["Game started! green vs blue"]


def test_log_follows_game(session):
    session.start("red", "blue")
    session.click_column(2)
    assert session.log == [
        "Game started! red vs blue",
        "red played column 2",
        "Turn 2: blue",
    ]
