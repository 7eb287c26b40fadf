from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import connect_four.app


DASHBOARD = str(Path(connect_four.app.__file__).parent / "dashboard.py")


@pytest.fixture
def app():
    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_renders_setup(app):
    assert app.title[0].value == "🎮 Connect Four"
    assert not app.button(key="start_game").disabled
    assert app.session_state["session"].game is None


def test_start_and_drop(app):
    app.button(key="start_game").click().run()
    game = app.session_state["session"].game
    assert game is not None
    assert game.width == 7

    app.button(key="col_3").click().run()
    assert not app.exception
    game = app.session_state["session"].game
    assert game.grid[5, 3] == 1
    assert game.turn_number == 2


def test_win_disables_columns(app):
    app.button(key="start_game").click().run()
    for column in [0, 1, 0, 1, 0, 1, 0]:
        app.button(key=f"col_{column}").click().run()

    assert not app.exception
    assert app.session_state["session"].is_over
    assert app.success[0].value.startswith("Player ")
    assert app.button(key="col_2").disabled


def test_full_column_is_disabled(app):
    app.button(key="start_game").click().run()
    for _ in range(6):
        app.button(key="col_0").click().run()

    assert not app.exception
    assert app.session_state["session"].game.grid.piece_count() == 6
    assert app.button(key="col_0").disabled
    assert not app.button(key="col_1").disabled
