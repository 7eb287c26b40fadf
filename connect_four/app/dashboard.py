"""Streamlit dashboard for playing Connect Four in the browser.

Run with:
    streamlit run connect_four/app/dashboard.py
"""

import streamlit as st

from connect_four.app.session import GameSession, can_start
from connect_four.core.config import get_settings
from connect_four.core.errors import InvalidSetupError
from connect_four.core.types import Draw, GameOverRejected, Win


def init_session_state():
    """Initialize session state."""
    settings = get_settings()

    if "session" not in st.session_state:
        st.session_state.session = GameSession(settings=settings)
    if "p1_color" not in st.session_state:
        st.session_state.p1_color = settings.players.p1_color
    if "p2_color" not in st.session_state:
        st.session_state.p2_color = settings.players.p2_color
    if "setup_error" not in st.session_state:
        st.session_state.setup_error = None
    if "last_result" not in st.session_state:
        st.session_state.last_result = None


def start_game() -> None:
    """Start a new game with the picked colors."""
    session: GameSession = st.session_state.session
    try:
        session.start(st.session_state.p1_color, st.session_state.p2_color)
    except InvalidSetupError as e:
        st.session_state.setup_error = str(e)
        return
    st.session_state.setup_error = None
    st.session_state.last_result = None


def click_column(column: int) -> None:
    """Handle a click on a column top."""
    st.session_state.last_result = st.session_state.session.click_column(column)


def _piece_html(color: str, size: float, highlight: bool = False) -> str:
    ring = "box-shadow:0 0 0 4px #90EE90;" if highlight else ""
    return (
        f"<div style='margin:auto;width:{size}rem;height:{size}rem;"
        f"border-radius:50%;background:{color};{ring}'></div>"
    )


def render_sidebar(session: GameSession) -> None:
    """Render player setup controls."""
    st.sidebar.header("🎮 Players")

    locked = session.inputs_locked
    st.sidebar.color_picker("Player 1 color", key="p1_color", disabled=locked)
    st.sidebar.color_picker("Player 2 color", key="p2_color", disabled=locked)

    ready = can_start(st.session_state.p1_color, st.session_state.p2_color)
    st.sidebar.button(
        "🆕 Start Game",
        key="start_game",
        on_click=start_game,
        disabled=not ready,
        type="primary",
    )
    if not ready:
        st.sidebar.caption("Pick two different colors to start.")
    if st.session_state.setup_error:
        st.sidebar.error(st.session_state.setup_error)


def render_board(session: GameSession) -> None:
    """Render the grid with clickable column tops."""
    game = session.game
    if game is None:
        st.info("Pick a color for each player, then click 'Start Game'")
        return

    ui = session.settings.ui
    size = ui.cell_size_rem

    # Preview of the next piece, in the current player's color
    if not game.game_over:
        st.markdown(
            f"**Next piece:** {game.current_player.color}"
            f"{_piece_html(game.current_player.color, size / 2)}",
            unsafe_allow_html=True,
        )

    legal = game.legal_moves
    cols = st.columns(game.width)
    for col_idx in range(game.width):
        with cols[col_idx]:
            st.button(
                "⬇",
                key=f"col_{col_idx}",
                on_click=click_column,
                args=(col_idx,),
                disabled=col_idx not in legal,
            )

    winning_set = {(p.row, p.col) for p in game.winning_positions}

    for row_idx in range(game.height):
        cols = st.columns(game.width)
        for col_idx in range(game.width):
            occupant = game.occupant(row_idx, col_idx)
            color = occupant.color if occupant else ui.empty_color
            with cols[col_idx]:
                st.markdown(
                    f"<div style='background:{ui.board_color};padding:4px;'>"
                    f"{_piece_html(color, size, (row_idx, col_idx) in winning_set)}"
                    "</div>",
                    unsafe_allow_html=True,
                )


def render_status_panel(session: GameSession) -> None:
    """Render game status panel."""
    st.subheader("📊 Game Status")

    game = session.game
    if game is None:
        st.info("No active game")
        return

    st.metric("Turn", game.turn_number)

    result = st.session_state.last_result
    message = session.last_message
    if isinstance(result, Win) and message:
        st.success(message)
    elif isinstance(result, Draw) and message:
        st.info(message)
    elif isinstance(result, GameOverRejected) and message:
        st.error(message)
    elif not game.game_over:
        st.markdown(f"**Current:** {game.current_player.color}")


def render_game_log(session: GameSession) -> None:
    """Render game event log."""
    st.subheader("📜 Game Log")

    if session.log:
        # Show last 10 entries
        for entry in session.log[-10:]:
            st.text(entry)
    else:
        st.info("No events yet")


def main():
    """Main dashboard entry point."""
    st.set_page_config(page_title="Connect Four", page_icon="🎮", layout="wide")
    st.title("🎮 Connect Four")

    init_session_state()
    session: GameSession = st.session_state.session
    render_sidebar(session)

    col_board, col_status = st.columns([3, 1])

    with col_board:
        render_board(session)

    with col_status:
        render_status_panel(session)
        st.markdown("---")
        render_game_log(session)


if __name__ == "__main__":
    main()
