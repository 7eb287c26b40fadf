"""
CLI for playing Connect Four.

Usage:
    python -m connect_four.cli.main --help
    python -m connect_four.cli.main play
    python -m connect_four.cli.main play --p1-color red --p2-color blue --height 5
    python -m connect_four.cli.main dashboard
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Annotated

import typer

from ..app.session import GameSession
from ..core.config import LogLevel, get_settings
from ..core.errors import InvalidColumnError, InvalidSetupError
from ..core.types import ColumnFull
from ..game.engine import Game


app = typer.Typer(
    name="connect-four",
    help="Two-player Connect Four in the terminal or the browser.",
    add_completion=False,
)

SYMBOLS = {0: " ", 1: "X", 2: "O"}


@app.callback()
def setup_logging(
    log_level: Annotated[
        LogLevel | None,
        typer.Option("--log-level", case_sensitive=False, help="Override LOG_LEVEL"),
    ] = None,
):
    """Configure logging for every command."""
    level = (log_level or get_settings().log.level).value
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def board_to_ascii(game: Game) -> str:
    """Convert board to ASCII display."""
    lines = []
    lines.append("\n " + "".join(f" {col:<3}" for col in range(game.width)))
    lines.append("+" + "---+" * game.width)

    for row in game.grid.as_lists():
        cells = [SYMBOLS[seat] for seat in row]
        lines.append("|" + "|".join(f" {cell} " for cell in cells) + "|")
        lines.append("+" + "---+" * game.width)

    return "\n".join(lines)


def print_status(game: Game, message: str | None = None):
    """Print game status."""
    typer.echo(board_to_ascii(game))
    p1, p2 = game.players
    typer.echo(f"\nX: {p1.color}   O: {p2.color}   Turn: {game.turn_number}")

    if message:
        typer.echo(f"\n{message}")
    elif not game.game_over:
        symbol = SYMBOLS[game.seat_of(game.current_player)]
        typer.echo(f"Current player: {game.current_player.color} ({symbol})")


@app.command()
def play(
    p1_color: Annotated[str | None, typer.Option("--p1-color", help="Player 1 color")] = None,
    p2_color: Annotated[str | None, typer.Option("--p2-color", help="Player 2 color")] = None,
    height: Annotated[int | None, typer.Option("--height", min=1, help="Number of rows")] = None,
    width: Annotated[int | None, typer.Option("--width", min=1, help="Number of columns")] = None,
):
    """
    Play a two-player hot-seat game.

    Examples:
        play                               # default colors and 6x7 board
        play --p1-color red --p2-color blue
        play --height 5 --width 5
    """
    settings = get_settings()
    overrides = {
        key: value
        for key, value in (("height", height), ("width", width))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(
            update={"game": settings.game.model_copy(update=overrides)}
        )

    session = GameSession(settings=settings)
    try:
        game = session.start(
            p1_color or settings.players.p1_color,
            p2_color or settings.players.p2_color,
        )
    except InvalidSetupError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo("\n" + "=" * 50)
    typer.echo("  CONNECT FOUR")
    typer.echo("=" * 50)
    typer.echo(f"\nEnter column number (0-{game.width - 1}) to play, 'q' to quit\n")

    message = None
    while not game.game_over:
        print_status(game, message)
        message = None

        user_input = typer.prompt(f"\n{game.current_player.color}, your move")
        if user_input.strip().lower() == "q":
            typer.echo("Game quit.")
            return

        try:
            column = int(user_input)
        except ValueError:
            message = f"Enter a number 0-{game.width - 1}"
            continue

        try:
            result = session.click_column(column)
        except InvalidColumnError as e:
            message = str(e)
            continue

        if isinstance(result, ColumnFull):
            message = f"Column {column} is full, pick another"

    print_status(game, session.last_message)


@app.command()
def dashboard(
    port: Annotated[int, typer.Option("--port", help="Port for the streamlit server")] = 8501,
):
    """Launch the browser dashboard."""
    script = Path(__file__).resolve().parents[1] / "app" / "dashboard.py"
    cmd = [sys.executable, "-m", "streamlit", "run", str(script), "--server.port", str(port)]
    typer.echo(f"Starting dashboard: {' '.join(cmd)}")
    raise typer.Exit(subprocess.call(cmd))


@app.command()
def rules():
    """Show the active board settings."""
    game_settings = get_settings().game
    typer.echo(f"Board: {game_settings.height} rows x {game_settings.width} columns")
    typer.echo(f"Win: {game_settings.win_length} in a row (horizontal, vertical or diagonal)")
    typer.echo("Draw: board full without a win")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
