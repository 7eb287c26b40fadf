"""Exceptions raised by the Connect Four engine and session setup."""


class Connect4Error(Exception):
    """Base class for all game errors."""


class GameOverError(Connect4Error):
    """A piece was dropped after the game reached a win or a draw."""


class InvalidColumnError(Connect4Error, ValueError):
    """Column index outside the grid. Indicates a caller bug."""

    def __init__(self, column: int, width: int):
        super().__init__(f"Invalid column {column} (expected 0-{width - 1})")
        self.column = column
        self.width = width


class CellOccupiedError(Connect4Error, ValueError):
    """Attempt to overwrite an occupied cell."""


class InvalidSetupError(Connect4Error, ValueError):
    """Players or board dimensions cannot start a game."""
