"""
Shared data types for the Connect Four game.

These types are the contracts between the engine and the presentation layers.
Engine results are plain dataclasses so a view can render them without
knowing anything about the engine internals.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .errors import CellOccupiedError, InvalidSetupError


# ─────────────────────────────────────────────────────────────
# PLAYER & GAME PHASE
# ─────────────────────────────────────────────────────────────

EMPTY = 0  # Grid value of an unoccupied cell


@dataclass(frozen=True)
class Player:
    """A player, identified by the color of their pieces."""

    color: str
    name: str = ""

    def __str__(self) -> str:
        return self.name or self.color


class GamePhase(Enum):
    """Current phase of the game."""

    PLAYING = auto()
    WON = auto()
    DRAWN = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GamePhase.PLAYING


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left


@dataclass(eq=False)
class Grid:
    """
    Fixed-size board of cells.

    The cells live in a numpy array where:
    - cells[0] is the top row
    - cells[height - 1] is the bottom row
    - cells[row, col] is EMPTY or the seat (1 or 2) of the occupant
    """

    height: int = 6
    width: int = 7
    cells: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise InvalidSetupError(
                f"Grid must be at least 1x1 (got {self.height}x{self.width})"
            )
        self.cells = np.full((self.height, self.width), EMPTY, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def __getitem__(self, pos: tuple[int, int]) -> int:
        row, col = pos
        return int(self.cells[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return bool(self.cells[row, col] == EMPTY)

    def place(self, row: int, col: int, seat: int) -> None:
        """Occupy an empty cell. Cells are never overwritten."""
        if not self.is_empty(row, col):
            raise CellOccupiedError(f"Cell ({row}, {col}) is already occupied")
        self.cells[row, col] = seat

    def is_full(self) -> bool:
        return bool(np.all(self.cells != EMPTY))

    def piece_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def as_lists(self) -> list[list[int]]:
        """Plain nested lists, top row first."""
        return self.cells.tolist()


# ─────────────────────────────────────────────────────────────
# MOVES & DROP RESULTS
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Move:
    """An accepted move."""

    column: int
    player: Player
    position: Position


@dataclass(frozen=True)
class Placed:
    """Piece landed; the turn passed to the other player."""

    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class Win:
    """Piece completed a line of four; the game is over."""

    player: Player
    positions: tuple[Position, ...] = ()


@dataclass(frozen=True)
class Draw:
    """Piece filled the last empty cell without a win; the game is over."""


@dataclass(frozen=True)
class ColumnFull:
    """Column has no empty cell. Nothing changed."""

    column: int


@dataclass(frozen=True)
class GameOverRejected:
    """Move attempted after the game ended. Nothing changed."""


DropResult = Placed | Win | Draw | ColumnFull | GameOverRejected
