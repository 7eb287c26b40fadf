"""Game engine for Connect Four state management."""

import logging

from ..core.bus import EventBus
from ..core.errors import GameOverError, InvalidSetupError
from ..core.events import Event, EventType
from ..core.types import (
    ColumnFull,
    Draw,
    DropResult,
    GameOverRejected,
    GamePhase,
    Grid,
    Move,
    Placed,
    Player,
    Position,
    Win,
)
from .rules import Connect4Rules


logger = logging.getLogger(__name__)


class Game:
    """A single game between two players.

    Stateful engine that:
    - Owns the grid and whose turn it is
    - Drops pieces and detects wins/draws
    - Locks itself once the game is over
    - Emits events for state changes (when given a bus)

    Nothing outside this object is touched; one instance per session.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        height: int = 6,
        width: int = 7,
        *,
        rules: Connect4Rules | None = None,
        bus: EventBus | None = None,
    ):
        """Initialize a new game.

        Args:
            player1: Player who moves first
            player2: Second player
            height: Number of rows
            width: Number of columns
            rules: Game rules (uses defaults if None)
            bus: Event bus to publish to (no events if None)

        Raises:
            InvalidSetupError: If the players are equal or the grid is empty
        """
        if player1 == player2:
            raise InvalidSetupError(f"Players must be distinct (both are {player1})")

        self.rules = rules or Connect4Rules()
        self.bus = bus
        self.grid = Grid(height=height, width=width)
        self.players = (player1, player2)
        self._current = 0
        self.phase = GamePhase.PLAYING
        self.winner: Player | None = None
        self.winning_positions: list[Position] = []
        self.move_history: list[Move] = []

        logger.info("New %dx%d game: %s vs %s", height, width, player1, player2)
        self._publish(EventType.GAME_STARTED, {
            "players": [str(player1), str(player2)],
            "height": height,
            "width": width,
        })

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def current_player(self) -> Player:
        """Player whose turn it is (the last mover once the game is over)."""
        return self.players[self._current]

    @property
    def game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def turn_number(self) -> int:
        return len(self.move_history) + 1

    @property
    def legal_moves(self) -> list[int]:
        if self.game_over:
            return []
        return self.rules.legal_moves(self.grid)

    def seat_of(self, player: Player) -> int:
        return self.players.index(player) + 1

    def occupant(self, row: int, col: int) -> Player | None:
        """Player holding a cell, or None if it is empty."""
        seat = self.grid[row, col]
        return self.players[seat - 1] if seat else None

    def drop_piece(self, column: int) -> DropResult:
        """Drop the current player's piece into a column.

        Args:
            column: Column index in [0, width)

        Returns:
            Placed, Win, Draw or ColumnFull

        Raises:
            GameOverError: If the game has already ended
            InvalidColumnError: If column is out of range
        """
        if self.game_over:
            self._publish(EventType.MOVE_REJECTED, {"column": column})
            raise GameOverError("Game is over, please start new game")

        self.rules.check_column(self.grid, column)

        row = self.rules.landing_row(self.grid, column)
        if row is None:
            logger.debug("Column %d is full", column)
            self._publish(EventType.COLUMN_FULL, {"column": column})
            return ColumnFull(column=column)

        player = self.current_player
        seat = self._current + 1
        self.grid.place(row, column, seat)
        position = Position(row=row, col=column)
        self.move_history.append(Move(column=column, player=player, position=position))
        logger.debug("%s placed at (%d, %d)", player, row, column)
        self._publish(EventType.PIECE_PLACED, {
            "player": str(player),
            "row": row,
            "column": column,
        })

        winning_positions = self.rules.find_win(self.grid, seat)
        if winning_positions:
            self.phase = GamePhase.WON
            self.winner = player
            self.winning_positions = winning_positions
            logger.info("%s won on turn %d", player, len(self.move_history))
            self._publish(EventType.GAME_WON, {
                "winner": str(player),
                "positions": winning_positions,
            })
            return Win(player=player, positions=tuple(winning_positions))

        if self.rules.is_draw(self.grid):
            self.phase = GamePhase.DRAWN
            logger.info("Draw after %d moves", len(self.move_history))
            self._publish(EventType.GAME_DRAW)
            return Draw()

        # Continue game - switch turns
        self._current = 1 - self._current
        self._publish(EventType.TURN_CHANGED, {
            "player": str(self.current_player),
            "turn": self.turn_number,
        })
        return Placed(row=row, column=column, player=player)

    def _publish(self, event_type: EventType, data: object = None) -> None:
        if self.bus is not None:
            self.bus.publish(Event(type=event_type, data=data, source="game_engine"))


def create_game(
    player1: Player,
    player2: Player,
    height: int = 6,
    width: int = 7,
    *,
    win_length: int = 4,
    bus: EventBus | None = None,
) -> Game:
    """Start a new game; player1 moves first."""
    return Game(
        player1,
        player2,
        height,
        width,
        rules=Connect4Rules(win_length=win_length),
        bus=bus,
    )


def drop_piece(game: Game, column: int) -> DropResult:
    """Drop a piece for the current player, reporting game-over as a result.

    Same as Game.drop_piece except that a move after the end of the game
    returns GameOverRejected instead of raising. Out-of-range columns still
    raise InvalidColumnError.
    """
    try:
        return game.drop_piece(column)
    except GameOverError:
        return GameOverRejected()
