"""Session adapter between a view and the game engine.

A view (dashboard or CLI) owns one GameSession. The session validates the
player setup, builds a fresh Game on every start, forwards column clicks
and turns engine results into messages.
"""

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from ..core.bus import EventBus
from ..core.config import Settings, get_settings
from ..core.errors import InvalidSetupError
from ..core.events import Event, EventType
from ..core.types import Draw, DropResult, GameOverRejected, Player, Win
from ..game.engine import Game, create_game, drop_piece


MISSING_COLOR = "You must select a player color for each player."
SAME_COLOR = "Players must choose different colors."
GAME_OVER_MESSAGE = "Error: Game is over, please start new game"


class PlayerSetup(BaseModel):
    """Colors picked for the two players before a game starts."""

    p1_color: str
    p2_color: str

    @field_validator("p1_color", "p2_color")
    @classmethod
    def _required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(MISSING_COLOR)
        return value

    @model_validator(mode="after")
    def _distinct(self) -> "PlayerSetup":
        if self.p1_color.lower() == self.p2_color.lower():
            raise ValueError(SAME_COLOR)
        return self

    def players(self) -> tuple[Player, Player]:
        return Player(color=self.p1_color), Player(color=self.p2_color)


def validate_setup(p1_color: str, p2_color: str) -> PlayerSetup:
    """Validate a player setup, raising InvalidSetupError with the first problem."""
    try:
        return PlayerSetup(p1_color=p1_color or "", p2_color=p2_color or "")
    except ValidationError as e:
        # pydantic prefixes custom messages with "Value error, "
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise InvalidSetupError(message) from e


def can_start(p1_color: str, p2_color: str) -> bool:
    """Whether a game could start with these colors."""
    try:
        validate_setup(p1_color, p2_color)
    except InvalidSetupError:
        return False
    return True


def describe_result(result: DropResult) -> str | None:
    """End-of-game or rejection message for a result, None if nothing to say."""
    if isinstance(result, Win):
        return f"Player {result.player.color} won!"
    if isinstance(result, Draw):
        return "Tie!"
    if isinstance(result, GameOverRejected):
        return GAME_OVER_MESSAGE
    return None


def describe_event(event: Event) -> str:
    """One line for the session log."""
    data = event.data or {}
    if event.type == EventType.GAME_STARTED:
        return "Game started! {} vs {}".format(*data["players"])
    if event.type == EventType.PIECE_PLACED:
        return f"{data['player']} played column {data['column']}"
    if event.type == EventType.TURN_CHANGED:
        return f"Turn {data['turn']}: {data['player']}"
    if event.type == EventType.COLUMN_FULL:
        return f"Column {data['column']} is full"
    if event.type == EventType.MOVE_REJECTED:
        return "Move rejected: game is over"
    if event.type == EventType.GAME_WON:
        return f"{data['winner']} wins!"
    if event.type == EventType.GAME_DRAW:
        return "Draw!"
    return str(event)


class GameSession:
    """One player's view of a sequence of games."""

    def __init__(self, settings: Settings | None = None, bus: EventBus | None = None):
        self.settings = settings or get_settings()
        self.bus = bus or EventBus()
        self.game: Game | None = None
        self.log: list[str] = []
        self.last_message: str | None = None
        self.bus.subscribe_all(self._on_event)

    def start(self, p1_color: str, p2_color: str) -> Game:
        """Validate the colors and start a fresh game.

        Raises:
            InvalidSetupError: If a color is missing or both are the same
        """
        player1, player2 = validate_setup(p1_color, p2_color).players()
        self.log = []
        self.last_message = None
        game_settings = self.settings.game
        self.game = create_game(
            player1,
            player2,
            game_settings.height,
            game_settings.width,
            win_length=game_settings.win_length,
            bus=self.bus,
        )
        return self.game

    def click_column(self, column: int) -> DropResult:
        """Forward a column click to the game."""
        if self.game is None:
            raise RuntimeError("No game in progress. Call start() first.")
        result = drop_piece(self.game, column)
        message = describe_result(result)
        if message is not None:
            self.last_message = message
        return result

    @property
    def is_over(self) -> bool:
        return self.game is not None and self.game.game_over

    @property
    def inputs_locked(self) -> bool:
        """Color pickers stay locked while a game is running."""
        return self.game is not None and not self.game.game_over

    def _on_event(self, event: Event) -> None:
        self.log.append(describe_event(event))
