"""Core infrastructure for the Connect Four game."""

from .bus import EventBus
from .config import (
    GameSettings,
    LogLevel,
    LogSettings,
    PlayerSettings,
    Settings,
    UISettings,
    get_settings,
    reset_settings,
)
from .errors import (
    CellOccupiedError,
    Connect4Error,
    GameOverError,
    InvalidColumnError,
    InvalidSetupError,
)
from .events import Event, EventType
from .types import (
    EMPTY,
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


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "LogLevel",
    "PlayerSettings",
    "UISettings",
    "LogSettings",
    # Errors
    "Connect4Error",
    "GameOverError",
    "InvalidColumnError",
    "CellOccupiedError",
    "InvalidSetupError",
    # Types
    "EMPTY",
    "Player",
    "GamePhase",
    "Position",
    "Grid",
    "Move",
    "Placed",
    "Win",
    "Draw",
    "ColumnFull",
    "GameOverRejected",
    "DropResult",
    # Events
    "Event",
    "EventType",
    "EventBus",
]
