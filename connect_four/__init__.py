"""Connect Four game engine with terminal and browser front ends."""

from .core.types import ColumnFull, Draw, DropResult, GameOverRejected, Placed, Player, Win
from .game.engine import Game, create_game, drop_piece


__all__ = [
    "ColumnFull",
    "Draw",
    "DropResult",
    "Game",
    "GameOverRejected",
    "Placed",
    "Player",
    "Win",
    "create_game",
    "drop_piece",
]
