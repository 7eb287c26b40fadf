"""Game logic module for Connect Four."""

from .engine import Game, create_game, drop_piece
from .rules import Connect4Rules


__all__ = [
    "Connect4Rules",
    "Game",
    "create_game",
    "drop_piece",
]
