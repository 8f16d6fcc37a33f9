"""
Module: session

Purpose:
    Caller-side game state. Owns a player's collection and runs the
    choose -> generate -> answer -> record loop on top of the engine.

Key Classes:
    - Game: A named player's collection and open turn
    - Turn: Item on offer plus its puzzle
    - GameError: Invalid answer submission
"""

from .game import Game, GameError, Turn

__all__ = [
    "Game",
    "GameError",
    "Turn",
]
