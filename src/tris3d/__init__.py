"""Rules engine for tris3d, three player tic-tac-toe on a 3x3x3 cube."""

from __future__ import annotations

__all__ = [
    "CENTER",
    "POSITIONS",
    "Board",
    "BoardStatus",
    "ErrorKind",
    "Game",
    "GameStatus",
    "Tris3dError",
    "is_winning_combination",
    "new_game",
]

from .board import Board
from .board import Status as BoardStatus
from .errors import ErrorKind, Tris3dError
from .game import Game, new_game
from .game import Status as GameStatus
from .positions import CENTER, POSITIONS
from .winning_combinations import is_winning_combination
