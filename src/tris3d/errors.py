from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    BOARD_IS_FULL = "BoardIsFull"
    CANNOT_ADD_MORE_THAN_THREE_PLAYERS = "CannotAddMoreThanThreePlayers"
    CANNOT_ADD_SAME_PLAYER_TWICE = "CannotAddSamePlayerTwice"
    GAME_IS_OVER = "GameIsOver"
    GAME_NOT_STARTED_YET = "GameNotStartedYet"
    INVALID_POSITION = "InvalidPosition"
    PLAYER_MUST_WAIT_FOR_TURN = "PlayerMustWaitForTurn"
    PLAYER_NOT_FOUND = "PlayerNotFound"
    POSITION_ALREADY_TAKEN = "PositionAlreadyTaken"
    POSITIONS_MUST_BE_DISTINCT = "PositionsMustBeDistinct"
    THERE_IS_ALREADY_A_WINNER = "ThereIsAlreadyAWinner"


class Tris3dError(Exception):
    """
    Base class of every rule violation.

    The state of the board or game that raised it is left untouched.
    """

    kind: ErrorKind

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.kind.value}: {detail}" if detail else self.kind.value


class BoardIsFull(Tris3dError):
    kind = ErrorKind.BOARD_IS_FULL


class CannotAddMoreThanThreePlayers(Tris3dError):
    kind = ErrorKind.CANNOT_ADD_MORE_THAN_THREE_PLAYERS


class CannotAddSamePlayerTwice(Tris3dError):
    kind = ErrorKind.CANNOT_ADD_SAME_PLAYER_TWICE


class GameIsOver(Tris3dError):
    kind = ErrorKind.GAME_IS_OVER


class GameNotStartedYet(Tris3dError):
    kind = ErrorKind.GAME_NOT_STARTED_YET


class InvalidPosition(Tris3dError):
    kind = ErrorKind.INVALID_POSITION


class PlayerMustWaitForTurn(Tris3dError):
    kind = ErrorKind.PLAYER_MUST_WAIT_FOR_TURN


class PlayerNotFound(Tris3dError):
    kind = ErrorKind.PLAYER_NOT_FOUND


class PositionAlreadyTaken(Tris3dError):
    kind = ErrorKind.POSITION_ALREADY_TAKEN


class PositionsMustBeDistinct(Tris3dError):
    kind = ErrorKind.POSITIONS_MUST_BE_DISTINCT


class ThereIsAlreadyAWinner(Tris3dError):
    kind = ErrorKind.THERE_IS_ALREADY_A_WINNER
