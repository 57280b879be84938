from __future__ import annotations

from enum import Enum

from .board import NUM_PLAYERS, Board
from .errors import (
    CannotAddMoreThanThreePlayers,
    CannotAddSamePlayerTwice,
    GameIsOver,
    GameNotStartedYet,
    PlayerMustWaitForTurn,
    PlayerNotFound,
)


class Status(Enum):
    WAITING_FOR_PLAYERS = "waiting_for_players"
    PLAYING = "playing"
    OVER = "over"


class Game:
    """
    A match between three players.

    Players take turns in the order they joined. The game starts as soon as
    the third player joins and is over once the board has a winner or is
    full. Not safe for concurrent use: serialize calls on one instance.
    """

    __slots__ = ("board", "_player_ids", "_status")

    def __init__(self) -> None:
        self.board = Board()
        self._player_ids: list[str] = []
        self._status = Status.WAITING_FOR_PLAYERS

    def __repr__(self) -> str:
        return f"Game(players={self._player_ids!r}, status={self._status.value}, board={self.board!r})"

    @property
    def status(self) -> Status:
        return self._status

    @property
    def player_ids(self) -> tuple[str, ...]:
        return tuple(self._player_ids)

    @property
    def num_players(self) -> int:
        return len(self._player_ids)

    @property
    def next_player_id(self) -> str | None:
        if self._status is not Status.PLAYING:
            return None
        return self._player_ids[self.board.next_player_index]

    @property
    def winner_id(self) -> str | None:
        index = self.board.winner_index
        return None if index is None else self._player_ids[index]

    def add_player(self, player_id: str) -> None:
        """
        Add a player to the game.

            game = tris3d.new_game()
            game.add_player("Alice")
        """
        if len(self._player_ids) == NUM_PLAYERS:
            raise CannotAddMoreThanThreePlayers()
        if player_id in self._player_ids:
            raise CannotAddSamePlayerTwice(f"{player_id!r}")
        self._player_ids.append(player_id)
        if len(self._player_ids) == NUM_PLAYERS:
            self._status = Status.PLAYING

    def add_move(self, player_id: str, position: str) -> int:
        """Play ``position`` for ``player_id``; return the winning combinations it completes."""
        if self._status is Status.WAITING_FOR_PLAYERS:
            raise GameNotStartedYet()
        if self._status is Status.OVER:
            raise GameIsOver()
        if player_id not in self._player_ids:
            raise PlayerNotFound(f"{player_id!r}")
        if self._player_ids[self.board.next_player_index] != player_id:
            raise PlayerMustWaitForTurn(f"{player_id!r}")

        num_winning_combinations = self.board.add_move(position)
        if self.board.is_over:
            self._status = Status.OVER
        return num_winning_combinations


def new_game() -> Game:
    """Create a new game, with no players and an empty board."""
    return Game()
