from __future__ import annotations

from enum import Enum
from itertools import combinations

from .errors import BoardIsFull, InvalidPosition, PositionAlreadyTaken, ThereIsAlreadyAWinner
from .positions import POSITIONS, is_valid_position
from .winning_combinations import is_winning_combination

NUM_PLAYERS = 3

# A player owns every third move, so nobody can line up three own cells
# before the seventh move.
MIN_MOVES_TO_WIN = 2 * NUM_PLAYERS + 1


class Status(Enum):
    PLAYING = "playing"
    HAS_WINNER = "has_winner"
    TIED = "tied"


class Board:
    """
    The chronological list of moves of a match.

    Moves are assigned to players by position: move i belongs to player
    i % 3. The board only ever grows; a new match needs a new board.
    """

    __slots__ = ("_moves", "_status")

    def __init__(self) -> None:
        self._moves: list[str] = []
        self._status = Status.PLAYING

    def __repr__(self) -> str:
        return f"Board(moves={''.join(self._moves)!r}, status={self._status.value})"

    @property
    def status(self) -> Status:
        return self._status

    @property
    def moves(self) -> tuple[str, ...]:
        return tuple(self._moves)

    @property
    def num_moves(self) -> int:
        return len(self._moves)

    @property
    def next_player_index(self) -> int:
        return len(self._moves) % NUM_PLAYERS

    @property
    def is_over(self) -> bool:
        return self._status is not Status.PLAYING

    @property
    def winner_index(self) -> int | None:
        if self._status is not Status.HAS_WINNER:
            return None
        return (len(self._moves) - 1) % NUM_PLAYERS

    def moves_of_player(self, player_index: int) -> tuple[str, ...]:
        if not (0 <= player_index < NUM_PLAYERS):
            raise ValueError(f"player index must be in range 0..{NUM_PLAYERS - 1}, got: {player_index!r}")
        return tuple(self._moves[player_index::NUM_PLAYERS])

    def free_positions(self) -> list[str]:
        taken = set(self._moves)
        return [p for p in POSITIONS if p not in taken]

    def add_move(self, position: str) -> int:
        """
        Add a move to the board and return the number of winning combinations
        it completes for the player who made it.
        """
        if self._status is Status.TIED:
            raise BoardIsFull()
        if self._status is Status.HAS_WINNER:
            raise ThereIsAlreadyAWinner()
        if position in self._moves:
            raise PositionAlreadyTaken(f"{position!r}")
        if not is_valid_position(position):
            raise InvalidPosition(f"{position!r} is not a cell label")

        self._moves.append(position)

        num_winning_combinations = self.get_num_winning_combinations()
        if num_winning_combinations > 0:
            self._status = Status.HAS_WINNER
        elif len(self._moves) == len(POSITIONS):
            self._status = Status.TIED
        return num_winning_combinations

    def winning_combinations(self) -> list[tuple[str, str, str]]:
        """Winning triples among the cells of the player who moved last."""
        if len(self._moves) < MIN_MOVES_TO_WIN:
            return []
        last_player_index = (len(self._moves) - 1) % NUM_PLAYERS
        own = self._moves[last_player_index::NUM_PLAYERS]
        return [combo for combo in combinations(own, 3) if is_winning_combination(*combo)]

    def get_num_winning_combinations(self) -> int:
        return len(self.winning_combinations())
