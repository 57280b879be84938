from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from .board import NUM_PLAYERS, Board, Status
from .errors import PlayerMustWaitForTurn

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]

PlayerId = int  # seat: 0, 1 or 2


@dataclass(frozen=True, slots=True)
class Terminal:
    is_terminal: bool
    winner: PlayerId | None  # None == tie / no winner
    reason: str


@runtime_checkable
class Rules(Protocol):
    name: str

    def initial_state(self) -> JSONValue: ...

    def legal_moves(self, state: JSONValue, player: PlayerId) -> list[JSONValue]: ...

    def apply_move(self, state: JSONValue, player: PlayerId, move: JSONValue) -> JSONValue: ...

    def terminal(self, state: JSONValue) -> Terminal: ...


def terminal_of(board: Board) -> Terminal:
    if board.status is Status.HAS_WINNER:
        return Terminal(is_terminal=True, winner=board.winner_index, reason="win")
    if board.status is Status.TIED:
        return Terminal(is_terminal=True, winner=None, reason="tie")
    return Terminal(is_terminal=False, winner=None, reason="")


def board_from_state(state: JSONValue) -> Board:
    """Rebuild a board by replaying the moves of a state; raises on any illegal move."""
    if not isinstance(state, dict) or not isinstance(state.get("moves"), list):
        raise ValueError(f"state must be an object with a 'moves' list, got: {state!r}")
    board = Board()
    for move in state["moves"]:
        board.add_move(move)  # type: ignore[arg-type]
    return board


@dataclass(slots=True)
class Tris3dRules:
    """Stateless view of the board: a state is ``{"moves": [label, ...]}``."""

    name: str = "tris3d"

    def initial_state(self) -> JSONValue:
        return {"moves": []}

    def legal_moves(self, state: JSONValue, player: PlayerId) -> list[JSONValue]:
        board = board_from_state(state)
        if board.is_over or board.next_player_index != player:
            return []
        return list(board.free_positions())

    def apply_move(self, state: JSONValue, player: PlayerId, move: JSONValue) -> JSONValue:
        if not (0 <= player < NUM_PLAYERS):
            raise ValueError(f"player must be in range 0..{NUM_PLAYERS - 1}, got: {player!r}")
        board = board_from_state(state)
        if board.next_player_index != player:
            raise PlayerMustWaitForTurn(f"seat {player}")
        board.add_move(move)  # type: ignore[arg-type]
        return {"moves": list(board.moves)}

    def terminal(self, state: JSONValue) -> Terminal:
        return terminal_of(board_from_state(state))
