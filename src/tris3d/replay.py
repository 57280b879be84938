from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .board import NUM_PLAYERS
from .game import Game
from .rules import JSONValue, PlayerId, Terminal, terminal_of

DEFAULT_PLAYERS = tuple(f"seat {seat}" for seat in range(NUM_PLAYERS))


class ReplayMismatch(ValueError):
    """The replayed board disagrees with the final moves recorded in the log."""


@dataclass(frozen=True, slots=True)
class ReplayMove:
    turn: int
    player: PlayerId
    move: JSONValue
    note: str | None = None


@dataclass(frozen=True, slots=True)
class Replay:
    """
    boards[0] is the empty board; boards[i+1] holds the cells taken after moves[i].
    A forfeited move repeats the previous board and ends the replay.
    """

    players: list[str]
    moves: list[ReplayMove]
    boards: list[tuple[str, ...]]
    terminal: Terminal

    @property
    def final_moves(self) -> list[str]:
        return list(self.boards[-1])


def load_match_log(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def _replay_move(record: dict[str, Any]) -> ReplayMove:
    note = record.get("note")
    return ReplayMove(
        turn=int(record["turn"]),
        player=int(record["player"]),
        move=record["move"],
        note=None if note is None else str(note),
    )


def replay_from_move_history(move_history: list[dict[str, Any]], players: Sequence[str] = DEFAULT_PLAYERS) -> Replay:
    """
    Play a recorded history again through a fresh Game seating ``players``.

    Roster, turn order and cell rules are enforced by the game, so a history
    that could not have happened raises the matching Tris3dError.
    """
    game = Game()
    for player_id in players:
        game.add_player(player_id)

    moves = [_replay_move(r) for r in move_history]
    boards: list[tuple[str, ...]] = [game.board.moves]
    for m in moves:
        if m.note is not None:
            boards.append(boards[-1])
            break
        player_id = players[m.player] if 0 <= m.player < len(players) else f"seat {m.player}"
        game.add_move(player_id, m.move)  # type: ignore[arg-type]
        boards.append(game.board.moves)

    return Replay(players=list(players), moves=moves, boards=boards, terminal=terminal_of(game.board))


def replay_from_log_payload(payload: dict[str, Any]) -> Replay:
    """
    Replay an engine log. The logged final moves must match the replayed
    board. Forfeits end a match the board still considers in play, so their
    reason and winner come from the logged result.
    """
    res = payload.get("result", {})
    mh = res.get("move_history", [])
    if not isinstance(mh, list):
        raise ValueError("payload.result.move_history must be a list")
    players = res.get("players", list(DEFAULT_PLAYERS))
    if not isinstance(players, list) or not all(isinstance(p, str) for p in players):
        raise ValueError("payload.result.players must be a list of player ids")

    rep = replay_from_move_history(mh, players)

    logged = payload.get("final_state", {}).get("moves")
    if logged is not None and list(logged) != rep.final_moves:
        raise ReplayMismatch(f"log ends with {logged!r}, replay ends with {rep.final_moves!r}")

    if not rep.terminal.is_terminal:
        reason = res.get("reason", "")
        if isinstance(reason, str) and reason:
            winner = res.get("winner", None)
            w: PlayerId | None = winner if isinstance(winner, int) and 0 <= winner < NUM_PLAYERS else None
            return Replay(players=rep.players, moves=rep.moves, boards=rep.boards, terminal=Terminal(True, w, reason))

    return rep
