from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Sequence

from .board import NUM_PLAYERS
from .errors import Tris3dError
from .game import Game, Status
from .rules import JSONValue, PlayerId, Tris3dRules

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    turn: int
    player: PlayerId
    move: JSONValue
    ms: float
    note: str | None = None


@dataclass(frozen=True, slots=True)
class MatchResult:
    game: str
    players: list[str]
    winner: PlayerId | None
    reason: str
    turns: int
    move_history: list[MoveRecord]
    moves: list[str]


def seat_names(agents: Sequence[Any]) -> list[str]:
    """Player ids for the roster: agent names, suffixed with the seat when repeated."""
    names = [str(getattr(a, "name", "agent")) for a in agents]
    return [n if names.count(n) == 1 else f"{n}#{seat}" for seat, n in enumerate(names)]


def play_match(
    agents: Sequence[Any],
    *,
    player_ids: Sequence[str] | None = None,
    rules: Tris3dRules | None = None,
    log_path: Path | None = None,
) -> MatchResult:
    """
    Run a 3-player match, seats moving in order 0, 1, 2.

    Agents must implement:
      - name: str
      - select_move(rules, state, player, legal_moves) -> JSONValue

    Player ids default to the agent names.

    An agent that raises or plays an illegal move forfeits: the match ends
    with no winner and the offending move is kept in the history with a note.
    """
    if len(agents) != NUM_PLAYERS:
        raise ValueError(f"expected {NUM_PLAYERS} agents, got {len(agents)}")
    rules = rules or Tris3dRules()

    game = Game()
    players = list(player_ids) if player_ids is not None else seat_names(agents)
    if len(players) != NUM_PLAYERS:
        raise ValueError(f"expected {NUM_PLAYERS} player ids, got {len(players)}")
    for player_id in players:
        game.add_player(player_id)

    history: list[MoveRecord] = []
    reason = ""
    winner: PlayerId | None = None

    while game.status is Status.PLAYING:
        player = game.board.next_player_index
        turn = game.board.num_moves + 1
        state: JSONValue = {"moves": list(game.board.moves)}
        legal: list[JSONValue] = list(game.board.free_positions())

        t0 = time.perf_counter()
        try:
            move = agents[player].select_move(rules, state, player, legal)
        except Exception as e:
            ms = (time.perf_counter() - t0) * 1000.0
            logger.warning("seat %d (%s) raised %r; forfeit", player, players[player], e)
            history.append(MoveRecord(turn=turn, player=player, move=None, ms=ms, note="agent_error"))
            reason = "agent_error"
            break
        ms = (time.perf_counter() - t0) * 1000.0

        try:
            game.add_move(players[player], move)  # type: ignore[arg-type]
        except Tris3dError as e:
            logger.warning("seat %d (%s) played %r: %s; forfeit", player, players[player], move, e)
            history.append(MoveRecord(turn=turn, player=player, move=_loggable(move), ms=ms, note="illegal_move"))
            reason = "illegal_move"
            break
        history.append(MoveRecord(turn=turn, player=player, move=move, ms=ms))
    else:
        winner = game.board.winner_index
        reason = "win" if winner is not None else "tie"

    result = MatchResult(
        game=rules.name,
        players=players,
        winner=winner,
        reason=reason,
        turns=len(history),
        move_history=history,
        moves=list(game.board.moves),
    )
    if log_path:
        _write_log(log_path, result)
    return result


def _loggable(move: Any) -> JSONValue:
    """The move itself when it is a JSON value, its repr otherwise."""
    try:
        json.dumps(move)
    except (TypeError, ValueError):
        return repr(move)
    return move


def _write_log(path: Path, result: MatchResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "game": result.game,
        "result": {
            **asdict(result),
            "move_history": [asdict(r) for r in result.move_history],
        },
        "final_state": {"moves": result.moves},
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
