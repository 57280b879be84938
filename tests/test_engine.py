from __future__ import annotations

import json
from pathlib import Path

import pytest

from tris3d.agents import RandomAgent
from tris3d.engine import play_match, seat_names


class ScriptedAgent:
    def __init__(self, name: str, script: str) -> None:
        self.name = name
        self.script = script

    def select_move(self, rules, state, player, legal_moves):
        return self.script[len(state["moves"])]


class IllegalAgent:
    name = "illegal"

    def select_move(self, rules, state, player, legal_moves):
        return "?"


class ExplodingAgent:
    name = "boom"

    def select_move(self, rules, state, player, legal_moves):
        raise RuntimeError("kaboom")


def _scripted(script: str) -> list[ScriptedAgent]:
    return [ScriptedAgent(name, script) for name in ("alice", "bob", "carol")]


def test_scripted_match_is_won() -> None:
    r = play_match(_scripted("AHG*IFV"))
    assert r.reason == "win"
    assert r.winner == 0
    assert r.players == ["alice", "bob", "carol"]
    assert r.turns == 7
    assert r.moves == list("AHG*IFV")
    assert [m.player for m in r.move_history] == [0, 1, 2, 0, 1, 2, 0]


def test_scripted_match_is_tied() -> None:
    r = play_match(_scripted("HAJBGPFI*CDMEQXRKSYOWZLTUNV"))
    assert r.reason == "tie"
    assert r.winner is None
    assert r.turns == 27


def test_random_match_finishes() -> None:
    r = play_match([RandomAgent(seed=1), RandomAgent(seed=2), RandomAgent(seed=3)])
    assert r.reason in {"win", "tie"}
    assert 7 <= r.turns <= 27
    assert len(set(r.moves)) == len(r.moves)
    assert r.players == ["random#0", "random#1", "random#2"]


def test_illegal_move_forfeits() -> None:
    agents = [ScriptedAgent("alice", "A"), IllegalAgent(), ScriptedAgent("carol", "")]
    r = play_match(agents)
    assert r.reason == "illegal_move"
    assert r.winner is None
    assert r.turns == 2
    assert r.move_history[-1].note == "illegal_move"
    assert r.move_history[-1].move == "?"
    assert r.moves == ["A"]


def test_agent_error_forfeits() -> None:
    r = play_match([ExplodingAgent(), RandomAgent(), RandomAgent()])
    assert r.reason == "agent_error"
    assert r.winner is None
    assert r.move_history[0].note == "agent_error"


def test_requires_three_agents() -> None:
    with pytest.raises(ValueError):
        play_match([RandomAgent(), RandomAgent()])


def test_player_ids_override_agent_names() -> None:
    r = play_match(_scripted("AHG*IFV"), player_ids=["x", "y", "z"])
    assert r.players == ["x", "y", "z"]


def test_seat_names() -> None:
    agents = [ScriptedAgent("a", ""), ScriptedAgent("b", ""), ScriptedAgent("a", "")]
    assert seat_names(agents) == ["a#0", "b", "a#2"]


def test_match_log(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "match.json"
    play_match(_scripted("AHG*IFV"), log_path=log_path)
    payload = json.loads(log_path.read_text(encoding="utf-8"))
    assert payload["game"] == "tris3d"
    assert payload["result"]["reason"] == "win"
    assert payload["result"]["winner"] == 0
    assert len(payload["result"]["move_history"]) == 7
    assert payload["final_state"] == {"moves": list("AHG*IFV")}


def test_non_json_move_is_logged_as_repr(tmp_path: Path) -> None:
    class ObjectAgent:
        name = "object"

        def select_move(self, rules, state, player, legal_moves):
            return {"cell": {"A"}}

    log_path = tmp_path / "match.json"
    r = play_match([ObjectAgent(), RandomAgent(), RandomAgent()], log_path=log_path)
    assert r.reason == "illegal_move"
    assert r.move_history[-1].move == "{'cell': {'A'}}"
    payload = json.loads(log_path.read_text(encoding="utf-8"))
    assert payload["result"]["move_history"][-1]["move"] == "{'cell': {'A'}}"
