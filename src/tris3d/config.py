from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .board import NUM_PLAYERS


@dataclass(frozen=True, slots=True)
class PlayerConfig:
    id: str
    agent: str


@dataclass(frozen=True, slots=True)
class MatchConfig:
    players: list[PlayerConfig]
    seed: int | None = None
    log_dir: Path | None = None


def parse_match_config(data: dict[str, Any]) -> MatchConfig:
    """
    Validate a match table such as::

        seed = 7
        log_dir = "logs"

        [[players]]
        id = "alice"
        agent = "human"
    """
    players_raw = data.get("players", [])
    if not isinstance(players_raw, list) or len(players_raw) != NUM_PLAYERS:
        raise ValueError(f"Config must contain exactly {NUM_PLAYERS} [[players]] entries")

    players: list[PlayerConfig] = []
    for p in players_raw:
        if not isinstance(p, dict) or "id" not in p:
            raise ValueError("Each [[players]] entry must be a table with an 'id'")
        players.append(PlayerConfig(id=str(p["id"]), agent=str(p.get("agent", "random"))))
    if len({p.id for p in players}) != len(players):
        raise ValueError("Player ids must be distinct")

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"seed must be an integer, got: {seed!r}")

    log_dir = None
    if data.get("log_dir"):
        log_dir = Path(str(data["log_dir"])).expanduser().resolve()

    return MatchConfig(players=players, seed=seed, log_dir=log_dir)


def load_match_config(path: Path) -> MatchConfig:
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a TOML table")
    return parse_match_config(data)
