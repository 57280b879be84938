from __future__ import annotations

from pathlib import Path

import pytest

from tris3d.config import load_match_config, parse_match_config


def test_load_match_config(tmp_path: Path) -> None:
    path = tmp_path / "match.toml"
    path.write_text(
        "\n".join(
            [
                "seed = 7",
                f'log_dir = "{tmp_path / "logs"}"',
                "",
                "[[players]]",
                'id = "alice"',
                'agent = "human"',
                "",
                "[[players]]",
                'id = "bob"',
                "",
                "[[players]]",
                'id = "carol"',
                'agent = "random"',
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    cfg = load_match_config(path)
    assert [p.id for p in cfg.players] == ["alice", "bob", "carol"]
    assert [p.agent for p in cfg.players] == ["human", "random", "random"]
    assert cfg.seed == 7
    assert cfg.log_dir == (tmp_path / "logs").resolve()


def test_config_requires_three_players() -> None:
    with pytest.raises(ValueError):
        parse_match_config({"players": [{"id": "a"}, {"id": "b"}]})


def test_config_requires_distinct_ids() -> None:
    with pytest.raises(ValueError):
        parse_match_config({"players": [{"id": "a"}, {"id": "b"}, {"id": "a"}]})


def test_config_checks_seed() -> None:
    with pytest.raises(ValueError):
        parse_match_config({"seed": "x", "players": [{"id": "a"}, {"id": "b"}, {"id": "c"}]})


def test_config_rejects_boolean_seed() -> None:
    with pytest.raises(ValueError):
        parse_match_config({"seed": True, "players": [{"id": "a"}, {"id": "b"}, {"id": "c"}]})
