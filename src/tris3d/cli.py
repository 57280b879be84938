from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import MatchConfig, PlayerConfig, load_match_config
from .engine import play_match
from .errors import Tris3dError
from .loading import load_agent
from .positions import POSITIONS, index_of_position, vector_of_position
from .replay import load_match_log, replay_from_log_payload
from .winning_combinations import is_winning_combination


def cmd_labels(_: argparse.Namespace) -> int:
    for label in POSITIONS:
        x, y, z = vector_of_position(label)  # type: ignore[misc]
        print(f"{label}  {index_of_position(label):2d}  ({x}, {y}, {z})")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    try:
        win = is_winning_combination(args.a, args.b, args.c)
    except Tris3dError as e:
        print(f"error: {e.kind.value}")
        return 1
    print("win" if win else "no win")
    return 0


def _match_config(args: argparse.Namespace) -> MatchConfig:
    if args.config:
        cfg = load_match_config(Path(args.config).expanduser().resolve())
    else:
        cfg = MatchConfig(
            players=[PlayerConfig(id=f"p{seat}", agent=agent) for seat, agent in enumerate((args.p0, args.p1, args.p2))]
        )
    seed = args.seed if args.seed is not None else cfg.seed
    return MatchConfig(players=cfg.players, seed=seed, log_dir=cfg.log_dir)


def cmd_play(args: argparse.Namespace) -> int:
    cfg = _match_config(args)
    agents = [
        load_agent(p.agent, seed=None if cfg.seed is None else cfg.seed + seat) for seat, p in enumerate(cfg.players)
    ]

    log_path = None
    if args.log:
        log_path = Path(args.log).expanduser().resolve()
    elif cfg.log_dir:
        log_path = cfg.log_dir / f"match_{'_'.join(p.id for p in cfg.players)}.json"

    result = play_match(agents, player_ids=[p.id for p in cfg.players], log_path=log_path)

    print(f"moves: {' '.join(result.moves)}")
    print(f"winner: {None if result.winner is None else result.players[result.winner]}")
    print(f"reason: {result.reason}")
    print(f"turns: {result.turns}")
    if log_path:
        print(f"log: {log_path}")
    return 0


def cmd_replay(args: argparse.Namespace) -> int:
    payload = load_match_log(Path(args.log).expanduser().resolve())
    rep = replay_from_log_payload(payload)
    for m in rep.moves:
        who = rep.players[m.player]
        suffix = f"  ({m.note})" if m.note else ""
        print(f"{m.turn:2d}. {who}: {m.move}{suffix}")
    winner = rep.terminal.winner
    print(f"winner: {None if winner is None else rep.players[winner]}")
    print(f"reason: {rep.terminal.reason or 'unfinished'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tris3d")
    p.add_argument("-v", "--verbose", action="store_true", help="Log match events to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_labels = sub.add_parser("labels", help="List cell labels with their index and coordinates")
    p_labels.set_defaults(func=cmd_labels)

    p_check = sub.add_parser("check", help="Tell whether three cells are a winning combination")
    p_check.add_argument("a")
    p_check.add_argument("b")
    p_check.add_argument("c")
    p_check.set_defaults(func=cmd_check)

    p_play = sub.add_parser("play", help="Play a three player match")
    p_play.add_argument("--config", help="Match TOML with three [[players]] entries")
    p_play.add_argument("--p0", default="human", help="Seat 0: human|random|<path>:<symbol>")
    p_play.add_argument("--p1", default="random", help="Seat 1: human|random|<path>:<symbol>")
    p_play.add_argument("--p2", default="random", help="Seat 2: human|random|<path>:<symbol>")
    p_play.add_argument("--seed", type=int, default=None, help="Seed for random agents")
    p_play.add_argument("--log", help="Write JSON match log to this path")
    p_play.set_defaults(func=cmd_play)

    p_replay = sub.add_parser("replay", help="Replay a JSON match log")
    p_replay.add_argument("log")
    p_replay.set_defaults(func=cmd_replay)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
