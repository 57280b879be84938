from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Any


def load_agent(spec: str, *, seed: int | None = None) -> Any:
    """Build an agent from "human", "random" or "<path>:<symbol>"."""
    if spec == "human":
        from .agents.human import HumanAgent

        return HumanAgent()
    if spec == "random":
        from .agents.random_agent import RandomAgent

        return RandomAgent(seed=seed)
    return _agent_from_file(spec)


def _agent_from_file(spec: str) -> Any:
    """
    "bots/corner.py:CornerFirst" imports bots/corner.py and calls CornerFirst();
    a non-callable symbol is used as the agent itself.
    """
    path_str, sep, symbol = spec.rpartition(":")
    if not sep or not path_str or not symbol:
        raise ValueError(f"Agent must be 'human', 'random' or '<path>:<symbol>', got: {spec!r}")
    path = Path(path_str).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(path)

    module_name = f"tris3d_agent_{path.stem}_{abs(hash(str(path)))}"
    module_spec = importlib.util.spec_from_file_location(module_name, str(path))
    if module_spec is None or module_spec.loader is None:
        raise ImportError(f"Could not load agent module from: {path}")
    module = importlib.util.module_from_spec(module_spec)
    sys.modules[module_name] = module
    module_spec.loader.exec_module(module)

    try:
        obj = getattr(module, symbol)
    except AttributeError as e:
        raise AttributeError(f"{path} has no symbol {symbol!r}") from e
    agent = obj() if callable(obj) else obj
    if not callable(getattr(agent, "select_move", None)):
        raise TypeError(f"{spec!r} is not an agent: select_move(rules, state, player, legal_moves) is missing")
    return agent
