from __future__ import annotations

__all__ = ["HumanAgent", "RandomAgent"]

from .human import HumanAgent
from .random_agent import RandomAgent
