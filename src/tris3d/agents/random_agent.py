from __future__ import annotations

import random
from dataclasses import dataclass, field

from ..rules import JSONValue, PlayerId, Rules


@dataclass(slots=True)
class RandomAgent:
    name: str = "random"
    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def select_move(
        self,
        rules: Rules,
        state: JSONValue,
        player: PlayerId,
        legal_moves: list[JSONValue],
    ) -> JSONValue:
        return self._rng.choice(legal_moves)
