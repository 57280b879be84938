from __future__ import annotations

from dataclasses import dataclass

from ..rules import JSONValue, PlayerId, Rules


@dataclass(slots=True)
class HumanAgent:
    name: str = "human"

    def select_move(
        self,
        rules: Rules,
        state: JSONValue,
        player: PlayerId,
        legal_moves: list[JSONValue],
    ) -> JSONValue:
        moves = state.get("moves", []) if isinstance(state, dict) else []
        print(f"moves so far: {' '.join(str(m) for m in moves) or '-'}")
        print(f"seat: {player}")
        print(f"free cells: {' '.join(str(m) for m in legal_moves)}")

        while True:
            raw = input("choose cell> ").strip().upper()
            if raw in legal_moves:
                return raw
            print("not a free cell")
