# src/tetris_queue/core/game/types.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Piece:
    """
    A queued piece.

      kind : label from the factory's kind set (e.g. "I", "O", "T", "L")
      id   : unique, strictly increasing in creation order (starts at 0)
    """

    kind: str
    id: int

    def label(self) -> str:
        return f"[{self.kind} {self.id}]"
