# src/tetris_queue/core/runtime/queue_text.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from tetris_queue.core.game.piece_queue import PieceQueue
from tetris_queue.core.game.types import Piece


@dataclass(frozen=True)
class QueueSnapshot:
    pieces: Tuple[Piece, ...]
    count: int
    capacity: int

    @classmethod
    def of(cls, queue: PieceQueue) -> "QueueSnapshot":
        count, capacity = queue.occupancy()
        return cls(pieces=queue.snapshot(), count=int(count), capacity=int(capacity))


class QueueFormatter:
    def __init__(self, *, separator: str = " -> ") -> None:
        self.separator = str(separator)

    @staticmethod
    def _fmt_piece(p: Piece) -> str:
        return p.label()

    def format_pieces(self, s: QueueSnapshot) -> str:
        if s.count == 0:
            return "[EMPTY]"
        return self.separator.join(self._fmt_piece(p) for p in s.pieces)

    def format_lines(self, s: QueueSnapshot) -> list[str]:
        lines = [f"--- QUEUE STATE ({s.count}/{s.capacity}) ---"]
        lines.append(f"Pieces: {self.format_pieces(s)}")
        if s.count > 0:
            lines.append("--- END OF QUEUE ---")
        return lines


def render_queue_table(s: QueueSnapshot) -> Any:
    from rich import box
    from rich.table import Table

    table = Table(title=f"Next pieces ({s.count}/{s.capacity})", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Kind")
    table.add_column("Id", justify="right")

    if s.count == 0:
        table.add_row("-", "[EMPTY]", "-")
        return table

    for pos, p in enumerate(s.pieces):
        table.add_row(str(pos), str(p.kind), str(p.id))
    return table


__all__ = ["QueueFormatter", "QueueSnapshot", "render_queue_table"]
