# src/tetris_queue/core/game/errors.py
from __future__ import annotations


class PieceQueueError(Exception):
    """Base class for recoverable queue conditions (queue state stays valid)."""

    def __init__(self, message: str, *, capacity: int) -> None:
        super().__init__(message)
        self.capacity = int(capacity)


class QueueFullError(PieceQueueError):
    def __init__(self, *, capacity: int) -> None:
        super().__init__(f"queue is full (capacity={int(capacity)})", capacity=capacity)


class QueueEmptyError(PieceQueueError):
    def __init__(self, *, capacity: int) -> None:
        super().__init__(f"queue is empty (capacity={int(capacity)})", capacity=capacity)


__all__ = ["PieceQueueError", "QueueFullError", "QueueEmptyError"]
