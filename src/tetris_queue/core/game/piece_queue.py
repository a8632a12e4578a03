# src/tetris_queue/core/game/piece_queue.py
from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Tuple

from tetris_queue.core.game.errors import QueueEmptyError, QueueFullError
from tetris_queue.core.game.types import Piece


class PieceSource(Protocol):
    def generate(self) -> Piece: ...


class PieceQueue:
    """
    Fixed-capacity circular buffer of pieces ("next pieces" preview).

    State:
      slots : `capacity` slots, each a Piece or None
      head  : index of the oldest piece (meaningful only when count > 0)
      tail  : index of the newest piece, None when the queue is empty
      count : 0 <= count <= capacity

    Occupied slots form the circular run head, head+1, ..., head+count-1 (mod capacity).

    The queue never creates pieces itself; enqueue() pulls one from the
    caller-supplied source, and only after the capacity check passed.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or int(capacity) < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity!r}")
        self._capacity = int(capacity)
        self._slots: List[Optional[Piece]] = [None] * self._capacity
        self._head = 0
        self._tail: Optional[int] = None
        self._count = 0

    # ------------------------------------------------------------------
    # read-only state
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> Optional[int]:
        return self._tail

    def occupancy(self) -> Tuple[int, int]:
        return self._count, self._capacity

    def is_full(self) -> bool:
        return self._count == self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def enqueue(self, factory: PieceSource) -> Piece:
        """
        Insert a freshly generated piece at the back.

        Raises QueueFullError (state unchanged, no piece generated) when full.
        """
        if self._count == self._capacity:
            raise QueueFullError(capacity=self._capacity)

        # empty queue: the run restarts at head, wherever it was left
        idx = self._head if self._tail is None else (self._tail + 1) % self._capacity
        piece = factory.generate()
        self._slots[idx] = piece
        self._tail = idx
        self._count += 1
        return piece

    def dequeue(self) -> Piece:
        """
        Remove and return the piece at the front.

        Raises QueueEmptyError when empty; tail is (re)set to None in that case.
        """
        if self._count == 0:
            self._tail = None
            raise QueueEmptyError(capacity=self._capacity)

        piece = self._slots[self._head]
        assert piece is not None
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        if self._count == 0:
            self._tail = None
        return piece

    def initialize_full(self, factory: PieceSource, n: int) -> int:
        """
        Bulk pre-fill through the single-item enqueue path.

        Requests above the free space are clamped silently. Returns the number
        of pieces inserted.
        """
        if int(n) < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        todo = min(int(n), self._capacity - self._count)
        for _ in range(todo):
            self.enqueue(factory)
        return todo

    # ------------------------------------------------------------------
    # enumeration
    # ------------------------------------------------------------------

    def snapshot(self) -> Tuple[Piece, ...]:
        """Pieces from head to tail (oldest first). Does not mutate the queue."""
        return tuple(self)

    def __iter__(self) -> Iterator[Piece]:
        cap = self._capacity
        for k in range(self._count):
            piece = self._slots[(self._head + k) % cap]
            assert piece is not None
            yield piece

    def __repr__(self) -> str:
        return (
            f"PieceQueue(capacity={self._capacity}, count={self._count}, "
            f"head={self._head}, tail={self._tail})"
        )


__all__ = ["PieceQueue", "PieceSource"]
