# tests/test_piece_queue.py
from __future__ import annotations

import pytest

from tetris_queue.core.game.errors import QueueEmptyError, QueueFullError
from tetris_queue.core.game.piece_factory import PieceFactory
from tetris_queue.core.game.piece_queue import PieceQueue


def _ids(queue: PieceQueue) -> list[int]:
    return [p.id for p in queue.snapshot()]


def _factory(seed: int = 0) -> PieceFactory:
    return PieceFactory.from_seed(seed)


def test_new_queue_is_empty_with_no_tail() -> None:
    q = PieceQueue(5)
    assert q.occupancy() == (0, 5)
    assert q.is_empty()
    assert q.tail is None
    assert q.snapshot() == ()


def test_initialize_full_yields_ids_in_order() -> None:
    q = PieceQueue(5)
    assert q.initialize_full(_factory(), 5) == 5
    assert q.is_full()
    assert _ids(q) == [0, 1, 2, 3, 4]


def test_dequeue_then_enqueue_keeps_fifo_order() -> None:
    q = PieceQueue(5)
    f = _factory()
    q.initialize_full(f, 5)
    assert q.dequeue().id == 0
    assert q.enqueue(f).id == 5
    assert _ids(q) == [1, 2, 3, 4, 5]


def test_wrap_around_on_capacity_three() -> None:
    q = PieceQueue(3)
    f = _factory()
    for _ in range(3):
        q.enqueue(f)
    assert q.dequeue().id == 0
    assert q.enqueue(f).id == 3
    assert _ids(q) == [1, 2, 3]
    # the newest piece went into the first backing slot
    assert q.tail == 0
    assert q.head == 1


def test_initialize_full_clamps_oversized_request() -> None:
    q = PieceQueue(5)
    f = _factory()
    assert q.initialize_full(f, 10) == 5
    assert q.occupancy() == (5, 5)
    assert f.next_id == 5


def test_initialize_full_rejects_negative() -> None:
    with pytest.raises(ValueError, match="n must be >= 0"):
        PieceQueue(2).initialize_full(_factory(), -1)


def test_full_enqueue_is_idempotent_and_generates_nothing() -> None:
    q = PieceQueue(2)
    f = _factory()
    q.initialize_full(f, 2)
    before = q.snapshot()
    for _ in range(4):
        with pytest.raises(QueueFullError) as exc:
            q.enqueue(f)
        assert exc.value.capacity == 2
    assert q.occupancy() == (2, 2)
    assert q.snapshot() == before
    assert f.next_id == 2


def test_empty_dequeue_is_idempotent() -> None:
    q = PieceQueue(3)
    for _ in range(3):
        with pytest.raises(QueueEmptyError):
            q.dequeue()
        assert q.count == 0
        assert q.tail is None


def test_fifo_matches_insertion_order_across_many_cycles() -> None:
    q = PieceQueue(4)
    f = _factory(7)
    inserted: list[int] = []
    removed: list[int] = []
    # mixed pattern that wraps the indices several times
    for step in range(50):
        if step % 3 == 2 or q.is_full():
            if not q.is_empty():
                removed.append(q.dequeue().id)
        else:
            inserted.append(q.enqueue(f).id)
        assert 0 <= q.count <= q.capacity
    while not q.is_empty():
        removed.append(q.dequeue().id)
    assert removed == inserted
    assert inserted == list(range(len(inserted)))


def test_refill_after_draining_a_wrapped_queue() -> None:
    q = PieceQueue(3)
    f = _factory()
    q.initialize_full(f, 3)
    q.dequeue()
    q.enqueue(f)
    while not q.is_empty():
        q.dequeue()
    assert q.tail is None
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    q.enqueue(f)
    q.enqueue(f)
    assert _ids(q) == [4, 5]


def test_snapshot_is_restartable_and_read_only() -> None:
    q = PieceQueue(5)
    q.initialize_full(_factory(), 3)
    first = q.snapshot()
    assert q.snapshot() == first
    assert list(q) == list(first)
    assert len(q) == 3


@pytest.mark.parametrize("capacity", [0, -1])
def test_capacity_must_be_positive(capacity: int) -> None:
    with pytest.raises(ValueError, match="capacity must be >= 1"):
        PieceQueue(capacity)
