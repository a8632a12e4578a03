# src/tetris_queue/core/game/piece_factory.py
from __future__ import annotations

from typing import List, Literal, Optional, Sequence, Tuple

import numpy as np

from tetris_queue.core.game.types import Piece

PieceRule = Literal["uniform", "bag"]

DEFAULT_PIECE_KINDS: Tuple[str, ...] = ("I", "O", "T", "L")
PIECE_RULES: Tuple[str, ...] = ("uniform", "bag")


def normalize_kinds(kinds: Sequence[str], *, where: str = "piece_kinds") -> Tuple[str, ...]:
    if isinstance(kinds, str):
        raise TypeError(f"{where} must be a sequence of labels, got a single string {kinds!r}")
    out: List[str] = []
    for k in kinds:
        if not isinstance(k, str):
            raise TypeError(f"{where} entries must be strings, got {type(k)!r}")
        s = k.strip()
        if not s:
            raise ValueError(f"{where} entries must be non-empty labels")
        out.append(s)
    if not out:
        raise ValueError(f"{where} must contain at least one kind")
    if len(set(out)) != len(out):
        raise ValueError(f"{where} must not contain duplicates, got {out}")
    return tuple(out)


class PieceFactory:
    """
    Generates pieces with a random kind and a unique id.

    The id counter is owned by the factory: it starts at `start_id` (0 for a
    fresh process), advances by exactly 1 per generate() and is never reset.

    Piece rules:
      uniform : each kind drawn uniformly at random
      bag     : kinds shuffled into a bag and dealt one at a time; refilled when empty
    """

    def __init__(
        self,
        *,
        rng: np.random.Generator,
        kinds: Sequence[str] = DEFAULT_PIECE_KINDS,
        piece_rule: str = "uniform",
        start_id: int = 0,
    ) -> None:
        rule = str(piece_rule).strip().lower()
        if rule not in PIECE_RULES:
            raise ValueError(f"piece_rule must be one of {list(PIECE_RULES)}, got {piece_rule!r}")
        if int(start_id) < 0:
            raise ValueError(f"start_id must be >= 0, got {start_id}")

        self._rng = rng
        self._kinds = normalize_kinds(kinds)
        self._rule = rule
        self._next_id = int(start_id)
        self._bag: List[str] = []

    @classmethod
    def from_seed(
        cls,
        seed: int,
        *,
        kinds: Sequence[str] = DEFAULT_PIECE_KINDS,
        piece_rule: str = "uniform",
    ) -> "PieceFactory":
        return cls(rng=np.random.default_rng(int(seed)), kinds=kinds, piece_rule=piece_rule)

    @property
    def kinds(self) -> Tuple[str, ...]:
        return self._kinds

    @property
    def piece_rule(self) -> str:
        return self._rule

    @property
    def next_id(self) -> int:
        return self._next_id

    def _draw_kind(self) -> str:
        if self._rule == "bag":
            if not self._bag:
                order = self._rng.permutation(len(self._kinds))
                # dealt from the end
                self._bag = [self._kinds[int(i)] for i in order[::-1]]
            return self._bag.pop()
        return self._kinds[int(self._rng.integers(len(self._kinds)))]

    def generate(self) -> Piece:
        piece = Piece(kind=self._draw_kind(), id=self._next_id)
        self._next_id += 1
        return piece

    def __repr__(self) -> str:
        return f"PieceFactory(kinds={self._kinds!r}, piece_rule={self._rule!r}, next_id={self._next_id})"


def make_piece_factory(
    *,
    seed: int,
    kinds: Optional[Sequence[str]] = None,
    piece_rule: str = "uniform",
) -> PieceFactory:
    return PieceFactory.from_seed(
        int(seed),
        kinds=DEFAULT_PIECE_KINDS if kinds is None else kinds,
        piece_rule=piece_rule,
    )


__all__ = [
    "DEFAULT_PIECE_KINDS",
    "PIECE_RULES",
    "PieceFactory",
    "PieceRule",
    "make_piece_factory",
    "normalize_kinds",
]
