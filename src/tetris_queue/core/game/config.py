# src/tetris_queue/core/game/config.py
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field, field_validator

from tetris_queue.core.config.base import ConfigBase
from tetris_queue.core.game.piece_factory import DEFAULT_PIECE_KINDS, PieceRule, normalize_kinds


# validators raise ValueError so pydantic reports them as ValidationError
def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise ValueError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where} must be an int-like value, got {value!r}") from e


class GameConfig(ConfigBase):
    """
    Piece generation settings.

      seed       : None => time-based seed, resolved once at startup
      piece_rule : "uniform" | "bag"
      piece_kinds: labels drawn by the factory
    """

    seed: Optional[int] = Field(default=None, ge=0)
    piece_rule: PieceRule = "uniform"
    piece_kinds: Tuple[str, ...] = DEFAULT_PIECE_KINDS

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> Optional[int]:
        if v is None:
            return None
        return _as_int(v, where="game.seed")

    @field_validator("piece_rule", mode="before")
    @classmethod
    def _piece_rule_lower(cls, v: object) -> str:
        return str(v).strip().lower()

    @field_validator("piece_kinds", mode="before")
    @classmethod
    def _kinds(cls, v: object) -> Tuple[str, ...]:
        if isinstance(v, str):
            # "I,O,T,L" shorthand (CLI overrides)
            v = v.split(",")
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"game.piece_kinds must be a list of labels, got {type(v)!r}")
        try:
            return normalize_kinds(v, where="game.piece_kinds")
        except TypeError as e:
            raise ValueError(str(e)) from e


class QueueConfig(ConfigBase):
    capacity: int = Field(default=5, ge=1)
    # above capacity is clamped at fill time, not rejected
    initial_fill: int = Field(default=5, ge=0)

    @field_validator("capacity", "initial_fill", mode="before")
    @classmethod
    def _ints(cls, v: object) -> int:
        return _as_int(v, where="queue.capacity/initial_fill")


__all__ = ["GameConfig", "QueueConfig", "PieceRule"]
