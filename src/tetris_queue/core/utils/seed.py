# src/tetris_queue/core/utils/seed.py
from __future__ import annotations

import time
from typing import Optional

"""
Seed utilities for the piece factory.

  - splitmix64: stateless 64-bit mixer
  - seed32_from: derive a 31-bit seed from a base seed + stream id
  - resolve_seed: explicit seed, or a time-based one when none is configured

No RNG state is stored here.
"""


def splitmix64(x: int) -> int:
    """
    Stateless 64-bit SplitMix hash.

    Input is treated as unsigned 64-bit; output is a uint64 encoded as Python int.
    """
    z = (int(x) + 0x9E3779B97F4A7C15) & 0xFFFFFFFFFFFFFFFF
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & 0xFFFFFFFFFFFFFFFF
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & 0xFFFFFFFFFFFFFFFF
    z = z ^ (z >> 31)
    return int(z & 0xFFFFFFFFFFFFFFFF)


def seed32_from(*, base_seed: int, stream_id: int) -> int:
    """
    Derive a deterministic seed in [0, 2^31 - 1] from (base_seed, stream_id).
    """
    mixed = splitmix64((int(base_seed) << 32) ^ int(stream_id))
    return int(mixed & 0x7FFFFFFF)


def resolve_seed(seed: Optional[int], *, stream_id: int = 0) -> int:
    """
    Return `seed` unchanged when given, otherwise a time-based seed.

    Called once per process (at factory construction); the result should be
    logged so a run can be replayed with an explicit seed.
    """
    if seed is not None:
        if int(seed) < 0:
            raise ValueError(f"seed must be >= 0, got {seed}")
        return int(seed)
    base = time.time_ns() & 0xFFFFFFFF
    return seed32_from(base_seed=base, stream_id=int(stream_id))


__all__ = ["splitmix64", "seed32_from", "resolve_seed"]
