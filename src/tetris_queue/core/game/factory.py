# src/tetris_queue/core/game/factory.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from tetris_queue.core.config.root import SimulatorConfig
from tetris_queue.core.game.piece_factory import PieceFactory, make_piece_factory
from tetris_queue.core.game.piece_queue import PieceQueue
from tetris_queue.core.utils.seed import resolve_seed


@dataclass(frozen=True)
class QueueBundle:
    """
    Queue + the factory that feeds it.

    seed:
      - the seed the factory RNG was actually built with
      - equals cfg.game.seed when configured, otherwise the time-based one
    """

    queue: PieceQueue
    factory: PieceFactory
    seed: int


def make_queue_bundle_from_cfg(cfg: Union[SimulatorConfig, Mapping[str, Any]]) -> QueueBundle:
    """
    Build an EMPTY queue and a freshly seeded factory.

    Pre-filling is left to the caller (queue.initialize_full) so the bundle
    can be inspected before any piece is generated.
    """
    if isinstance(cfg, SimulatorConfig):
        sim_cfg = cfg
    elif isinstance(cfg, Mapping):
        sim_cfg = SimulatorConfig.model_validate(dict(cfg))
    else:
        raise TypeError(f"cfg must be SimulatorConfig|mapping, got {type(cfg)!r}")

    seed = resolve_seed(sim_cfg.game.seed)
    factory = make_piece_factory(
        seed=seed,
        kinds=sim_cfg.game.piece_kinds,
        piece_rule=sim_cfg.game.piece_rule,
    )
    queue = PieceQueue(sim_cfg.queue.capacity)
    return QueueBundle(queue=queue, factory=factory, seed=seed)


__all__ = ["QueueBundle", "make_queue_bundle_from_cfg"]
