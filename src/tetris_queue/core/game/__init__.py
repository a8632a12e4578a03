# src/tetris_queue/core/game/__init__.py
from __future__ import annotations

from tetris_queue.core.game.config import GameConfig, PieceRule, QueueConfig
from tetris_queue.core.game.errors import PieceQueueError, QueueEmptyError, QueueFullError
from tetris_queue.core.game.piece_factory import DEFAULT_PIECE_KINDS, PieceFactory, make_piece_factory
from tetris_queue.core.game.piece_queue import PieceQueue, PieceSource
from tetris_queue.core.game.types import Piece

__all__ = [
    "DEFAULT_PIECE_KINDS",
    "GameConfig",
    "Piece",
    "PieceFactory",
    "PieceQueue",
    "PieceQueueError",
    "PieceRule",
    "PieceSource",
    "QueueConfig",
    "QueueEmptyError",
    "QueueFullError",
    "make_piece_factory",
]
