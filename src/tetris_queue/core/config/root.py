# src/tetris_queue/core/config/root.py
from __future__ import annotations

from typing import Literal

from pydantic import field_validator

from tetris_queue.core.config.base import ConfigBase
from tetris_queue.core.game.config import GameConfig, QueueConfig

QueueView = Literal["text", "table"]

_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class SimulatorConfig(ConfigBase):
    log_level: str = "info"
    use_rich: bool = True
    # wait for ENTER after each action
    pause: bool = True
    view: QueueView = "text"
    game: GameConfig = GameConfig()
    queue: QueueConfig = QueueConfig()

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level(cls, v: object) -> str:
        s = str(v).strip().lower()
        if s not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return s

    @field_validator("view", mode="before")
    @classmethod
    def _view_lower(cls, v: object) -> str:
        return str(v).strip().lower()


__all__ = ["SimulatorConfig", "QueueView"]
