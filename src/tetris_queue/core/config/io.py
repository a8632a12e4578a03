# src/tetris_queue/core/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel

from tetris_queue.core.config.root import SimulatorConfig


def to_plain_dict(cfg: Any) -> dict[str, Any]:
    if isinstance(cfg, BaseModel):
        return cfg.model_dump(mode="json")
    if isinstance(cfg, DictConfig):
        data = OmegaConf.to_container(cfg, resolve=True)
        if not isinstance(data, dict):
            raise TypeError("config must resolve to a mapping")
        return data
    raise TypeError(f"unsupported config type: {type(cfg).__name__}")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    cfg = OmegaConf.load(cfg_path)
    data = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return data


def merge_overrides(data: dict[str, Any], overrides: Sequence[str]) -> dict[str, Any]:
    """
    Apply dotlist overrides ("queue.capacity=3", "game.seed=7") on top of `data`.
    """
    items = [str(o).strip() for o in overrides if str(o).strip() and str(o).strip() != "--"]
    if not items:
        return dict(data)
    for item in items:
        if "=" not in item:
            raise ValueError(f"override must look like key=value, got {item!r}")
    merged = OmegaConf.merge(OmegaConf.create(dict(data)), OmegaConf.from_dotlist(items))
    out = OmegaConf.to_container(merged, resolve=True)
    if not isinstance(out, dict):
        raise TypeError("merged config must be a mapping")
    return out


def load_simulator_config(
    path: Optional[Path] = None,
    *,
    overrides: Sequence[str] = (),
) -> SimulatorConfig:
    data: dict[str, Any] = {} if path is None else load_yaml(path)
    return SimulatorConfig.model_validate(merge_overrides(data, overrides))


__all__ = ["load_simulator_config", "load_yaml", "merge_overrides", "to_plain_dict"]
