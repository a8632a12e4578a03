# src/tetris_queue/utils/logging.py
from __future__ import annotations

import logging
from typing import Any, Optional


def setup_logger(
    *,
    name: str,
    use_rich: bool = True,
    level: str = "info",
    console: Optional[Any] = None,
) -> logging.Logger:
    """
    Configure a named logger (idempotent: previous handlers are dropped).

    console:
      - optional rich Console shared with the menu output, so log records
        and queue rendering interleave on the same stream
    """
    logger = logging.getLogger(str(name))
    logger.handlers.clear()
    logger.propagate = False

    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(lvl)

    handler: Optional[logging.Handler] = None

    if use_rich:
        from rich.logging import RichHandler

        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(getattr(console, "file", None))
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))

    logger.addHandler(handler)
    return logger


__all__ = ["setup_logger"]
