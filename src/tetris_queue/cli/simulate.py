# src/tetris_queue/cli/simulate.py
from __future__ import annotations

from typing import Sequence

from tetris_queue.apps.simulator.entrypoint import config_from_args, parse_args, run_simulator


def main(argv: Sequence[str] | None = None) -> int:
    cfg = config_from_args(parse_args(argv))
    try:
        return run_simulator(cfg)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
