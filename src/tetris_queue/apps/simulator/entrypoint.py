# src/tetris_queue/apps/simulator/entrypoint.py
from __future__ import annotations

import argparse
import logging
from enum import IntEnum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from tetris_queue.core.config.io import load_simulator_config, to_plain_dict
from tetris_queue.core.config.root import SimulatorConfig
from tetris_queue.core.game.errors import QueueEmptyError, QueueFullError
from tetris_queue.core.game.factory import QueueBundle, make_queue_bundle_from_cfg
from tetris_queue.core.game.types import Piece
from tetris_queue.core.runtime.queue_text import QueueFormatter, QueueSnapshot, render_queue_table
from tetris_queue.utils.logging import setup_logger

ReadLine = Callable[[str], str]

LOGGER_NAME = "tetris_queue"


class MenuAction(IntEnum):
    EXIT = 0
    PLAY = 1
    INSERT = 2


MENU_LINES = (
    "Actions:",
    "1. Play piece (dequeue)",
    "2. Insert new piece (enqueue)",
    "0. Exit",
)


def parse_choice(raw: str) -> Optional[MenuAction]:
    """Menu input -> action; None for anything that is not a listed option."""
    s = str(raw).strip()
    try:
        value = int(s)
    except ValueError:
        return None
    try:
        return MenuAction(value)
    except ValueError:
        return None


class MenuSession:
    """
    Turn-based menu around one queue + factory.

    Full/Empty are reported to the user and the session keeps going; only
    option 0 or end of input stops it.
    """

    def __init__(
        self,
        *,
        cfg: SimulatorConfig,
        bundle: QueueBundle,
        console: Console,
        read_line: ReadLine,
        logger: logging.Logger,
    ) -> None:
        self.cfg = cfg
        self.queue = bundle.queue
        self.factory = bundle.factory
        self.console = console
        self.read_line = read_line
        self.logger = logger
        self.formatter = QueueFormatter()

        self.played = 0
        self.inserted = 0
        self.refused = 0

    # ------------------------------------------------------------------
    # output
    # ------------------------------------------------------------------

    def _say(self, text: str, *, style: Optional[str] = None) -> None:
        self.console.print(escape(text), style=style, highlight=False)

    def render(self) -> None:
        snap = QueueSnapshot.of(self.queue)
        self.console.print()
        if self.cfg.view == "table":
            self.console.print(render_queue_table(snap))
            return
        for line in self.formatter.format_lines(snap):
            self._say(line)

    def _render_menu(self) -> None:
        self.console.print()
        for line in MENU_LINES:
            self._say(line)

    # ------------------------------------------------------------------
    # actions
    # ------------------------------------------------------------------

    def prefill(self) -> int:
        n = self.queue.initialize_full(self.factory, self.cfg.queue.initial_fill)
        self.logger.debug(f"[queue] prefill requested={self.cfg.queue.initial_fill} inserted={n}")
        return n

    def play_piece(self) -> Optional[Piece]:
        try:
            piece = self.queue.dequeue()
        except QueueEmptyError:
            self.refused += 1
            self.logger.debug("[queue] dequeue refused: empty")
            self._say("Queue is empty! No pieces to play.", style="yellow")
            return None
        self.played += 1
        self.logger.debug(f"[queue] dequeue {piece.label()} occupancy={self.queue.occupancy()}")
        self._say(f"PIECE PLAYED: {piece.label()} removed from the front of the queue.", style="green")
        return piece

    def insert_piece(self) -> Optional[Piece]:
        try:
            piece = self.queue.enqueue(self.factory)
        except QueueFullError as e:
            self.refused += 1
            self.logger.debug("[queue] enqueue refused: full")
            self._say(
                f"Queue is full! Cannot insert more pieces. Maximum: {e.capacity}.",
                style="yellow",
            )
            return None
        self.inserted += 1
        self.logger.debug(f"[queue] enqueue {piece.label()} occupancy={self.queue.occupancy()}")
        self._say(f"PIECE INSERTED: {piece.label()} added to the back of the queue.", style="green")
        return piece

    def handle(self, action: Optional[MenuAction]) -> bool:
        """Run one menu action. Returns False when the session should end."""
        if action is None:
            self._say("Invalid option. Please enter one of 1, 2 or 0.", style="red")
            return True
        if action is MenuAction.EXIT:
            self._say("Leaving the Tetris queue simulator. Bye!")
            return False
        if action is MenuAction.PLAY:
            self.play_piece()
        elif action is MenuAction.INSERT:
            self.insert_piece()
        return True

    def _read(self, prompt: str) -> Optional[str]:
        """Read one line; end of input is handled as option 0 and yields None."""
        try:
            return self.read_line(prompt)
        except EOFError:
            self.console.print()
            self.handle(MenuAction.EXIT)
            return None

    def _pause(self) -> bool:
        if not self.cfg.pause:
            return True
        return self._read("Press ENTER to continue...") is not None

    # ------------------------------------------------------------------
    # loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        self.prefill()
        while True:
            self.render()
            self._render_menu()
            raw = self._read("Enter action code: ")
            if raw is None:
                break
            if not self.handle(parse_choice(raw)):
                break
            if not self._pause():
                break

        self.logger.info(
            f"[sim] session done: played={self.played} inserted={self.inserted} "
            f"refused={self.refused} next_id={self.factory.next_id}"
        )
        return 0


def run_simulator(
    cfg: SimulatorConfig,
    *,
    console: Optional[Console] = None,
    read_line: Optional[ReadLine] = None,
) -> int:
    console = console if console is not None else Console()
    if read_line is None:
        read_line = console.input

    logger = setup_logger(name=LOGGER_NAME, use_rich=cfg.use_rich, level=cfg.log_level, console=console)

    logger.debug(f"[sim] config: {to_plain_dict(cfg)}")

    bundle = make_queue_bundle_from_cfg(cfg)
    logger.info(
        f"[sim] seed={bundle.seed} capacity={bundle.queue.capacity} initial_fill={cfg.queue.initial_fill} "
        f"piece_rule={bundle.factory.piece_rule} kinds={','.join(bundle.factory.kinds)}"
    )

    session = MenuSession(cfg=cfg, bundle=bundle, console=console, read_line=read_line, logger=logger)
    return session.run()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Interactive simulator of the Tetris 'next pieces' queue.",
        allow_abbrev=False,
    )
    ap.add_argument("-cfg", "--config-file", dest="config_file", default=None, help="path to a YAML config file")
    ap.add_argument("--seed", type=int, default=None, help="piece RNG seed (default: time-based)")
    ap.add_argument("--capacity", type=int, default=None, help="queue capacity (overrides queue.capacity)")
    ap.add_argument("--piece-rule", type=str, default=None, choices=["uniform", "bag"])
    ap.add_argument("--view", type=str, default=None, choices=["text", "table"])
    ap.add_argument("--no-pause", action="store_true", help="do not wait for ENTER after each action")
    ap.add_argument("--log-level", type=str, default=None)
    ap.add_argument("overrides", nargs=argparse.REMAINDER, help="dotlist overrides, e.g. queue.capacity=3")
    return ap


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SimulatorConfig:
    """
    Precedence: YAML file < trailing dotlist overrides < explicit flags.
    """
    overrides: List[str] = [str(o) for o in (args.overrides or [])]
    if args.seed is not None:
        overrides.append(f"game.seed={int(args.seed)}")
    if args.capacity is not None:
        overrides.append(f"queue.capacity={int(args.capacity)}")
    if args.piece_rule is not None:
        overrides.append(f"game.piece_rule={args.piece_rule}")
    if args.view is not None:
        overrides.append(f"view={args.view}")
    if args.no_pause:
        overrides.append("pause=false")
    if args.log_level is not None:
        overrides.append(f"log_level={args.log_level}")

    path = Path(args.config_file) if args.config_file else None
    return load_simulator_config(path, overrides=overrides)


__all__ = [
    "MenuAction",
    "MenuSession",
    "build_parser",
    "config_from_args",
    "parse_args",
    "parse_choice",
    "run_simulator",
]
