"""
edgetile - Entry point.

Ejecuta una lista de comandos sobre un host virtual con una sola ventana
y muestra la geometria resultante tras cada uno. Util para probar
secuencias de pasos y gaps sin un gestor de ventanas real.

Run with:
    python -m edgetile --work-area 0,0,1920,1080 --gap 2 \\
        tile-window-to-left tile-window-to-left tile-window-restore
"""

from __future__ import annotations

import argparse
import logging
import sys

from edgetile.config.defaults import GAP_SIZE_MAX
from edgetile.config.settings import MemorySettingsStore, TilingSettings
from edgetile.core.commands import (
    Command,
    CommandDispatcher,
    build_default_commands,
)
from edgetile.core.host import VirtualHost
from edgetile.tiling.engine import TilingEngine
from edgetile.tiling.gaps import GapSizeController
from edgetile.tiling.rect import Rect

WINDOW_ID = 0x1


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for edgetile."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(handler)


def _rect_arg(text: str) -> Rect:
    try:
        return Rect.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _command_arg(text: str) -> Command:
    try:
        return Command.from_name(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown command {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgetile",
        description="Run tiling commands against a simulated window.",
    )
    parser.add_argument(
        "commands",
        nargs="*",
        type=_command_arg,
        metavar="COMMAND",
        help="shortcut names, e.g. tile-window-to-left (see --list)",
    )
    parser.add_argument(
        "--work-area", type=_rect_arg, default=Rect(0, 0, 1920, 1080),
        metavar="X,Y,W,H", help="usable area of the monitor",
    )
    parser.add_argument(
        "--frame", type=_rect_arg, default=Rect(100, 100, 800, 600),
        metavar="X,Y,W,H", help="initial window frame",
    )
    parser.add_argument(
        "--gap", type=int, default=0, choices=range(GAP_SIZE_MAX + 1),
        metavar=f"0-{GAP_SIZE_MAX}", help="gap size in percent",
    )
    parser.add_argument(
        "--no-inner-gaps", action="store_true",
        help="do not leave gaps between adjacent tiles",
    )
    parser.add_argument("--steps-center", help="e.g. 1,0.75,0.5")
    parser.add_argument("--steps-side", help="e.g. 0.5,0.333,0.667")
    parser.add_argument("--list", action="store_true", help="list commands and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    settings = TilingSettings(
        gap_size=args.gap,
        enable_inner_gaps=not args.no_inner_gaps,
    )
    if args.steps_center is not None:
        settings.tiling_steps_center = args.steps_center
    if args.steps_side is not None:
        settings.tiling_steps_side = args.steps_side
    store = MemorySettingsStore(settings)

    host = VirtualHost(args.work_area)
    host.add_window(WINDOW_ID, args.frame)

    engine = TilingEngine(host, store)
    dispatcher = CommandDispatcher()
    build_default_commands(dispatcher, engine, GapSizeController(store, host))

    if args.list:
        print(dispatcher.dump_state())
        return 0

    print(f"  start{'':<32s} {host.get_window(WINDOW_ID).frame}")
    for command in args.commands:
        name = command.value.removeprefix("shortcut-")
        if not dispatcher.execute(command):
            print(f"  {name:<37s} failed")
            return 1
        print(f"  {name:<37s} {host.get_window(WINDOW_ID).frame}")

    for title, message in host.notifications:
        print(f"  [{title}] {message}")

    if args.verbose:
        print("\n" + engine.dump_state())

    return 0


if __name__ == "__main__":
    sys.exit(main())
