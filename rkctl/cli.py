"""rofi-keys command line entry point.

Loads (or creates) the launcher configuration, shows the menu through rofi
and launches the command bound to the key that was pressed.
"""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from rofi_keys import __version__
from rofi_keys.core.config import Configuration, default_config, init_config, load_config, resolve_config_path
from rofi_keys.core.errors import ConfigError, HomeNotFound, PipeFailure, ProcessSpawnFailure
from rofi_keys.core.executor import launch
from rofi_keys.core.menu import Menu
from rofi_keys.core.selector import ROFI_BINARY, RofiSelector

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _fail(message: str) -> int:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    return 1


def load_or_default(config_path: Path) -> Configuration:
    """Load the configuration, substituting the built-in default on failure.

    The substitute is not written back, so a broken file stays as it is.
    """
    try:
        return load_config(config_path)
    except ConfigError as exc:
        logger.error("Error loading config from %s: %s", config_path, exc)
        return default_config()


def cmd_init(config_path: Path) -> int:
    try:
        init_config(config_path)
    except ConfigError as exc:
        return _fail(str(exc))
    print(f"Default configuration initialized at {config_path}")
    return 0


def cmd_run(config_path: Path, rofi_binary: str, terminal: bool, wait: bool, dry_run: bool) -> int:
    config = load_or_default(config_path)
    menu = Menu.from_config(config)

    if terminal:
        from rkctl.terminal import TerminalSelector
        selector = TerminalSelector(menu)
    else:
        selector = RofiSelector(menu, binary=rofi_binary)

    try:
        command = selector.select()
    except (ProcessSpawnFailure, PipeFailure) as exc:
        return _fail(str(exc))

    if command is None:
        logger.debug("No entry selected")
        return 0
    if dry_run:
        print(command)
        return 0

    try:
        status = launch(command, wait=wait)
    except ProcessSpawnFailure as exc:
        return _fail(str(exc))
    # Negative status means the command was killed by a signal
    return status if status >= 0 else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rofi-keys",
        description="A keyboard-driven application launcher using rofi",
    )
    parser.add_argument("-c", "--config", metavar="FILE", default=os.environ.get("ROFI_KEYS_CONFIG") or None, help="Alternate config file path (default: ~/.config/rofi-keys/config.json or ROFI_KEYS_CONFIG)")
    parser.add_argument("--init", action="store_true", help="Write the default config file and exit")
    parser.add_argument("--rofi-binary", default=os.environ.get("ROFI_KEYS_ROFI", ROFI_BINARY), help="Selector executable (default: rofi or ROFI_KEYS_ROFI)")
    parser.add_argument("--terminal", action="store_true", help="Pick the entry in this terminal instead of rofi")
    parser.add_argument("--wait", action="store_true", help="Wait for the launched command and exit with its status")
    parser.add_argument("--dry-run", action="store_true", help="Print the selected command instead of running it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        config_path = resolve_config_path(args.config)
    except HomeNotFound as exc:
        return _fail(str(exc))

    if args.init:
        return cmd_init(config_path)

    return cmd_run(
        config_path=config_path,
        rofi_binary=args.rofi_binary,
        terminal=args.terminal,
        wait=args.wait,
        dry_run=args.dry_run,
    )


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
