"""Rofi front-end for the menu.

Each entry gets a custom keybinding ``-kb-custom-<n>`` bound to its key
character. Rofi reports custom binding ``n`` by exiting with ``9 + n``, so
the exit status alone tells which entry was chosen. Plain accept (0) and
cancel (1) carry no selection.
"""
from __future__ import annotations

import logging
import subprocess
from typing import Dict, List, Optional, Tuple

from rofi_keys.core.errors import PipeFailure, ProcessSpawnFailure
from rofi_keys.core.menu import Menu
from rofi_keys.utils.cmd_runner import spawn

logger = logging.getLogger(__name__)

ROFI_BINARY = "rofi"
# kb-custom-1 exits with 10, kb-custom-2 with 11, ...
CUSTOM_EXIT_BASE = 10
# Regex matching keeps the "[k] " prefix from breaking substring filtering
REGEX_MATCHING = 'configuration { matching: "regex"; }'


class RofiSelector:
    """Render a Menu through rofi and map its exit status back to a command."""

    def __init__(self, menu: Menu, binary: str = ROFI_BINARY):
        self.menu = menu
        self.binary = binary

    def bindings(self) -> List[Tuple[int, str]]:
        """(activation index, key) for each entry, index starting at 1."""
        return [(i + 1, entry.key) for i, entry in enumerate(self.menu.entries)]

    def build_args(self) -> List[str]:
        args = [
            self.binary,
            "-dmenu",
            "-i",
            "-p", self.menu.title,
            "-no-fork",
            "-markup-rows",
            "-no-custom",
            "-theme-str", REGEX_MATCHING,
        ]
        if self.menu.theme is not None:
            args += ["-theme", self.menu.theme]
        for index, key in self.bindings():
            args += [f"-kb-custom-{index}", key]
        return args

    def build_input(self) -> str:
        return "\n".join(self.menu.render_lines())

    @staticmethod
    def decode_exit_code(code: Optional[int]) -> Optional[int]:
        """Activation index encoded in ``code``, or None for accept/cancel."""
        if code is None or code < CUSTOM_EXIT_BASE:
            return None
        return code - (CUSTOM_EXIT_BASE - 1)

    def resolve(self, code: Optional[int]) -> Optional[str]:
        index = self.decode_exit_code(code)
        if index is None:
            return None
        index_to_key: Dict[int, str] = dict(self.bindings())
        key = index_to_key.get(index)
        if key is None:
            logger.debug("Exit code %s maps to unbound index %d", code, index)
            return None
        return self.menu.lookup(key)

    def select(self) -> Optional[str]:
        """Show the menu and block until rofi exits.

        Returns the chosen command, or None when nothing was picked.
        """
        args = self.build_args()
        logger.debug("Running selector: %s", args)
        try:
            proc = spawn(
                args,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
            )
        except OSError as exc:
            raise ProcessSpawnFailure(f"Cannot start {self.binary}: {exc}") from exc
        try:
            proc.communicate(self.build_input())
        except OSError as exc:
            proc.kill()
            raise PipeFailure(f"Cannot talk to {self.binary}: {exc}") from exc
        code = proc.returncode
        logger.debug("Selector exited with %s", code)
        return self.resolve(code)
