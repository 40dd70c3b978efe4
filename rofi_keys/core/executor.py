"""Launch shell commands picked from the menu."""
from __future__ import annotations

import logging
import subprocess

from rofi_keys.core.errors import ProcessSpawnFailure
from rofi_keys.utils.cmd_runner import run, spawn

logger = logging.getLogger(__name__)

SHELL = "sh"


def detach(command: str) -> None:
    """Start ``command`` through the shell and return immediately.

    The child gets its own session and no stdio, and is never waited on.
    """
    logger.debug("Launching detached: %s", command)
    try:
        spawn(
            [SHELL, "-c", command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise ProcessSpawnFailure(f"Cannot launch '{command}': {exc}") from exc


def run_and_wait(command: str) -> int:
    """Run ``command`` through the shell and return its exit status."""
    logger.debug("Launching and waiting: %s", command)
    try:
        result = run([SHELL, "-c", command])
    except OSError as exc:
        raise ProcessSpawnFailure(f"Cannot launch '{command}': {exc}") from exc
    logger.debug("'%s' exited with %s", command, result.returncode)
    return result.returncode


def launch(command: str, wait: bool = False) -> int:
    if wait:
        return run_and_wait(command)
    detach(command)
    return 0
