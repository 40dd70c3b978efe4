"""Injectable process launching for the selector and the executor.

``run`` waits for a command, ``spawn`` starts one and hands back the live
process. Tests replace either with ``set_runner``/``set_spawner``.
"""
from __future__ import annotations
import subprocess
from typing import Callable

_runner: Callable = subprocess.run
_spawner: Callable = subprocess.Popen


def run(cmd, **kwargs):
    """Run ``cmd`` to completion; used by ``executor.run_and_wait``."""
    return _runner(cmd, **kwargs)


def spawn(cmd, **kwargs):
    """Start ``cmd`` without waiting; used for rofi and detached launches."""
    return _spawner(cmd, **kwargs)


def set_runner(runner: Callable):
    global _runner
    _runner = runner


def set_spawner(spawner: Callable):
    """spawner: callable(cmd, **kwargs) -> Popen-like (communicate(), kill(), returncode)"""
    global _spawner
    _spawner = spawner


def reset_runner():
    global _runner
    _runner = subprocess.run


def reset_spawner():
    global _spawner
    _spawner = subprocess.Popen
