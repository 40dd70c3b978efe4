"""Exception hierarchy for rofi-keys.

Library code raises these; only the CLI converts them into exit codes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class RofiKeysError(Exception):
    """Base class for every error raised by rofi-keys."""


class HomeNotFound(RofiKeysError):
    """HOME is unset so the default configuration path cannot be built."""

    def __init__(self, message: str = "HOME directory not found") -> None:
        super().__init__(message)


class ConfigError(RofiKeysError):
    """Configuration file could not be turned into a Configuration."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadFailure(ConfigError):
    """Filesystem error while reading the configuration file."""


class ConfigWriteFailure(ConfigError):
    """Filesystem error while writing the configuration file."""


class ConfigParseFailure(ConfigError):
    """Configuration content is malformed or structurally invalid."""


class DuplicateKey(ConfigError):
    """Two entries share the same shortcut character."""

    def __init__(self, key: str, path: Optional[Path] = None) -> None:
        super().__init__(f"Duplicate shortcut key '{key}'", path)
        self.key = key


class ProcessSpawnFailure(RofiKeysError):
    """A child process (selector or shell) could not be created."""


class PipeFailure(RofiKeysError):
    """Talking to the selector over its stdin/stdout pipes failed."""
