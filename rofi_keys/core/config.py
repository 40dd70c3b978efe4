"""Configuration store for rofi-keys.

The configuration is a flat file holding an optional theme, an optional
menu title and an ordered list of ``{key, label, command}`` records. JSON is
the default format; a ``.yaml``/``.yml`` suffix switches to YAML.
"""
from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from rofi_keys.core.errors import (
    ConfigParseFailure,
    ConfigReadFailure,
    ConfigWriteFailure,
    DuplicateKey,
    HomeNotFound,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RELPATH = Path(".config") / "rofi-keys" / "config.json"
DEFAULT_MENU_TITLE = "Shortcuts"
YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class EntryConfig:
    """One persisted menu entry. Only the first character of ``key`` counts."""

    key: str
    label: str
    command: str

    @classmethod
    def from_dict(cls, data: Any, position: int = 0) -> "EntryConfig":
        if not isinstance(data, dict):
            raise ConfigParseFailure(f"entries[{position}] must be a mapping")
        values = {}
        for name in ("key", "label", "command"):
            value = data.get(name)
            if not isinstance(value, str):
                raise ConfigParseFailure(f"entries[{position}].{name} must be a string")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "label": self.label, "command": self.command}


@dataclass
class Configuration:
    """Represents the on-disk launcher configuration."""

    theme: Optional[str] = None
    menu_title: Optional[str] = None
    entries: List[EntryConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Configuration":
        if not isinstance(data, dict):
            raise ConfigParseFailure("Configuration root must be a mapping")
        for name in ("theme", "menu_title"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ConfigParseFailure(f"{name} must be a string or null")
        if "entries" not in data:
            raise ConfigParseFailure("Missing configuration key: entries")
        raw_entries = data["entries"]
        if not isinstance(raw_entries, list):
            raise ConfigParseFailure("entries must be a list")
        entries = [EntryConfig.from_dict(item, i) for i, item in enumerate(raw_entries)]
        return cls(theme=data.get("theme"), menu_title=data.get("menu_title"), entries=entries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "menu_title": self.menu_title,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @property
    def title(self) -> str:
        return self.menu_title if self.menu_title is not None else DEFAULT_MENU_TITLE

    def check_unique_keys(self) -> None:
        """Raise DuplicateKey if two entries share a shortcut character."""
        seen = set()
        for entry in self.entries:
            if not entry.key:
                continue
            char = entry.key[0]
            if char in seen:
                raise DuplicateKey(char)
            seen.add(char)


def default_config() -> Configuration:
    """Return the built-in example configuration."""
    return Configuration(
        theme=None,
        menu_title="Applications",
        entries=[
            EntryConfig("f", "Firefox", "firefox"),
            EntryConfig("p", "Firefox Private", "firefox --private-window"),
            EntryConfig("m", "MPV", "mpv"),
            EntryConfig("v", "MPV (clipboard)", 'mpv "$(xclip -o)"'),
            EntryConfig("t", "Terminal", "x-terminal-emulator"),
        ],
    )


def default_config_path() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise HomeNotFound()
    return Path(home) / DEFAULT_CONFIG_RELPATH


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    """Return ``explicit`` if given, otherwise the default path under HOME."""
    if explicit is not None:
        return Path(explicit)
    return default_config_path()


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def dumps_config(config: Configuration, path: Path) -> str:
    data = config.to_dict()
    if _is_yaml(path):
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def loads_config(text: str, path: Path) -> Configuration:
    # ValueError covers JSONDecodeError and over-long integer literals
    try:
        data = yaml.safe_load(text) if _is_yaml(path) else json.loads(text)
    except (ValueError, RecursionError, yaml.YAMLError) as exc:
        raise ConfigParseFailure(f"Invalid config: {exc}", path) from exc
    try:
        config = Configuration.from_dict(data)
        config.check_unique_keys()
    except (ConfigParseFailure, DuplicateKey) as exc:
        exc.path = path
        raise
    return config


def _new_file_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_config(config: Configuration, path: Path) -> None:
    """Serialize ``config`` to ``path`` without leaving a half-written file.

    Symlinks are followed so the link target is updated, and the file keeps
    its existing permissions (umask default for a new file).
    """
    path = Path(path)
    target = Path(os.path.realpath(path))
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        mode = _new_file_mode(target)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as fh:
            tmp_name = fh.name
            fh.write(dumps_config(config, path))
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        raise ConfigWriteFailure(f"Cannot write config {path}: {exc}", path) from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
    logger.info("Wrote configuration to %s", path)
    print(f"Configuration written to {path}")


def load_config(path: Path) -> Configuration:
    """Load the configuration, creating the default one if ``path`` is missing."""
    path = Path(path)
    if not path.exists():
        logger.info("No configuration at %s, creating default", path)
        config = default_config()
        write_config(config, path)
        return config
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadFailure(f"Cannot read config {path}: {exc}", path) from exc
    return loads_config(text, path)


def init_config(path: Path) -> Configuration:
    """Overwrite ``path`` with the default configuration."""
    config = default_config()
    write_config(config, path)
    return config
