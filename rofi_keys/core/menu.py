"""Menu model built once per run from the configuration."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rofi_keys.core.config import Configuration
from rofi_keys.utils.paths import expand_home

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuEntry:
    """A single shortcut: one key character mapped to a shell command."""

    key: str
    label: str
    command: str

    def render(self) -> str:
        return f"[{self.key}] {self.label}"


@dataclass
class Menu:
    """Title, optional theme and ordered entries shown in the selector."""

    title: str
    theme: Optional[str] = None
    entries: List[MenuEntry] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: Configuration) -> "Menu":
        theme = expand_home(config.theme) if config.theme is not None else None
        menu = cls(title=config.title, theme=theme)
        for i, entry in enumerate(config.entries):
            if not entry.key:
                logger.warning("Skipping entry %d (%s): empty key", i, entry.label)
                continue
            menu.add_entry(entry.key[0], entry.label, entry.command)
        return menu

    def add_entry(self, key: str, label: str, command: str) -> None:
        self.entries.append(MenuEntry(key=key, label=label, command=command))

    def render_lines(self) -> List[str]:
        return [entry.render() for entry in self.entries]

    def lookup(self, key: str) -> Optional[str]:
        """Return the command of the first entry bound to ``key``."""
        for entry in self.entries:
            if entry.key == key:
                return entry.command
        return None
