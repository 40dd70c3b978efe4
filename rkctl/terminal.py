#!/usr/bin/env python3
"""
Terminal Selector

Rich based stand-in for rofi, used only when --terminal is given. Shows the
menu as a table and reads a single shortcut key.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from rofi_keys.core.menu import Menu


class TerminalSelector:
    """Select a menu entry by typing its key in the terminal."""

    def __init__(self, menu: Menu, console: Optional[Console] = None):
        self.menu = menu
        self.console = console or Console()

    def _render(self) -> Table:
        table = Table(title=Text(self.menu.title, style="bold blue"), show_header=False)
        table.add_column("Key", style="cyan", justify="center", width=5)
        table.add_column("Label", style="white")
        for entry in self.menu.entries:
            # Text() so "[f]" is not parsed as markup
            table.add_row(Text(f"[{entry.key}]"), Text(entry.label))
        return table

    def select(self) -> Optional[str]:
        """Return the command for the typed key, or None."""
        self.console.print(self._render())
        try:
            choice = Prompt.ask("Key", default="", show_default=False, console=self.console)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            return None
        choice = choice.strip()
        if not choice:
            return None
        command = self.menu.lookup(choice[0])
        if command is None:
            self.console.print(f"[red]No entry bound to '{escape(choice[0])}'[/red]")
        return command
