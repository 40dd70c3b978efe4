"""rofi-keys - keyboard driven application launcher on top of rofi."""

from .core.config import Configuration, EntryConfig, default_config, load_config, write_config
from .core.menu import Menu, MenuEntry
from .core.selector import RofiSelector

__version__ = "0.1.0"
__all__ = [
    "Configuration",
    "EntryConfig",
    "default_config",
    "load_config",
    "write_config",
    "Menu",
    "MenuEntry",
    "RofiSelector",
]
