"""Path helpers for user supplied locations."""
from __future__ import annotations

import os

HOME_SHORTHAND = "~/"


def expand_home(path: str) -> str:
    """Expand a leading ``~/`` using ``$HOME``.

    Unlike os.path.expanduser this never consults the password database:
    when HOME is unset the path is returned untouched.
    """
    if path.startswith(HOME_SHORTHAND):
        home = os.environ.get("HOME")
        if home:
            return path.replace("~", home, 1)
    return path
