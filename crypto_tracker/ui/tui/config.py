from __future__ import annotations

"""TUI configuration and style constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    up: str = "green"
    down: str = "red"
    warning: str = "yellow"
    muted: str = "dim"


@dataclass(frozen=True)
class Columns:
    symbol: int = 10
    name: int = 14
    price: int = 14
    change: int = 9


THEME = Theme()
COLUMNS = Columns()

TITLE_TEXT = "Crypto Tracker"
QUIT_KEY = "q"
HELP_TEXT = f"Press '{QUIT_KEY}' to quit"

# Upper bound on how long one loop iteration waits for a key press
POLL_TIMEOUT_SECONDS = 0.1
