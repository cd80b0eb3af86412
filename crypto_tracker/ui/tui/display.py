from __future__ import annotations

"""Rich renderables for the tracker screen."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from rich import box
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from crypto_tracker.market_data.models import AssetRecord

from .config import HELP_TEXT, THEME, TITLE_TEXT
from .renderer import format_row, format_timestamp, get_color_for_change


@dataclass(frozen=True)
class RefreshStatus:
    """What the footer reports about the most recent refresh."""

    last_updated: Optional[datetime] = None
    error: Optional[str] = None


def create_header() -> Text:
    return Text(TITLE_TEXT, style=f"bold {THEME.primary}", no_wrap=True)


def create_body(records: Sequence[AssetRecord]) -> Panel:
    body = Text(no_wrap=True, overflow="crop")
    for i, record in enumerate(records):
        if i:
            body.append("\n")
        body.append(format_row(record), style=get_color_for_change(record))
    return Panel(body, box=box.SQUARE)


def create_footer(status: Optional[RefreshStatus] = None) -> Text:
    footer = Text(HELP_TEXT, style=THEME.muted, no_wrap=True, overflow="ellipsis")
    if status is None:
        return footer
    if status.error:
        footer.append(
            f" | refresh failed: {status.error} (data from {format_timestamp(status.last_updated)})",
            style=f"bold {THEME.warning}",
        )
    elif status.last_updated is not None:
        footer.append(f" | updated {format_timestamp(status.last_updated)}", style=THEME.muted)
    return footer


def render_frame(records: Sequence[AssetRecord], status: Optional[RefreshStatus] = None) -> Layout:
    """Header, body and footer stacked to fill whatever area the layout is drawn into."""
    layout = Layout()
    layout.split_column(
        Layout(name="header", size=1),
        Layout(name="body", ratio=1, minimum_size=1),
        Layout(name="footer", size=1),
    )
    layout["header"].update(create_header())
    layout["body"].update(create_body(records))
    layout["footer"].update(create_footer(status))
    return layout
