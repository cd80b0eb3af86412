from __future__ import annotations

"""Formatting helpers for the TUI."""

from datetime import datetime
from typing import Optional

from crypto_tracker.market_data.models import AssetRecord, is_up

from .config import COLUMNS, THEME


def format_row(record: AssetRecord) -> str:
    return (
        f"{record.symbol:<{COLUMNS.symbol}.{COLUMNS.symbol}} "
        f"{record.name:<{COLUMNS.name}.{COLUMNS.name}} "
        f"{record.price_formatted():>{COLUMNS.price}} "
        f"{record.change_24h_formatted():>{COLUMNS.change}}"
    )


def get_color_for_change(record: AssetRecord) -> str:
    return THEME.up if is_up(record) else THEME.down


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return "—"
    return value.strftime("%H:%M:%S")
