"""Display-level asset records derived from parsed quotes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping

from crypto_tracker.market_data.parser import AssetQuote


@dataclass(frozen=True)
class AssetInfo:
    symbol: str
    name: str


AssetLookup = Callable[[str], AssetInfo]


def default_lookup(asset_id: str) -> AssetInfo:
    """Use the id itself as ticker and display name."""
    return AssetInfo(symbol=asset_id.upper(), name=asset_id)


class StaticLookup:
    """Lookup backed by a fixed id -> AssetInfo table.

    Unknown ids fall back to default_lookup.
    """

    def __init__(self, table: Mapping[str, AssetInfo]) -> None:
        self._table: Dict[str, AssetInfo] = dict(table)

    def __call__(self, asset_id: str) -> AssetInfo:
        info = self._table.get(asset_id)
        if info is None:
            return default_lookup(asset_id)
        return info


def format_price(value: float) -> str:
    return f"${value:.2f}"


def format_change(fraction: float) -> str:
    return f"{fraction * 100:+.2f}%"


@dataclass(frozen=True)
class AssetRecord:
    """One displayable row."""

    id: str
    symbol: str
    name: str
    current_price: float
    price_change_24h: float

    def price_formatted(self) -> str:
        return format_price(self.current_price)

    def change_24h_formatted(self) -> str:
        return format_change(self.price_change_24h)

    def is_up(self) -> bool:
        return is_up(self)


def is_up(record: AssetRecord) -> bool:
    """True only for a strictly positive 24h change."""
    return record.price_change_24h > 0


def to_record(quote: AssetQuote, lookup: AssetLookup = default_lookup) -> AssetRecord:
    info = lookup(quote.key)
    return AssetRecord(
        id=quote.key,
        symbol=info.symbol,
        name=info.name,
        current_price=quote.spot_price_usd,
        price_change_24h=quote.change_24h_fraction,
    )


def to_records(
    quotes: Mapping[str, AssetQuote],
    lookup: AssetLookup = default_lookup,
) -> List[AssetRecord]:
    """Convert parsed quotes into records sorted by asset id."""
    return [to_record(quotes[asset_id], lookup) for asset_id in sorted(quotes)]
