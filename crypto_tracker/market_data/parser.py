"""Decoding of CoinGecko simple-price responses."""
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict

from crypto_tracker.utils.errors import ParseError


@dataclass(frozen=True)
class AssetQuote:
    """Spot price and 24h change for one asset as reported upstream."""

    key: str  # lowercase CoinGecko id, e.g. "bitcoin"
    spot_price_usd: float  # must be >= 0
    change_24h_fraction: float  # signed, -0.05 == -5%


def _number(entry: Dict[str, Any], field_name: str, asset_id: str) -> float:
    if field_name not in entry:
        raise ParseError(f"Missing '{field_name}' for {asset_id}")
    value = entry[field_name]
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Non-numeric '{field_name}' for {asset_id}: {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ParseError(f"Non-finite '{field_name}' for {asset_id}")
    return value


def parse_price_response(text: str, vs_currency: str = "usd") -> Dict[str, AssetQuote]:
    """Decode a simple-price body into quotes keyed by asset id.

    The whole call fails on the first invalid entry; unknown fields are ignored.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid JSON in price response: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected an object keyed by asset id, got {type(data).__name__}")

    price_field = vs_currency
    change_field = f"{vs_currency}_24h_change"

    quotes: Dict[str, AssetQuote] = {}
    for asset_id, entry in data.items():
        if not isinstance(entry, dict):
            raise ParseError(f"Expected an object for {asset_id}, got {type(entry).__name__}")
        price = _number(entry, price_field, asset_id)
        if price < 0:
            raise ParseError(f"Negative price for {asset_id}: {price}")
        change = _number(entry, change_field, asset_id)
        quotes[asset_id] = AssetQuote(
            key=asset_id,
            spot_price_usd=price,
            change_24h_fraction=change,
        )
    return quotes
