from .models import (
    AssetInfo,
    AssetLookup,
    AssetRecord,
    StaticLookup,
    default_lookup,
    format_change,
    format_price,
    is_up,
    to_records,
)
from .parser import AssetQuote, parse_price_response

__all__ = [
    "AssetInfo",
    "AssetLookup",
    "AssetQuote",
    "AssetRecord",
    "StaticLookup",
    "default_lookup",
    "format_change",
    "format_price",
    "is_up",
    "parse_price_response",
    "to_records",
]
