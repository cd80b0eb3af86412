"""Provider exports."""

from .base import BaseProvider
from .coingecko import DEFAULT_ASSET_IDS, CoinGeckoClient


__all__ = [
    "BaseProvider",
    "CoinGeckoClient",
    "DEFAULT_ASSET_IDS",
]
