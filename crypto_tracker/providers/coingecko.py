"""CoinGecko simple-price provider implementation."""
from __future__ import annotations

from typing import Dict, Iterable, Tuple

import httpx

from crypto_tracker.providers.base import BaseProvider
from crypto_tracker.utils.errors import ConfigurationError, TransportError
from crypto_tracker.utils.logging import get_logger


logger = get_logger(__name__)

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_ASSET_IDS: Tuple[str, ...] = ("bitcoin", "ethereum", "cardano")
VS_CURRENCY = "usd"


class CoinGeckoClient(BaseProvider):
    NAME = "coingecko"

    def __init__(
        self,
        asset_ids: Iterable[str] = DEFAULT_ASSET_IDS,
        base_url: str = COINGECKO_BASE_URL,
    ) -> None:
        self.asset_ids: Tuple[str, ...] = tuple(asset_ids)
        if not self.asset_ids:
            raise ConfigurationError("At least one asset id is required")
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}/simple/price"

    def build_params(self) -> Dict[str, str]:
        return {
            "ids": ",".join(self.asset_ids),
            "vs_currencies": VS_CURRENCY,
            "include_24hr_change": "true",
        }

    async def fetch(self) -> str:
        # No retries and no custom timeout: failures surface to the caller.
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(self.url, params=self.build_params())
                resp.raise_for_status()
                return resp.text
        except httpx.HTTPError as e:
            logger.error(f"CoinGecko request failed: {e}")
            raise TransportError(f"Unable to reach CoinGecko: {e}") from e

    async def health_check(self) -> bool:
        try:
            await self.fetch()
            return True
        except TransportError:
            return False
