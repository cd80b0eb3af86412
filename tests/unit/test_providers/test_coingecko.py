import httpx
import pytest

from crypto_tracker.providers.coingecko import DEFAULT_ASSET_IDS, CoinGeckoClient
from crypto_tracker.utils.errors import ConfigurationError, TransportError


class DummyResponse:
    def __init__(self, text, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://example.test")
            response = httpx.Response(self.status_code, request=request)
            raise httpx.HTTPStatusError("error", request=request, response=response)


class DummyClient:
    calls = []

    def __init__(self, text='{}', status_code: int = 200, should_raise: bool = False):
        self._text = text
        self._status_code = status_code
        self._should_raise = should_raise

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def get(self, url, params=None):
        DummyClient.calls.append((url, params))
        if self._should_raise:
            raise httpx.ConnectError("network error")
        return DummyResponse(self._text, status_code=self._status_code)


@pytest.fixture(autouse=True)
def reset_calls():
    DummyClient.calls = []


@pytest.mark.asyncio
async def test_coingecko_fetch_returns_raw_text(monkeypatch, sample_response):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient(text=sample_response))

    client = CoinGeckoClient()
    text = await client.fetch()

    assert text == sample_response
    url, params = DummyClient.calls[0]
    assert url == "https://api.coingecko.com/api/v3/simple/price"
    assert params == {
        "ids": "bitcoin,ethereum,cardano",
        "vs_currencies": "usd",
        "include_24hr_change": "true",
    }


@pytest.mark.asyncio
async def test_coingecko_uses_configured_assets_and_base_url(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient())

    client = CoinGeckoClient(asset_ids=["solana", "dogecoin"], base_url="https://example.test/v3/")
    await client.fetch()

    url, params = DummyClient.calls[0]
    assert url == "https://example.test/v3/simple/price"
    assert params["ids"] == "solana,dogecoin"


@pytest.mark.asyncio
async def test_coingecko_every_fetch_is_a_round_trip(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient())

    client = CoinGeckoClient()
    await client.fetch()
    await client.fetch()

    assert len(DummyClient.calls) == 2


@pytest.mark.asyncio
async def test_coingecko_network_error(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient(should_raise=True))

    client = CoinGeckoClient()
    with pytest.raises(TransportError):
        await client.fetch()
    assert await client.health_check() is False


@pytest.mark.asyncio
async def test_coingecko_http_status_error(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient(status_code=429))

    client = CoinGeckoClient()
    with pytest.raises(TransportError):
        await client.fetch()


@pytest.mark.asyncio
async def test_coingecko_health_check_success(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: DummyClient())
    assert await CoinGeckoClient().health_check() is True


def test_coingecko_requires_assets():
    assert DEFAULT_ASSET_IDS == ("bitcoin", "ethereum", "cardano")
    with pytest.raises(ConfigurationError):
        CoinGeckoClient(asset_ids=[])
