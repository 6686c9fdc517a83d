"""Shared fixtures for the test suite."""

import httpx
import pytest
import pytest_asyncio

from fmp_client.client import FmpApiClient
from fmp_client.core.config import Settings

BASE_URL = "https://fmp.test/api/v3"


class FakeFmp:
    """MockTransport handler: records requests and answers with a canned payload."""

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = [] if payload is None else payload
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_fmp():
    return FakeFmp


@pytest.fixture
def settings():
    return Settings(_env_file=None, fmp_api_key="test-key", fmp_base_url=BASE_URL)


@pytest_asyncio.fixture
async def make_client(settings):
    """Factory: ``make_client(handler, **setting_overrides)`` -> FmpApiClient."""
    http_clients = []

    def _make(handler, **overrides):
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http)
        s = settings.model_copy(update=overrides) if overrides else settings
        return FmpApiClient(s, http_client=http)

    yield _make
    for http in http_clients:
        await http.aclose()


@pytest.fixture
def profile_payload():
    return [{
        "symbol": "AAPL",
        "price": 189.84,
        "beta": 1.29,
        "volAvg": 57847456,
        "mktCap": 2952972032000,
        "lastDiv": 0.96,
        "range": "164.08-199.62",
        "companyName": "Apple Inc.",
        "currency": "USD",
        "cik": "0000320193",
        "exchangeShortName": "NASDAQ",
        "industry": "Consumer Electronics",
        "sector": "Technology",
        "fullTimeEmployees": "161000",
        "ipoDate": "1980-12-12",
        "isEtf": False,
        "isActivelyTrading": True,
    }]
