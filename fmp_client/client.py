"""Root client exposing every FMP endpoint group over one HTTP connection."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from fmp_client.connectors.http_connector import FmpHttpConnector
from fmp_client.connectors.providers import CompanyValuationProvider, MarketIndexesProvider
from fmp_client.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class FmpApiClient:
    """Entry point for the Financial Modeling Prep API.

    Usage::

        async with FmpApiClient() as client:
            result = await client.company_valuation.get_quote("AAPL")
            if not result.has_error:
                print(result.data.price)

    Args:
        settings: overrides ``get_settings()`` (API key, base URL, timeout).
        http_client: an existing ``httpx.AsyncClient``; left open on close.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self.connector = FmpHttpConnector(self.settings, client=http_client)
        self.company_valuation = CompanyValuationProvider(self.connector)
        self.market_indexes = MarketIndexesProvider(self.connector)
        logger.debug("FMP client initialized for %s", self.settings.base_url)

    def is_configured(self) -> bool:
        return self.connector.is_configured()

    async def aclose(self) -> None:
        await self.connector.aclose()

    async def __aenter__(self) -> FmpApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
