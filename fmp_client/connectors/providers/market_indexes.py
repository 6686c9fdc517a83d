"""Market index constituent endpoints."""

from __future__ import annotations

from fmp_client.connectors.providers.base_provider import BaseProvider
from fmp_client.core.response import ApiResponse
from fmp_client.models import IndexConstituent


class MarketIndexesProvider(BaseProvider):
    """Constituents of the Dow Jones, Nasdaq and S&P 500 indexes."""

    @property
    def provider_name(self) -> str:
        return "market_indexes"

    async def get_dow_jones_companies(self) -> ApiResponse[list[IndexConstituent]]:
        return await self._get_list("dowjones_constituent", IndexConstituent)

    async def get_nasdaq_companies(self) -> ApiResponse[list[IndexConstituent]]:
        return await self._get_list("nasdaq_constituent", IndexConstituent)

    async def get_sp500_companies(self) -> ApiResponse[list[IndexConstituent]]:
        return await self._get_list("sp500_constituent", IndexConstituent)
