"""Endpoint groups of the FMP API."""

from fmp_client.connectors.providers.base_provider import BaseProvider
from fmp_client.connectors.providers.company_valuation import CompanyValuationProvider
from fmp_client.connectors.providers.market_indexes import MarketIndexesProvider

__all__ = ["BaseProvider", "CompanyValuationProvider", "MarketIndexesProvider"]
