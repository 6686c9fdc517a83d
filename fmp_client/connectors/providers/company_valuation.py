"""Company valuation endpoints: profiles, statements, metrics, quotes, search.

Every method returns an ``ApiResponse``; unknown symbols and provider
failures show up as ``has_error`` rather than exceptions.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from fmp_client.connectors.providers.base_provider import M, BaseProvider
from fmp_client.core.enums import Exchange, Period
from fmp_client.core.response import ApiResponse
from fmp_client.models import (
    BalanceSheetStatement,
    CashFlowStatement,
    CompanyProfile,
    CompanyRating,
    DiscountedCashFlow,
    EnterpriseValue,
    HistoricalDiscountedCashFlow,
    IncomeStatement,
    KeyMetrics,
    KeyMetricsTTM,
    MarketCapitalization,
    PressRelease,
    Quote,
    SearchResult,
    StockNews,
    SymbolListing,
)

logger = logging.getLogger(__name__)

PeriodLike = Union[Period, str]
ExchangeLike = Union[Exchange, str]


def _no_symbol() -> ApiResponse:
    return ApiResponse.from_error("No symbol")


class CompanyValuationProvider(BaseProvider):
    """FMP company valuation endpoints."""

    @property
    def provider_name(self) -> str:
        return "company_valuation"

    # -----------------------------------------------------------------
    # Company profile & symbol directories
    # -----------------------------------------------------------------

    async def get_company_profile(self, symbol: str) -> ApiResponse[CompanyProfile]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"profile/{self._segment(symbol)}", CompanyProfile, subject=symbol)

    async def get_symbols_list(self) -> ApiResponse[list[SymbolListing]]:
        return await self._get_list("stock/list", SymbolListing)

    async def get_etf_list(self) -> ApiResponse[list[SymbolListing]]:
        return await self._get_list("etf/list", SymbolListing)

    async def get_tradable_symbols_list(self) -> ApiResponse[list[SymbolListing]]:
        return await self._get_list("available-traded/list", SymbolListing)

    # -----------------------------------------------------------------
    # Financial statements & enterprise value
    # -----------------------------------------------------------------

    async def _get_periodic(
        self, endpoint: str, model: type[M], symbol: str, period: PeriodLike, limit: int
    ) -> ApiResponse[list[M]]:
        symbol = self._clean(symbol)
        params = {"period": Period.coerce(period).value, "limit": self._check_limit(limit)}
        if not symbol:
            return _no_symbol()
        return await self._get_list(f"{endpoint}/{self._segment(symbol)}", model, params)

    async def get_enterprise_value(
        self, symbol: str, period: PeriodLike = Period.ANNUAL, limit: int = 5
    ) -> ApiResponse[list[EnterpriseValue]]:
        return await self._get_periodic("enterprise-values", EnterpriseValue, symbol, period, limit)

    async def get_income_statement(
        self, symbol: str, period: PeriodLike = Period.ANNUAL, limit: int = 5
    ) -> ApiResponse[list[IncomeStatement]]:
        return await self._get_periodic("income-statement", IncomeStatement, symbol, period, limit)

    async def get_balance_sheet_statement(
        self, symbol: str, period: PeriodLike = Period.ANNUAL, limit: int = 5
    ) -> ApiResponse[list[BalanceSheetStatement]]:
        return await self._get_periodic("balance-sheet-statement", BalanceSheetStatement, symbol, period, limit)

    async def get_cash_flow_statement(
        self, symbol: str, period: PeriodLike = Period.ANNUAL, limit: int = 5
    ) -> ApiResponse[list[CashFlowStatement]]:
        return await self._get_periodic("cash-flow-statement", CashFlowStatement, symbol, period, limit)

    # -----------------------------------------------------------------
    # Key metrics
    # -----------------------------------------------------------------

    async def get_company_key_metrics_ttm(self, symbol: str) -> ApiResponse[KeyMetricsTTM]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"key-metrics-ttm/{self._segment(symbol)}", KeyMetricsTTM, subject=symbol)

    async def get_company_key_metrics(
        self, symbol: str, period: PeriodLike = Period.ANNUAL, limit: int = 5
    ) -> ApiResponse[list[KeyMetrics]]:
        return await self._get_periodic("key-metrics", KeyMetrics, symbol, period, limit)

    # -----------------------------------------------------------------
    # News & press releases
    # -----------------------------------------------------------------

    async def get_stock_news(self, symbol: str, limit: int = 5) -> ApiResponse[list[StockNews]]:
        symbol = self._clean(symbol)
        limit = self._check_limit(limit)
        if not symbol:
            return _no_symbol()
        return await self._get_list("stock_news", StockNews, {"tickers": symbol, "limit": limit})

    async def get_press_releases(self, symbol: str, limit: int = 5) -> ApiResponse[list[PressRelease]]:
        symbol = self._clean(symbol)
        limit = self._check_limit(limit)
        if not symbol:
            return _no_symbol()
        return await self._get_list(f"press-releases/{self._segment(symbol)}", PressRelease, {"limit": limit})

    # -----------------------------------------------------------------
    # Ratings
    # -----------------------------------------------------------------

    async def get_company_rating(self, symbol: str) -> ApiResponse[CompanyRating]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"rating/{self._segment(symbol)}", CompanyRating, subject=symbol)

    async def get_historical_company_rating(self, symbol: str, limit: int = 5) -> ApiResponse[list[CompanyRating]]:
        symbol = self._clean(symbol)
        limit = self._check_limit(limit)
        if not symbol:
            return _no_symbol()
        return await self._get_list(f"historical-rating/{self._segment(symbol)}", CompanyRating, {"limit": limit})

    # -----------------------------------------------------------------
    # Discounted cash flow
    # -----------------------------------------------------------------

    async def get_discounted_cash_flow(self, symbol: str) -> ApiResponse[DiscountedCashFlow]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"discounted-cash-flow/{self._segment(symbol)}", DiscountedCashFlow, subject=symbol)

    async def get_historical_discounted_cash_flow(
        self, symbol: str, period: PeriodLike = Period.ANNUAL
    ) -> ApiResponse[list[HistoricalDiscountedCashFlow]]:
        symbol = self._clean(symbol)
        params = {"period": Period.coerce(period).value}
        if not symbol:
            return _no_symbol()
        return await self._get_list(
            f"historical-discounted-cash-flow-statement/{self._segment(symbol)}", HistoricalDiscountedCashFlow, params
        )

    async def get_historical_discounted_cash_flow_daily(
        self, symbol: str, limit: int = 5
    ) -> ApiResponse[list[HistoricalDiscountedCashFlow]]:
        symbol = self._clean(symbol)
        limit = self._check_limit(limit)
        if not symbol:
            return _no_symbol()
        return await self._get_list(
            f"historical-daily-discounted-cash-flow/{self._segment(symbol)}", HistoricalDiscountedCashFlow, {"limit": limit}
        )

    # -----------------------------------------------------------------
    # Quotes
    # -----------------------------------------------------------------

    async def get_quote(self, symbol: str) -> ApiResponse[Quote]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"quote/{self._segment(symbol)}", Quote, subject=symbol)

    async def get_quotes(self, exchange: ExchangeLike) -> ApiResponse[list[Quote]]:
        exchange = Exchange.coerce(exchange)
        return await self._get_list(f"quotes/{exchange.path_segment}", Quote)

    # -----------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------

    async def _search(
        self, endpoint: str, query: str, exchange: Optional[ExchangeLike], limit: int
    ) -> ApiResponse[list[SearchResult]]:
        query = self._clean(query)
        params = {
            "query": query,
            "exchange": Exchange.coerce(exchange).value if exchange is not None else None,
            "limit": self._check_limit(limit),
        }
        if not query:
            return ApiResponse.from_error("No search query")
        return await self._get_list(endpoint, SearchResult, params)

    async def search(
        self, query: str, exchange: Optional[ExchangeLike] = None, limit: int = 10
    ) -> ApiResponse[list[SearchResult]]:
        """Search companies by name or ticker fragment."""
        return await self._search("search", query, exchange, limit)

    async def search_by_ticker(
        self, query: str, exchange: Optional[ExchangeLike] = None, limit: int = 10
    ) -> ApiResponse[list[SearchResult]]:
        """Search by ticker prefix only."""
        return await self._search("search-ticker", query, exchange, limit)

    # -----------------------------------------------------------------
    # Market capitalization
    # -----------------------------------------------------------------

    async def get_market_capitalization(self, symbol: str) -> ApiResponse[MarketCapitalization]:
        symbol = self._clean(symbol)
        if not symbol:
            return _no_symbol()
        return await self._get_single(f"market-capitalization/{self._segment(symbol)}", MarketCapitalization, subject=symbol)

    async def get_historical_market_capitalization(
        self, symbol: str, limit: int = 5
    ) -> ApiResponse[list[MarketCapitalization]]:
        symbol = self._clean(symbol)
        limit = self._check_limit(limit)
        if not symbol:
            return _no_symbol()
        return await self._get_list(
            f"historical-market-capitalization/{self._segment(symbol)}", MarketCapitalization, {"limit": limit}
        )
