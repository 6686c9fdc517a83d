"""Typed records for FMP JSON payloads."""

from fmp_client.models.base import FmpModel, SymbolRecord
from fmp_client.models.company import (
    CompanyProfile,
    PressRelease,
    SearchResult,
    StockNews,
    SymbolListing,
)
from fmp_client.models.market import IndexConstituent, Quote
from fmp_client.models.statements import (
    BalanceSheetStatement,
    CashFlowStatement,
    IncomeStatement,
)
from fmp_client.models.valuation import (
    CompanyRating,
    DiscountedCashFlow,
    EnterpriseValue,
    HistoricalDiscountedCashFlow,
    KeyMetrics,
    KeyMetricsTTM,
    MarketCapitalization,
)

__all__ = [
    "BalanceSheetStatement",
    "CashFlowStatement",
    "CompanyProfile",
    "CompanyRating",
    "DiscountedCashFlow",
    "EnterpriseValue",
    "FmpModel",
    "HistoricalDiscountedCashFlow",
    "IncomeStatement",
    "IndexConstituent",
    "KeyMetrics",
    "KeyMetricsTTM",
    "MarketCapitalization",
    "PressRelease",
    "Quote",
    "SearchResult",
    "StockNews",
    "SymbolListing",
    "SymbolRecord",
]
