"""
Valuation records: enterprise value, ratings, DCF, key metrics and market cap.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from fmp_client.models.base import FmpModel, SymbolRecord


class EnterpriseValue(SymbolRecord):
    """
    Enterprise value bridge
    Endpoint: enterprise-values/{symbol}
    """
    date: Optional[str] = None
    stock_price: Optional[float] = None
    number_of_shares: Optional[float] = None
    market_capitalization: Optional[float] = None
    minus_cash_and_cash_equivalents: Optional[float] = None
    add_total_debt: Optional[float] = None
    enterprise_value: Optional[float] = None


class CompanyRating(SymbolRecord):
    """
    Rating snapshot (current or historical)
    Endpoints: rating/{symbol}, historical-rating/{symbol}
    """
    date: Optional[str] = None
    rating: Optional[str] = None
    rating_score: Optional[float] = None
    rating_recommendation: Optional[str] = None
    dcf_score: Optional[float] = Field(None, alias="ratingDetailsDCFScore")
    dcf_recommendation: Optional[str] = Field(None, alias="ratingDetailsDCFRecommendation")
    roe_score: Optional[float] = Field(None, alias="ratingDetailsROEScore")
    roe_recommendation: Optional[str] = Field(None, alias="ratingDetailsROERecommendation")
    roa_score: Optional[float] = Field(None, alias="ratingDetailsROAScore")
    roa_recommendation: Optional[str] = Field(None, alias="ratingDetailsROARecommendation")
    de_score: Optional[float] = Field(None, alias="ratingDetailsDEScore")
    de_recommendation: Optional[str] = Field(None, alias="ratingDetailsDERecommendation")
    pe_score: Optional[float] = Field(None, alias="ratingDetailsPEScore")
    pe_recommendation: Optional[str] = Field(None, alias="ratingDetailsPERecommendation")
    pb_score: Optional[float] = Field(None, alias="ratingDetailsPBScore")
    pb_recommendation: Optional[str] = Field(None, alias="ratingDetailsPBRecommendation")


class DiscountedCashFlow(SymbolRecord):
    """
    Latest DCF valuation
    Endpoint: discounted-cash-flow/{symbol}
    """
    date: Optional[str] = None
    dcf: Optional[float] = None
    stock_price: Optional[float] = Field(None, alias="Stock Price")


class HistoricalDiscountedCashFlow(SymbolRecord):
    """
    DCF valuation at a past date. ``price`` is only sent by the
    period-based endpoint, not the daily one.
    Endpoints: historical-discounted-cash-flow-statement/{symbol},
    historical-daily-discounted-cash-flow/{symbol}
    """
    date: Optional[str] = None
    price: Optional[float] = None
    dcf: Optional[float] = None


class MarketCapitalization(SymbolRecord):
    """
    Market capitalization (current or historical)
    Endpoints: market-capitalization/{symbol},
    historical-market-capitalization/{symbol}
    """
    date: Optional[str] = None
    market_cap: Optional[float] = None


class _KeyMetricFields(FmpModel):
    revenue_per_share: Optional[float] = None
    net_income_per_share: Optional[float] = None
    operating_cash_flow_per_share: Optional[float] = None
    free_cash_flow_per_share: Optional[float] = None
    cash_per_share: Optional[float] = None
    book_value_per_share: Optional[float] = None
    tangible_book_value_per_share: Optional[float] = None
    shareholders_equity_per_share: Optional[float] = None
    interest_debt_per_share: Optional[float] = None
    capex_per_share: Optional[float] = None
    market_cap: Optional[float] = None
    enterprise_value: Optional[float] = None
    pe_ratio: Optional[float] = None
    price_to_sales_ratio: Optional[float] = None
    pocf_ratio: Optional[float] = Field(None, alias="pocfratio")
    pfcf_ratio: Optional[float] = None
    pb_ratio: Optional[float] = None
    ptb_ratio: Optional[float] = None
    ev_to_sales: Optional[float] = None
    enterprise_value_over_ebitda: Optional[float] = Field(None, alias="enterpriseValueOverEBITDA")
    ev_to_operating_cash_flow: Optional[float] = None
    ev_to_free_cash_flow: Optional[float] = None
    earnings_yield: Optional[float] = None
    free_cash_flow_yield: Optional[float] = None
    debt_to_equity: Optional[float] = None
    debt_to_assets: Optional[float] = None
    net_debt_to_ebitda: Optional[float] = Field(None, alias="netDebtToEBITDA")
    current_ratio: Optional[float] = None
    interest_coverage: Optional[float] = None
    income_quality: Optional[float] = None
    dividend_yield: Optional[float] = None
    payout_ratio: Optional[float] = None
    graham_number: Optional[float] = None
    graham_net_net: Optional[float] = None
    roic: Optional[float] = None
    roe: Optional[float] = None
    return_on_tangible_assets: Optional[float] = None
    working_capital: Optional[float] = None
    tangible_asset_value: Optional[float] = None
    net_current_asset_value: Optional[float] = None
    invested_capital: Optional[float] = None
    days_sales_outstanding: Optional[float] = None
    days_payables_outstanding: Optional[float] = None
    days_of_inventory_on_hand: Optional[float] = None
    receivables_turnover: Optional[float] = None
    payables_turnover: Optional[float] = None
    inventory_turnover: Optional[float] = None


class KeyMetrics(_KeyMetricFields):
    """
    Per-period key metrics
    Endpoint: key-metrics/{symbol}
    """
    symbol: str
    date: Optional[str] = None
    calendar_year: Optional[str] = None
    period: Optional[str] = None


class KeyMetricsTTM(_KeyMetricFields):
    """
    Trailing-twelve-month key metrics. FMP suffixes every key with ``TTM``
    (``peRatioTTM``) and does not always echo the symbol.
    Endpoint: key-metrics-ttm/{symbol}
    """
    symbol: Optional[str] = None
    dividend_per_share: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _strip_ttm_suffix(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                (key[:-3] if isinstance(key, str) and key.endswith("TTM") else key): value
                for key, value in data.items()
            }
        return data
