"""
Company-level records: profile, symbol directories, news and press releases.
"""

from typing import Optional

from pydantic import Field

from fmp_client.models.base import FmpModel, SymbolRecord


class CompanyProfile(SymbolRecord):
    """
    Company profile
    Endpoint: profile/{symbol}
    """
    company_name: Optional[str] = None
    price: Optional[float] = None
    beta: Optional[float] = None
    vol_avg: Optional[float] = None
    mkt_cap: Optional[float] = None
    last_div: Optional[float] = None
    price_range: Optional[str] = Field(None, alias="range")
    changes: Optional[float] = None
    currency: Optional[str] = None
    cik: Optional[str] = None
    isin: Optional[str] = None
    cusip: Optional[str] = None
    exchange: Optional[str] = None
    exchange_short_name: Optional[str] = None
    industry: Optional[str] = None
    sector: Optional[str] = None
    country: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    ceo: Optional[str] = None
    full_time_employees: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    dcf: Optional[float] = None
    dcf_diff: Optional[float] = None
    image: Optional[str] = None
    ipo_date: Optional[str] = None
    default_image: Optional[bool] = None
    is_etf: Optional[bool] = None
    is_actively_trading: Optional[bool] = None
    is_adr: Optional[bool] = None
    is_fund: Optional[bool] = None


class SymbolListing(SymbolRecord):
    """
    Entry of the stock, ETF and tradable symbol directories
    Endpoints: stock/list, etf/list, available-traded/list
    """
    name: Optional[str] = None
    price: Optional[float] = None
    exchange: Optional[str] = None
    exchange_short_name: Optional[str] = None
    asset_type: Optional[str] = Field(None, alias="type")


class StockNews(SymbolRecord):
    """
    News article
    Endpoint: stock_news?tickers={symbol}
    """
    published_date: Optional[str] = None
    title: Optional[str] = None
    image: Optional[str] = None
    site: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None


class PressRelease(SymbolRecord):
    """
    Press release
    Endpoint: press-releases/{symbol}
    """
    date: Optional[str] = None
    title: Optional[str] = None
    text: Optional[str] = None


class SearchResult(FmpModel):
    """
    Name or ticker search hit
    Endpoints: search, search-ticker
    """
    symbol: str
    name: Optional[str] = None
    currency: Optional[str] = None
    stock_exchange: Optional[str] = None
    exchange_short_name: Optional[str] = None
