"""
Market-wide records: quotes and index constituents.
"""

from typing import Optional

from fmp_client.models.base import FmpModel, SymbolRecord


class Quote(SymbolRecord):
    """
    Real-time quote
    Endpoints: quote/{symbol}, quotes/{exchange}
    """
    name: Optional[str] = None
    price: Optional[float] = None
    changes_percentage: Optional[float] = None
    change: Optional[float] = None
    day_low: Optional[float] = None
    day_high: Optional[float] = None
    year_high: Optional[float] = None
    year_low: Optional[float] = None
    market_cap: Optional[float] = None
    price_avg50: Optional[float] = None
    price_avg200: Optional[float] = None
    exchange: Optional[str] = None
    volume: Optional[float] = None
    avg_volume: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None
    eps: Optional[float] = None
    pe: Optional[float] = None
    earnings_announcement: Optional[str] = None
    shares_outstanding: Optional[float] = None
    timestamp: Optional[int] = None


class IndexConstituent(FmpModel):
    """
    Member of a market index
    Endpoints: dowjones_constituent, nasdaq_constituent, sp500_constituent
    """
    symbol: str
    name: Optional[str] = None
    sector: Optional[str] = None
    sub_sector: Optional[str] = None
    head_quarter: Optional[str] = None
    date_first_added: Optional[str] = None
    cik: Optional[str] = None
    founded: Optional[str] = None
