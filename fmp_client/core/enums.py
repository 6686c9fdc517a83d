"""Enumerations used as FMP query parameters."""

from __future__ import annotations

from enum import Enum


class Period(str, Enum):
    """Reporting period for statements and metrics."""

    ANNUAL = "annual"
    QUARTER = "quarter"

    @classmethod
    def coerce(cls, value: Period | str) -> Period:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported period: {value!r}") from None


class Exchange(str, Enum):
    """Exchanges and asset groups accepted by the quotes and search endpoints."""

    AMEX = "AMEX"
    COMMODITY = "COMMODITY"
    CRYPTO = "CRYPTO"
    ETF = "ETF"
    EURONEXT = "EURONEXT"
    FOREX = "FOREX"
    INDEX = "INDEX"
    MUTUAL_FUND = "MUTUAL_FUND"
    NASDAQ = "NASDAQ"
    NYSE = "NYSE"
    TSX = "TSX"

    @classmethod
    def coerce(cls, value: Exchange | str) -> Exchange:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported exchange: {value!r}") from None

    @property
    def path_segment(self) -> str:
        """Lower-case form used in ``quotes/{exchange}``."""
        return self.value.lower()
