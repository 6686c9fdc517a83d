"""Typed async client for the Financial Modeling Prep REST API."""

from fmp_client.client import FmpApiClient
from fmp_client.core import (
    ApiResponse,
    ApiResponseError,
    Exchange,
    FmpClientError,
    Period,
    Settings,
    get_settings,
)

__version__ = "0.1.0"

__all__ = [
    "ApiResponse",
    "ApiResponseError",
    "Exchange",
    "FmpApiClient",
    "FmpClientError",
    "Period",
    "Settings",
    "get_settings",
]
