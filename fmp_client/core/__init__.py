"""Shared building blocks: settings, enums and the response envelope."""

from fmp_client.core.config import Settings, get_settings
from fmp_client.core.enums import Exchange, Period
from fmp_client.core.errors import ApiResponseError, FmpClientError
from fmp_client.core.response import ApiResponse

__all__ = [
    "ApiResponse",
    "ApiResponseError",
    "Exchange",
    "FmpClientError",
    "Period",
    "Settings",
    "get_settings",
]
