"""Async HTTP transport for the Financial Modeling Prep REST API.

Turns one ``GET {base_url}/{path}`` into an ``ApiResponse`` carrying the
decoded JSON, or an error message when the call failed for any expected
reason (no API key, exhausted budget, HTTP error status, provider error
payload, bad JSON, network failure).

Docs: https://site.financialmodelingprep.com/developer/docs
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

import httpx

from fmp_client.connectors.base import BaseConnector
from fmp_client.core.config import Settings, get_settings
from fmp_client.core.response import ApiResponse

logger = logging.getLogger(__name__)

_ERROR_KEY = "Error Message"


class FmpHttpConnector(BaseConnector):
    """Authenticated FMP GET requests with an optional daily call budget."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.fmp_request_timeout,
            headers={"User-Agent": self.settings.fmp_user_agent},
        )
        self._daily_limit = self.settings.fmp_daily_limit
        self._calls_today = 0
        self._last_reset_date = ""

    def is_configured(self) -> bool:
        return bool(self.settings.fmp_api_key)

    @property
    def calls_today(self) -> int:
        return self._calls_today

    def rate_limit_ok(self) -> bool:
        """Check if we have remaining API budget today."""
        if self._daily_limit <= 0:
            return True
        self._roll_day()
        return self._calls_today < self._daily_limit

    def _track_call(self) -> None:
        self._roll_day()
        self._calls_today += 1

    def _roll_day(self) -> None:
        today = date.today().isoformat()
        if self._last_reset_date != today:
            self._calls_today = 0
            self._last_reset_date = today

    def build_params(self, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Query parameters with ``None`` values dropped and the API key appended."""
        p = {k: v for k, v in (params or {}).items() if v is not None}
        p["apikey"] = self.settings.fmp_api_key
        return p

    def build_url(self, path: str) -> str:
        return f"{self.settings.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> ApiResponse[Any]:
        """Make an authenticated FMP API call."""
        if not self.is_configured():
            logger.warning("FMP API key not configured; skipping %s", path)
            return ApiResponse.from_error("FMP API key is not configured")
        if not self.rate_limit_ok():
            logger.warning("FMP daily rate limit reached (%d/%d)", self._calls_today, self._daily_limit)
            return ApiResponse.from_error(f"FMP daily rate limit reached ({self._daily_limit} calls)")

        url = self.build_url(path)
        self._track_call()
        logger.debug("FMP GET %s params=%s", path, params)
        try:
            resp = await self._client.get(url, params=self.build_params(params))
        except httpx.TimeoutException as exc:
            logger.warning("FMP request timed out for %s: %s", path, exc)
            return ApiResponse.from_error(f"Request to {path} timed out")
        except httpx.HTTPError as exc:
            logger.warning("FMP request failed for %s: %s", path, exc)
            return ApiResponse.from_error(f"Request to {path} failed: {exc}")

        if not resp.is_success:
            message = _error_message(resp) or f"HTTP {resp.status_code}"
            logger.info("FMP %s returned %d: %s", path, resp.status_code, message)
            return ApiResponse.from_error(message, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.info("FMP %s returned invalid JSON: %s", path, exc)
            return ApiResponse.from_error(f"Invalid JSON from {path}", status_code=resp.status_code)

        # FMP reports bad keys and limits as 200 + {"Error Message": ...}
        if isinstance(data, dict) and _ERROR_KEY in data:
            logger.info("FMP %s: %s", path, data[_ERROR_KEY])
            return ApiResponse.from_error(str(data[_ERROR_KEY]), status_code=resp.status_code)

        return ApiResponse.from_data(data, status_code=resp.status_code)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip()
    if isinstance(body, dict):
        return str(body.get(_ERROR_KEY) or body.get("message") or "")
    return ""
