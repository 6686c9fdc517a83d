"""Base class for FMP endpoint groups.

Providers turn decoded JSON from the connector into typed records and fold
every expected failure into the returned ``ApiResponse``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter, ValidationError

from fmp_client.connectors.base import BaseConnector
from fmp_client.core.response import ApiResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class BaseProvider(ABC):
    """Abstract base for FMP endpoint groups."""

    def __init__(self, connector: BaseConnector):
        self.connector = connector

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name for this provider (e.g. 'company_valuation')."""
        ...

    async def _get_list(
        self,
        path: str,
        model: type[M],
        params: Optional[dict[str, Any]] = None,
    ) -> ApiResponse[list[M]]:
        """Fetch a JSON array and validate each element as ``model``."""
        raw = await self.connector.get_json(path, params)
        if raw.has_error:
            return raw
        payload = raw.data
        if payload is None or payload == {}:
            payload = []
        if not isinstance(payload, list):
            logger.info("%s: expected a list from %s, got %s", self.provider_name, path, type(payload).__name__)
            return ApiResponse.from_error(f"Unexpected payload from {path}", status_code=raw.status_code)
        try:
            items = TypeAdapter(list[model]).validate_python(payload)
        except ValidationError as exc:
            logger.info("%s: invalid %s payload from %s: %s", self.provider_name, model.__name__, path, exc)
            return ApiResponse.from_error(
                f"Could not parse {model.__name__} from {path}", status_code=raw.status_code
            )
        return raw.map(lambda _: items)

    async def _get_single(
        self,
        path: str,
        model: type[M],
        params: Optional[dict[str, Any]] = None,
        subject: str = "",
    ) -> ApiResponse[M]:
        """Fetch an endpoint that answers with a one-element list.

        An empty answer means FMP does not know ``subject``.
        """
        many = await self._get_list(path, model, params)
        if many.has_error:
            return many
        if not many.data:
            return ApiResponse.from_error(
                f"Unknown symbol: {subject}" if subject else f"No data returned from {path}",
                status_code=many.status_code,
            )
        return many.map(lambda items: items[0])

    @staticmethod
    def _clean(value: Optional[str]) -> str:
        return (value or "").strip()

    @staticmethod
    def _segment(symbol: str) -> str:
        """Percent-encode a symbol for use as one URL path segment."""
        return quote(symbol, safe=".^-")

    @staticmethod
    def _check_limit(limit: int) -> int:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return limit
