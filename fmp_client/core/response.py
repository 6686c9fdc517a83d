"""Uniform result envelope returned by every provider call.

Expected failures (unknown symbol, HTTP error status, provider error payload,
malformed JSON, transport errors) are reported through ``error`` instead of
being raised, so callers only need to check ``has_error``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from fmp_client.core.errors import ApiResponseError

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class ApiResponse(Generic[T]):
    """Outcome of a single FMP request."""

    data: Optional[T] = None
    error: str = ""
    status_code: Optional[int] = None
    fetched_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    @classmethod
    def from_data(cls, data: T, status_code: Optional[int] = 200) -> ApiResponse[T]:
        return cls(data=data, status_code=status_code)

    @classmethod
    def from_error(cls, error: str, status_code: Optional[int] = None) -> ApiResponse[T]:
        return cls(error=error or "Unknown error", status_code=status_code)

    def assert_no_errors(self) -> None:
        """Raise ``ApiResponseError`` if the call failed."""
        if self.has_error:
            raise ApiResponseError(self.error, status_code=self.status_code)

    def map(self, fn: Callable[[T], U]) -> ApiResponse[U]:
        """Transform the payload, passing errors through untouched."""
        if self.has_error:
            return ApiResponse(error=self.error, status_code=self.status_code, fetched_at=self.fetched_at)
        return ApiResponse(data=fn(self.data), status_code=self.status_code, fetched_at=self.fetched_at)
