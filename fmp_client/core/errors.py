"""Exception hierarchy for the FMP client."""


class FmpClientError(Exception):
    """Base exception for fmp_client errors."""
    pass


class ApiResponseError(FmpClientError):
    """Raised by ``ApiResponse.assert_no_errors`` when a call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
