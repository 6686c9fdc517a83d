"""HTTP connector and FMP endpoint providers."""

from fmp_client.connectors.base import BaseConnector
from fmp_client.connectors.http_connector import FmpHttpConnector

__all__ = ["BaseConnector", "FmpHttpConnector"]
