from abc import ABC, abstractmethod
from typing import Any, Optional

from fmp_client.core.response import ApiResponse


class BaseConnector(ABC):
    @abstractmethod
    async def get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> ApiResponse[Any]:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
