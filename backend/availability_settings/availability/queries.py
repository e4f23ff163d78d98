# backend/availability_settings/availability/queries.py
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from availability_settings.core.errors import to_error_response
from availability_settings.models.schedule import ApiErrorResponse

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT")


class QueryResult(BaseModel, Generic[DataT]):
    """is_loading 은 첫 응답(성공/실패)을 받기 전까지만 True 입니다."""
    is_loading: bool = True
    data: Optional[DataT] = None
    error: Optional[ApiErrorResponse] = None


class Query(Generic[DataT]):
    """원격 리소스 1개의 조회 상태. 다시 조회하면 결과를 통째로 교체합니다."""

    def __init__(self, name: str, fetcher: Callable[[], Awaitable[Optional[DataT]]]):
        self.name = name
        self._fetcher = fetcher
        self.result: QueryResult = QueryResult()

    def reset(self) -> None:
        self.result = QueryResult()

    async def fetch(self) -> QueryResult:
        try:
            data = await self._fetcher()
        except Exception as exc:
            logger.warning("%s query failed: %s", self.name, exc)
            self.result = QueryResult(is_loading=False, error=to_error_response(exc))
        else:
            self.result = QueryResult(is_loading=False, data=data)
        return self.result
