# backend/availability_settings/crud/transport.py
from typing import Dict, List, Optional, Protocol

import httpx

from availability_settings.crud import schedules as schedule_crud
from availability_settings.crud import users as users_crud
from availability_settings.models.schedule import (
    ApiResponse,
    DeleteScheduleRequest,
    ScheduleOutput,
    UpdateScheduleRequest,
)
from availability_settings.models.user import MeOutput


class ScheduleTransport(Protocol):
    """
    오케스트레이터가 원격 리소스에 접근할 때 쓰는 좁은 인터페이스.
    update/delete 는 성공하면 응답을 돌려주고, 실패하면 예외를 올립니다.
    """

    async def get_schedule(self, schedule_id: Optional[int]) -> Optional[ScheduleOutput]: ...

    async def list_schedules(self) -> List[ScheduleOutput]: ...

    async def get_me(self) -> Optional[MeOutput]: ...

    async def update_schedule(self, request: UpdateScheduleRequest) -> ApiResponse: ...

    async def delete_schedule(self, request: DeleteScheduleRequest) -> ApiResponse: ...


class HttpScheduleTransport:
    """공유 httpx 클라이언트 + 사용자 토큰으로 원격 스케줄 API를 호출합니다."""

    def __init__(self, client: httpx.AsyncClient, access_token: Optional[str] = None):
        self._client = client
        self._headers: Dict[str, str] = {}
        if access_token:
            self._headers["Authorization"] = f"Bearer {access_token}"

    async def get_schedule(self, schedule_id: Optional[int]) -> Optional[ScheduleOutput]:
        return await schedule_crud.get_schedule(self._client, schedule_id, headers=self._headers)

    async def list_schedules(self) -> List[ScheduleOutput]:
        return await schedule_crud.get_schedules(self._client, headers=self._headers)

    async def get_me(self) -> Optional[MeOutput]:
        return await users_crud.get_me(self._client, headers=self._headers)

    async def update_schedule(self, request: UpdateScheduleRequest) -> ApiResponse:
        return await schedule_crud.update_schedule(self._client, request, headers=self._headers)

    async def delete_schedule(self, request: DeleteScheduleRequest) -> ApiResponse:
        return await schedule_crud.delete_schedule(self._client, request, headers=self._headers)
