# backend/availability_settings/crud/schedules.py
import logging
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError

from availability_settings.core.errors import ScheduleApiError
from availability_settings.models.schedule import (
    ApiError,
    ApiErrorResponse,
    ApiResponse,
    DeleteScheduleRequest,
    ScheduleOutput,
    UpdateScheduleRequest,
)

logger = logging.getLogger(__name__)

SCHEDULES_PATH = "/v2/schedules"


def raise_for_api_error(response: httpx.Response) -> None:
    """
    4xx/5xx 응답을 ScheduleApiError 로 바꿉니다.
    본문이 ApiErrorResponse 형식이 아니어도 상태 코드/본문으로 채워 넣습니다.
    """
    if not response.is_error:
        return
    try:
        payload = ApiErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        payload = ApiErrorResponse(
            error=ApiError(code=f"HTTP_{response.status_code}", message=response.text or None)
        )
    logger.warning(
        "Schedules API %s %s failed: %s %s",
        response.request.method,
        response.request.url.path,
        response.status_code,
        payload.error.code,
    )
    raise ScheduleApiError(response.status_code, payload)


# READ ONE (id가 없으면 기본 스케줄)
async def get_schedule(
    client: httpx.AsyncClient,
    schedule_id: Optional[int] = None,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> Optional[ScheduleOutput]:
    path = f"{SCHEDULES_PATH}/{schedule_id}" if schedule_id is not None else f"{SCHEDULES_PATH}/default"
    response = await client.get(path, headers=headers)
    if response.status_code == httpx.codes.NOT_FOUND:
        return None
    raise_for_api_error(response)
    return ApiResponse[ScheduleOutput].model_validate(response.json()).data


# READ ALL
async def get_schedules(
    client: httpx.AsyncClient,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> List[ScheduleOutput]:
    response = await client.get(SCHEDULES_PATH, headers=headers)
    raise_for_api_error(response)
    return ApiResponse[List[ScheduleOutput]].model_validate(response.json()).data or []


# UPDATE
async def update_schedule(
    client: httpx.AsyncClient,
    request: UpdateScheduleRequest,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> ApiResponse[ScheduleOutput]:
    body = request.model_dump(by_alias=True, exclude_none=True, exclude={"id"}, mode="json")
    response = await client.patch(f"{SCHEDULES_PATH}/{request.id}", json=body, headers=headers)
    raise_for_api_error(response)
    return ApiResponse[ScheduleOutput].model_validate(response.json())


# DELETE
async def delete_schedule(
    client: httpx.AsyncClient,
    request: DeleteScheduleRequest,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> ApiResponse:
    response = await client.delete(f"{SCHEDULES_PATH}/{request.id}", headers=headers)
    raise_for_api_error(response)
    if not response.content:
        return ApiResponse()
    return ApiResponse.model_validate(response.json())
