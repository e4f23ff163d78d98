# backend/availability_settings/core/errors.py
from typing import Optional

from availability_settings.models.schedule import ApiError, ApiErrorResponse


class ScheduleApiError(Exception):
    """
    원격 스케줄 API가 실패를 응답했을 때 발생합니다.
    파싱된 ApiErrorResponse를 그대로 들고 다닙니다.
    """

    def __init__(self, status_code: Optional[int], response: ApiErrorResponse):
        self.status_code = status_code
        self.response = response
        super().__init__(response.error.message or response.error.code)


def to_error_response(exc: Exception) -> ApiErrorResponse:
    """어떤 예외든 콜백으로 넘길 ApiErrorResponse 형태로 맞춥니다."""
    if isinstance(exc, ScheduleApiError):
        return exc.response
    return ApiErrorResponse(
        error=ApiError(code=type(exc).__name__, message=str(exc) or None),
    )
