# 파일 위치: backend/availability_settings/models/schedule.py

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, conlist, model_validator
from pydantic.alias_generators import to_camel

# "HH:MM" (24시간제)
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

DataT = TypeVar("DataT")


class Weekday(str, Enum):
    """원격 API가 사용하는 요일 이름. 정의 순서가 곧 인덱스(0:일요일 ~ 6:토요일)입니다."""
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


WEEKDAYS: List[Weekday] = list(Weekday)


def parse_wire_time(value: str) -> time:
    return datetime.strptime(value, "%H:%M").time()


class WireModel(BaseModel):
    """
    원격 API와 주고받는 JSON은 camelCase입니다.
    파이썬 쪽에서는 snake_case 이름으로도 값을 넣을 수 있게 합니다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _TimeWindow(WireModel):
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)

    @model_validator(mode="after")
    def check_start_before_end(self):
        if parse_wire_time(self.start_time) >= parse_wire_time(self.end_time):
            raise ValueError(f"startTime {self.start_time} must be before endTime {self.end_time}")
        return self


class ScheduleAvailability(_TimeWindow):
    """주간 반복 가용 시간대 1개. 요일은 최소 1개 이상."""
    days: conlist(Weekday, min_length=1)


class ScheduleOverride(_TimeWindow):
    """특정 날짜에만 적용되는 가용 시간대."""
    date: date


class ScheduleOutput(WireModel):
    """
    [응답] GET /v2/schedules/{id}
    원격 API가 돌려주는 스케줄 원본(wire) 형태입니다.
    """
    id: Optional[int] = None
    owner_id: Optional[int] = None
    name: str = ""
    time_zone: Optional[str] = None
    availability: List[ScheduleAvailability] = Field(default_factory=list)
    is_default: bool = False
    overrides: List[ScheduleOverride] = Field(default_factory=list)


class UpdateScheduleInput(WireModel):
    """
    [요청] PATCH /v2/schedules/{id} 의 본문
    보내지 않은 필드(None)는 원격에서 변경되지 않습니다.
    """
    name: Optional[str] = None
    time_zone: Optional[str] = None
    availability: Optional[List[ScheduleAvailability]] = None
    is_default: Optional[bool] = None
    overrides: Optional[List[ScheduleOverride]] = None


class UpdateScheduleRequest(UpdateScheduleInput):
    """업데이트 대상 식별자 + 변경 필드"""
    id: int


class DeleteScheduleRequest(WireModel):
    id: int


# --- 응답 봉투(envelope) ---

class ApiResponse(WireModel, Generic[DataT]):
    status: Literal["success"] = "success"
    data: Optional[DataT] = None


class ApiError(WireModel):
    code: str = "UNKNOWN_ERROR"
    message: Optional[str] = None
    details: Optional[Any] = None


class ApiErrorResponse(WireModel):
    status: Literal["error"] = "error"
    error: ApiError = Field(default_factory=ApiError)
