# 파일 위치: backend/availability_settings/schemas/availability.py

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, conint, conlist, model_validator

DayIndex = conint(ge=0, le=6)  # 0:일요일 ~ 6:토요일


def _utc_minutes(value: datetime) -> int:
    """원격으로 보낼 때와 같은 기준(UTC 시:분)으로 자정부터의 분"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.hour * 60 + value.minute


def _check_start_before_end(start: datetime, end: datetime) -> None:
    if _utc_minutes(start) >= _utc_minutes(end):
        raise ValueError(f"start {start:%H:%M} must be before end {end:%H:%M} (UTC time of day)")


class TimeRange(BaseModel):
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def check_start_before_end(self):
        _check_start_before_end(self.start, self.end)
        return self


class Availability(BaseModel):
    """
    편집 화면에서 쓰는 주간 가용 시간대 1개.
    start_time / end_time 은 datetime 이지만 의미가 있는 건 시:분 뿐이고,
    날짜 부분은 편집 위젯 때문에 들어가는 자리표시자(1970-01-01)입니다.
    """
    days: conlist(DayIndex, min_length=1)
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def check_start_before_end(self):
        _check_start_before_end(self.start_time, self.end_time)
        return self


class DateOverride(BaseModel):
    """같은 날짜의 특정일 예외 시간대 묶음. range의 날짜 부분이 실제 날짜입니다."""
    ranges: List[TimeRange] = Field(default_factory=list)


class WorkingHours(BaseModel):
    """화면 요약용. 시작/종료는 자정부터의 분(minute) 단위입니다."""
    days: List[int]
    start_time: int
    end_time: int


class AtomSchedule(BaseModel):
    """
    [표시] 편집 화면에 넘겨주는 스케줄 형태
    원본 스케줄 + 화면 전용 플래그(is_last_schedule, is_default 등).
    조회할 때마다 새로 만들어지며 제자리에서 수정하지 않습니다.
    """
    id: Optional[int] = None
    name: str
    read_only: bool = False
    is_default: bool
    is_last_schedule: bool
    time_zone: str
    week_start: str
    time_format: int
    working_hours: List[WorkingHours] = Field(default_factory=list)
    schedule: List[Availability] = Field(default_factory=list)
    # 7일 그리드 (일요일부터)
    availability: List[List[TimeRange]] = Field(default_factory=list)
    date_overrides: List[DateOverride] = Field(default_factory=list)

    def to_form_values(self) -> "AvailabilityFormValues":
        """편집 세션 1개에 해당하는 폼 초기값"""
        return AvailabilityFormValues(
            name=self.name,
            time_zone=self.time_zone,
            is_default=self.is_default,
            schedule=[a.model_copy(deep=True) for a in self.schedule],
            date_overrides=[o.model_copy(deep=True) for o in self.date_overrides],
        )


class AvailabilityFormValues(BaseModel):
    """
    [요청] 편집기가 제출하는 폼 값
    Schedule Transformer 의 to_wire() 를 거쳐 UpdateScheduleInput 으로 바뀝니다.
    """
    name: str
    time_zone: str
    is_default: bool = False
    schedule: List[Availability] = Field(default_factory=list)
    date_overrides: List[DateOverride] = Field(default_factory=list)
