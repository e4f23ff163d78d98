# backend/availability_settings/transformers/schedule.py
"""
원격(wire) 스케줄 <-> 편집 화면(atom) 스케줄 변환.

- to_display(): ScheduleOutput -> AtomSchedule
- to_wire():    AvailabilityFormValues -> UpdateScheduleInput

to_wire(to_display(S).to_form_values()) 는 요일 / 시:분 / overrides 를
그대로 돌려줘야 합니다.
"""
from datetime import date, datetime, timezone
from itertools import groupby
from typing import List, Optional

from availability_settings.core.config import ScheduleDefaults, get_schedule_defaults
from availability_settings.models.schedule import (
    WEEKDAYS,
    ScheduleAvailability,
    ScheduleOutput,
    ScheduleOverride,
    UpdateScheduleInput,
    Weekday,
    parse_wire_time,
)
from availability_settings.models.user import MeOutput
from availability_settings.schemas.availability import (
    AtomSchedule,
    Availability,
    AvailabilityFormValues,
    DateOverride,
    TimeRange,
    WorkingHours,
)

# 주간 시간대에 붙이는 자리표시자 날짜
PLACEHOLDER_DATE = date(1970, 1, 1)


def weekday_index(day: Weekday) -> int:
    return WEEKDAYS.index(Weekday(day))


def to_datetime(value: str, on: date = PLACEHOLDER_DATE) -> datetime:
    """'HH:MM' -> 해당 날짜의 UTC datetime"""
    return datetime.combine(on, parse_wire_time(value), tzinfo=timezone.utc)


def format_time(value: datetime) -> str:
    """datetime -> 'HH:MM' (날짜 부분은 버림)"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%H:%M")


def _minutes(value: datetime) -> int:
    return value.hour * 60 + value.minute


# ---------- wire -> atom ----------

def _availability_for_atom(windows: List[ScheduleAvailability]) -> List[Availability]:
    return [
        Availability(
            days=[weekday_index(d) for d in w.days],
            start_time=to_datetime(w.start_time),
            end_time=to_datetime(w.end_time),
        )
        for w in windows
    ]


def _weekly_grid(schedule: List[Availability]) -> List[List[TimeRange]]:
    grid: List[List[TimeRange]] = [[] for _ in WEEKDAYS]
    for window in schedule:
        for day in window.days:
            grid[day].append(TimeRange(start=window.start_time, end=window.end_time))
    return grid


def _working_hours(schedule: List[Availability]) -> List[WorkingHours]:
    return [
        WorkingHours(
            days=list(w.days),
            start_time=_minutes(w.start_time),
            end_time=_minutes(w.end_time),
        )
        for w in schedule
    ]


def _date_overrides_for_atom(overrides: List[ScheduleOverride]) -> List[DateOverride]:
    # 연속된 같은 날짜만 묶어서 순서가 바뀌지 않게 함
    return [
        DateOverride(
            ranges=[
                TimeRange(start=to_datetime(o.start_time, day), end=to_datetime(o.end_time, day))
                for o in group
            ]
        )
        for day, group in groupby(overrides, key=lambda o: o.date)
    ]


def to_display(
    user: Optional[MeOutput],
    schedule: Optional[ScheduleOutput],
    schedules_count: int,
    defaults: Optional[ScheduleDefaults] = None,
) -> Optional[AtomSchedule]:
    """
    스케줄이 아직 없으면 None 을 돌려줍니다. (로딩 중인지는 호출자가 판단)
    user 는 비어 있거나 일부 필드만 있어도 됩니다.
    """
    if schedule is None:
        return None

    defaults = get_schedule_defaults(defaults)
    user = user or MeOutput()

    windows = _availability_for_atom(schedule.availability)
    is_default = schedule.is_default or (
        schedule.id is not None and user.default_schedule_id == schedule.id
    )
    read_only = (
        user.id is not None
        and schedule.owner_id is not None
        and schedule.owner_id != user.id
    )

    return AtomSchedule(
        id=schedule.id,
        name=schedule.name,
        read_only=read_only,
        is_default=is_default,
        is_last_schedule=schedules_count <= 1,
        time_zone=schedule.time_zone or user.time_zone or defaults.time_zone,
        week_start=user.week_start or defaults.week_start,
        time_format=user.time_format or defaults.time_format,
        working_hours=_working_hours(windows),
        schedule=windows,
        availability=_weekly_grid(windows),
        date_overrides=_date_overrides_for_atom(schedule.overrides),
    )


# ---------- atom -> wire ----------

def _override_for_api(time_range: TimeRange) -> ScheduleOverride:
    start = time_range.start
    if start.tzinfo is not None:
        start = start.astimezone(timezone.utc)
    return ScheduleOverride(
        date=start.date(),
        start_time=format_time(time_range.start),
        end_time=format_time(time_range.end),
    )


def to_wire(values: AvailabilityFormValues) -> UpdateScheduleInput:
    availability = [
        ScheduleAvailability(
            days=[WEEKDAYS[d] for d in window.days],
            start_time=format_time(window.start_time),
            end_time=format_time(window.end_time),
        )
        for window in values.schedule
    ]
    overrides = [
        _override_for_api(time_range)
        for override in values.date_overrides
        for time_range in override.ranges
    ]
    return UpdateScheduleInput(
        name=values.name,
        time_zone=values.time_zone,
        is_default=values.is_default,
        availability=availability,
        overrides=overrides,
    )
