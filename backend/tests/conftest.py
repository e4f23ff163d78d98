"""
공용 픽스처: 원격 스케줄 API 대신 쓰는 FakeTransport 와 샘플 데이터.
"""
from datetime import date
from typing import List, Optional
from unittest.mock import AsyncMock

import pytest

from availability_settings.models.schedule import (
    ApiResponse,
    ScheduleAvailability,
    ScheduleOutput,
    ScheduleOverride,
    Weekday,
)
from availability_settings.models.user import MeOutput


class FakeTransport:
    def __init__(
        self,
        schedule: Optional[ScheduleOutput] = None,
        schedules: Optional[List[ScheduleOutput]] = None,
        me: Optional[MeOutput] = None,
    ):
        if schedules is None:
            schedules = [schedule] if schedule is not None else []
        self.get_schedule = AsyncMock(return_value=schedule)
        self.list_schedules = AsyncMock(return_value=schedules)
        self.get_me = AsyncMock(return_value=me)
        self.update_schedule = AsyncMock(return_value=ApiResponse(data=schedule))
        self.delete_schedule = AsyncMock(return_value=ApiResponse())


class RecordingNotifier:
    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def me() -> MeOutput:
    return MeOutput(id=1, username="ana", time_format=24, week_start="Monday", time_zone="Europe/Lisbon")


@pytest.fixture
def schedule() -> ScheduleOutput:
    return ScheduleOutput(
        id=7,
        owner_id=1,
        name="Working hours",
        time_zone="Europe/Lisbon",
        is_default=True,
        availability=[
            ScheduleAvailability(days=[Weekday.MONDAY], start_time="09:00", end_time="17:00"),
            ScheduleAvailability(
                days=[Weekday.FRIDAY, Weekday.TUESDAY], start_time="10:30", end_time="12:00"
            ),
        ],
        overrides=[
            ScheduleOverride(date=date(2024, 5, 20), start_time="12:00", end_time="14:00"),
            ScheduleOverride(date=date(2024, 5, 20), start_time="16:00", end_time="17:30"),
            ScheduleOverride(date=date(2024, 6, 1), start_time="08:00", end_time="09:00"),
        ],
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def transport(schedule, me) -> FakeTransport:
    return FakeTransport(schedule=schedule, me=me)
