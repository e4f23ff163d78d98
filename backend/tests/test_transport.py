"""
HttpScheduleTransport 테스트 (httpx.MockTransport 로 원격 API 대체)
"""
import json

import httpx
import pytest

from availability_settings.core.errors import ScheduleApiError
from availability_settings.crud.transport import HttpScheduleTransport
from availability_settings.models.schedule import (
    DeleteScheduleRequest,
    ScheduleAvailability,
    UpdateScheduleRequest,
    Weekday,
)

pytestmark = pytest.mark.asyncio

SCHEDULE_JSON = {
    "id": 7,
    "ownerId": 1,
    "name": "Working hours",
    "timeZone": "Europe/Lisbon",
    "isDefault": True,
    "availability": [{"days": ["Monday", "Tuesday"], "startTime": "09:00", "endTime": "17:00"}],
    "overrides": [],
}


def _transport(handler, token="secret-token"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api.test")
    return HttpScheduleTransport(client, token)


async def test_get_schedule_by_id_forwards_token():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"status": "success", "data": SCHEDULE_JSON})

    schedule = await _transport(handler).get_schedule(7)

    assert seen[0].url.path == "/v2/schedules/7"
    assert seen[0].headers["Authorization"] == "Bearer secret-token"
    assert schedule.id == 7
    assert schedule.availability[0].days == [Weekday.MONDAY, Weekday.TUESDAY]


async def test_get_schedule_without_id_uses_default():
    paths = []

    def handler(request):
        paths.append(request.url.path)
        return httpx.Response(200, json={"status": "success", "data": SCHEDULE_JSON})

    await _transport(handler, token=None).get_schedule(None)

    assert paths == ["/v2/schedules/default"]


async def test_missing_schedule_resolves_to_none():
    transport = _transport(lambda request: httpx.Response(404, json={"status": "error"}))

    assert await transport.get_schedule(99) is None


async def test_error_response_is_parsed():
    def handler(request):
        return httpx.Response(
            403,
            json={"status": "error", "error": {"code": "ForbiddenException", "message": "nope"}},
        )

    with pytest.raises(ScheduleApiError) as exc_info:
        await _transport(handler).list_schedules()

    assert exc_info.value.status_code == 403
    assert exc_info.value.response.error.code == "ForbiddenException"
    assert exc_info.value.response.error.message == "nope"


async def test_non_json_error_body():
    transport = _transport(lambda request: httpx.Response(502, text="Bad gateway"))

    with pytest.raises(ScheduleApiError) as exc_info:
        await transport.get_me()

    assert exc_info.value.response.error.code == "HTTP_502"
    assert exc_info.value.response.error.message == "Bad gateway"


async def test_list_schedules_and_me():
    def handler(request):
        if request.url.path == "/v2/me":
            return httpx.Response(200, json={"status": "success", "data": {"id": 1, "weekStart": "Monday"}})
        return httpx.Response(200, json={"status": "success", "data": [SCHEDULE_JSON, SCHEDULE_JSON]})

    transport = _transport(handler)

    assert len(await transport.list_schedules()) == 2
    me = await transport.get_me()
    assert me.week_start == "Monday"
    assert me.time_format is None


async def test_update_sends_camel_case_patch_without_id():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"status": "success", "data": SCHEDULE_JSON})

    request = UpdateScheduleRequest(
        id=7,
        time_zone="UTC",
        availability=[ScheduleAvailability(days=[Weekday.MONDAY], start_time="09:00", end_time="18:00")],
    )
    response = await _transport(handler).update_schedule(request)

    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/v2/schedules/7"
    assert json.loads(seen[0].content) == {
        "timeZone": "UTC",
        "availability": [{"days": ["Monday"], "startTime": "09:00", "endTime": "18:00"}],
    }
    assert response.data.id == 7


async def test_delete_handles_empty_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    response = await _transport(handler).delete_schedule(DeleteScheduleRequest(id=7))

    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/v2/schedules/7"
    assert response.status == "success"
