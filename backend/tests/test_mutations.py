"""
Mutation 수명 주기 테스트: pending 플래그, 콜백/토스트 순서, 실패 흡수.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from availability_settings.availability.mutations import (
    UPDATE_MESSAGES,
    Mutation,
    MutationStatus,
)
from availability_settings.core.errors import ScheduleApiError
from availability_settings.models.schedule import ApiError, ApiErrorResponse, ApiResponse

pytestmark = pytest.mark.asyncio


def _mutation(effect, notifier, **kwargs):
    return Mutation("update", effect, messages=UPDATE_MESSAGES, notifier=notifier, **kwargs)


async def test_success_calls_callback_then_toast(notifier):
    calls = []
    response = ApiResponse(data={"id": 7})
    effect = AsyncMock(return_value=response)
    on_success = MagicMock(side_effect=lambda res: calls.append(("callback", list(notifier.messages))))
    mutation = _mutation(effect, notifier, on_success=on_success)

    await mutation.trigger({"id": 7})

    effect.assert_awaited_once_with({"id": 7})
    on_success.assert_called_once_with(response)
    # 콜백 시점에는 아직 토스트 전
    assert calls == [("callback", [])]
    assert notifier.messages == ["Schedule updated successfully"]
    assert mutation.status == MutationStatus.SUCCESS
    assert mutation.data is response
    assert mutation.is_pending is False


async def test_rejected_operation_is_absorbed(notifier):
    payload = ApiErrorResponse(error=ApiError(code="BadRequestException", message="bad"))
    effect = AsyncMock(side_effect=ScheduleApiError(400, payload))
    on_error = MagicMock()
    on_success = MagicMock()
    mutation = _mutation(effect, notifier, on_success=on_success, on_error=on_error)

    await mutation.trigger({"id": 7})

    on_error.assert_called_once_with(payload)
    on_success.assert_not_called()
    assert notifier.messages == ["Could not update schedule"]
    assert mutation.is_error
    assert mutation.error is payload


@pytest.mark.parametrize("exc", [httpx.ConnectError("boom"), ValueError("unexpected")])
async def test_transport_failures_become_error_responses(notifier, exc):
    on_error = MagicMock()
    mutation = _mutation(AsyncMock(side_effect=exc), notifier, on_error=on_error)

    await mutation.trigger({"id": 1})

    error = on_error.call_args.args[0]
    assert isinstance(error, ApiErrorResponse)
    assert error.error.code == type(exc).__name__
    assert mutation.status == MutationStatus.ERROR


async def test_disable_toasts_suppresses_notifications(notifier):
    on_success = MagicMock()
    mutation = _mutation(AsyncMock(return_value=ApiResponse()), notifier, on_success=on_success, disable_toasts=True)

    await mutation.trigger({"id": 1})

    on_success.assert_called_once()
    assert notifier.messages == []


async def test_no_notifier_is_fine():
    mutation = Mutation("delete", AsyncMock(return_value=ApiResponse()), messages=UPDATE_MESSAGES)

    await mutation.trigger({"id": 1})

    assert mutation.is_success


async def test_pending_only_between_trigger_and_settlement(notifier):
    release = asyncio.Event()
    seen = []

    async def effect(request):
        seen.append(mutation.is_pending)
        await release.wait()
        return ApiResponse()

    mutation = _mutation(effect, notifier, on_success=lambda res: seen.append(mutation.is_pending))
    assert mutation.is_pending is False

    task = asyncio.create_task(mutation.trigger({"id": 1}))
    await asyncio.sleep(0)
    assert mutation.is_pending is True

    release.set()
    await task

    assert seen == [True, False]
    assert mutation.is_pending is False


async def test_async_callbacks_are_awaited(notifier):
    on_error = AsyncMock()
    mutation = _mutation(AsyncMock(side_effect=RuntimeError("x")), notifier, on_error=on_error)

    await mutation.trigger({"id": 1})

    on_error.assert_awaited_once()


async def test_failed_trigger_clears_previous_data(notifier):
    effect = AsyncMock(return_value=ApiResponse(data={"id": 7}))
    mutation = _mutation(effect, notifier)
    await mutation.trigger({"id": 7})
    assert mutation.data is not None

    effect.side_effect = RuntimeError("down")
    await mutation.trigger({"id": 7})

    assert mutation.is_error
    assert mutation.data is None


async def test_cancelled_effect_clears_pending(notifier):
    on_error = MagicMock()
    started = asyncio.Event()

    async def effect(request):
        started.set()
        await asyncio.Event().wait()

    mutation = _mutation(effect, notifier, on_error=on_error)
    task = asyncio.create_task(mutation.trigger({"id": 1}))
    await started.wait()
    assert mutation.is_pending

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert mutation.is_pending is False
    assert mutation.status == MutationStatus.IDLE
    on_error.assert_not_called()
    assert notifier.messages == []
