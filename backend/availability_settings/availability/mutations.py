# backend/availability_settings/availability/mutations.py
import asyncio
import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, NamedTuple, Optional, TypeVar

from availability_settings.availability.notifications import Notifier
from availability_settings.core.errors import to_error_response
from availability_settings.models.schedule import ApiErrorResponse

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class ToastMessages(NamedTuple):
    success: str
    error: str


UPDATE_MESSAGES = ToastMessages("Schedule updated successfully", "Could not update schedule")
DELETE_MESSAGES = ToastMessages("Schedule deleted successfully", "Could not delete schedule")


class MutationStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


async def maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class Mutation(Generic[RequestT, ResponseT]):
    """
    원격 update/delete 1건의 pending -> success|error 수명 주기를 감쌉니다.

    - 성공: on_success(response) 호출 후 성공 토스트
    - 실패: on_error(error) 호출 후 실패 토스트
    원격 호출 실패는 여기서 모두 흡수되고 trigger() 밖으로 나가지 않습니다.
    동시에 여러 번 trigger 하는 것은 막지 않습니다. (is_pending 으로 호출자가 막아야 함)
    """

    def __init__(
        self,
        name: str,
        effect: Callable[[RequestT], Awaitable[ResponseT]],
        *,
        messages: ToastMessages,
        on_success: Optional[Callable[[ResponseT], Any]] = None,
        on_error: Optional[Callable[[ApiErrorResponse], Any]] = None,
        notifier: Optional[Notifier] = None,
        disable_toasts: bool = False,
    ):
        self.name = name
        self._effect = effect
        self._messages = messages
        self._on_success = on_success
        self._on_error = on_error
        self._notifier = notifier
        self._disable_toasts = disable_toasts

        self.status = MutationStatus.IDLE
        self.data: Optional[ResponseT] = None
        self.error: Optional[ApiErrorResponse] = None

    @property
    def is_pending(self) -> bool:
        return self.status == MutationStatus.PENDING

    @property
    def is_success(self) -> bool:
        return self.status == MutationStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == MutationStatus.ERROR

    def _toast(self, message: str) -> None:
        if self._disable_toasts or self._notifier is None:
            return
        self._notifier.notify(message)

    async def trigger(self, request: RequestT) -> None:
        self.status = MutationStatus.PENDING
        self.error = None
        self.data = None
        try:
            response = await self._effect(request)
        except asyncio.CancelledError:
            # 취소는 실패가 아님: 콜백/토스트 없이 pending 만 해제
            self.status = MutationStatus.IDLE
            raise
        except Exception as exc:
            logger.warning("%s mutation failed: %s", self.name, exc, exc_info=True)
            self.status = MutationStatus.ERROR
            self.error = to_error_response(exc)
            if self._on_error:
                await maybe_await(self._on_error(self.error))
            self._toast(self._messages.error)
            return

        self.status = MutationStatus.SUCCESS
        self.data = response
        logger.debug("%s mutation succeeded", self.name)
        if self._on_success:
            await maybe_await(self._on_success(response))
        self._toast(self._messages.success)
