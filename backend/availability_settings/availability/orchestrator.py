# backend/availability_settings/availability/orchestrator.py
"""
가용 시간 설정 화면의 상태 머신.

    원격 스케줄 -> to_display() -> 폼 -> (편집) -> to_wire()
        -> on_before_update (선택) -> update mutation -> 원격 스케줄

화면 상태는 Loading > Empty > Populated 순서로 판단합니다.
"""
import asyncio
import logging
from typing import Optional

from pydantic import ValidationError

from availability_settings.availability.mutations import (
    DELETE_MESSAGES,
    UPDATE_MESSAGES,
    Mutation,
    maybe_await,
)
from availability_settings.availability.notifications import LoggingNotifier, Notifier
from availability_settings.availability.queries import Query
from availability_settings.core.config import ScheduleDefaults
from availability_settings.crud.transport import ScheduleTransport
from availability_settings.models.schedule import (
    DeleteScheduleRequest,
    UpdateScheduleInput,
    UpdateScheduleRequest,
)
from availability_settings.schemas.availability import AtomSchedule, AvailabilityFormValues
from availability_settings.schemas.options import AvailabilitySettingsOptions, BeforeUpdateHook
from availability_settings.schemas.view import (
    DEFAULT_LOADING_CONTENT,
    DEFAULT_NO_SCHEDULE_CONTENT,
    ActionOutcome,
    EmptyView,
    LoadingView,
    ScheduleView,
    SettingsView,
)
from availability_settings.transformers.schedule import to_display, to_wire

logger = logging.getLogger(__name__)


async def run_before_update(hook: Optional[BeforeUpdateHook], body: UpdateScheduleInput) -> bool:
    """훅이 없으면 통과. 있으면 정확히 한 번 호출하고 (await 가능) 결과를 따릅니다."""
    if hook is None:
        return True
    return bool(await maybe_await(hook(body)))


def simulate_success(notifier: Optional[Notifier], message: str, disable_toasts: bool) -> None:
    """dry run: 원격 호출 / 콜백 없이 성공 토스트만"""
    if disable_toasts or notifier is None:
        return
    notifier.notify(message)


class AvailabilitySettings:
    def __init__(
        self,
        transport: ScheduleTransport,
        options: Optional[AvailabilitySettingsOptions] = None,
        *,
        schedule_id: Optional[int] = None,
        notifier: Optional[Notifier] = None,
        defaults: Optional[ScheduleDefaults] = None,
    ):
        self.transport = transport
        self.options = options or AvailabilitySettingsOptions()
        self.notifier = notifier if notifier is not None else LoggingNotifier()
        self.schedule_id = schedule_id
        self._defaults = defaults

        self.schedule_query = Query("schedule", lambda: transport.get_schedule(self.schedule_id))
        self.schedules_query = Query("schedules", transport.list_schedules)
        self.me_query = Query("me", transport.get_me)

        self.delete_mutation = Mutation(
            "delete",
            transport.delete_schedule,
            messages=DELETE_MESSAGES,
            on_success=self.options.on_delete_success,
            on_error=self.options.on_delete_error,
            notifier=self.notifier,
            disable_toasts=self.options.disable_toasts,
        )
        self.update_mutation = Mutation(
            "update",
            transport.update_schedule,
            messages=UPDATE_MESSAGES,
            on_success=self.options.on_update_success,
            on_error=self.options.on_update_error,
            notifier=self.notifier,
            disable_toasts=self.options.disable_toasts,
        )

    # ---------- 조회 ----------

    async def load(self) -> None:
        await asyncio.gather(
            self.schedule_query.fetch(),
            self.schedules_query.fetch(),
            self.me_query.fetch(),
        )

    async def refetch(self) -> None:
        # 변경 후에는 스케줄/스케줄 목록만 다시 읽음 (사용자 설정은 그대로)
        await asyncio.gather(self.schedule_query.fetch(), self.schedules_query.fetch())

    async def select_schedule(self, schedule_id: Optional[int]) -> None:
        """다른 스케줄로 바뀌면 이전 결과는 버리고 Loading 부터 다시 시작합니다."""
        if schedule_id == self.schedule_id and not self.schedule_query.result.is_loading:
            return
        self.schedule_id = schedule_id
        self.schedule_query.reset()
        await self.schedule_query.fetch()

    @property
    def is_loading(self) -> bool:
        return self.schedule_query.result.is_loading

    @property
    def is_deleting(self) -> bool:
        return self.delete_mutation.is_pending

    @property
    def is_saving(self) -> bool:
        return self.update_mutation.is_pending

    def resolve_schedule(self) -> Optional[AtomSchedule]:
        schedules = self.schedules_query.result.data or []
        return to_display(
            self.me_query.result.data,
            self.schedule_query.result.data,
            len(schedules),
            self._defaults,
        )

    def view(self) -> SettingsView:
        if self.is_loading:
            return LoadingView(content=self.options.loading_state_children or DEFAULT_LOADING_CONTENT)

        atom_schedule = self.resolve_schedule()
        if atom_schedule is None:
            return EmptyView(content=self.options.no_schedule_children or DEFAULT_NO_SCHEDULE_CONTENT)

        options = self.options
        return ScheduleView(
            schedule=atom_schedule,
            week_start=atom_schedule.week_start,
            time_format=atom_schedule.time_format,
            disable_editable_heading=options.disable_editable_heading,
            enable_overrides=options.enable_overrides,
            allow_delete=options.allow_delete,
            allow_set_to_default=options.allow_set_to_default,
            is_deleting=self.is_deleting,
            is_saving=self.is_saving,
            custom_class_names=options.custom_class_names,
            labels=options.labels,
        )

    # ---------- 액션 ----------

    def _resolved_id(self, action: str) -> Optional[int]:
        atom_schedule = self.resolve_schedule()
        schedule_id = atom_schedule.id if atom_schedule else None
        if schedule_id is None:
            # 호스트에는 알리지 않음 (콜백/토스트 없음)
            logger.warning("%s dropped: no resolved schedule id", action)
        return schedule_id

    async def handle_delete(self) -> ActionOutcome:
        if self.options.is_dry_run:
            simulate_success(self.notifier, DELETE_MESSAGES.success, self.options.disable_toasts)
            return ActionOutcome.SIMULATED

        schedule_id = self._resolved_id("delete")
        if schedule_id is None:
            return ActionOutcome.SKIPPED

        await self.delete_mutation.trigger(DeleteScheduleRequest(id=schedule_id))
        if self.delete_mutation.is_success:
            await self.refetch()
        return ActionOutcome.DISPATCHED

    async def handle_submit(self, values: AvailabilityFormValues) -> ActionOutcome:
        if self.options.is_dry_run:
            simulate_success(self.notifier, UPDATE_MESSAGES.success, self.options.disable_toasts)
            return ActionOutcome.SIMULATED

        schedule_id = self._resolved_id("update")
        if schedule_id is None:
            return ActionOutcome.SKIPPED

        try:
            # 대입으로 바뀐 값은 검증을 거치지 않았으므로 변환 전에 다시 검증
            values = AvailabilityFormValues.model_validate(values.model_dump())
        except ValidationError as exc:
            logger.warning("update of schedule %s rejected: invalid form values: %s", schedule_id, exc)
            return ActionOutcome.INVALID

        update_body = to_wire(values)
        if not await run_before_update(self.options.on_before_update, update_body):
            logger.info("update of schedule %s vetoed by on_before_update", schedule_id)
            return ActionOutcome.VETOED

        request = UpdateScheduleRequest(id=schedule_id, **dict(update_body))
        await self.update_mutation.trigger(request)
        if self.update_mutation.is_success:
            await self.refetch()
        return ActionOutcome.DISPATCHED

    async def handle_form_state_change(self, values: AvailabilityFormValues) -> None:
        if self.options.on_form_state_change:
            await maybe_await(self.options.on_form_state_change(values))
