# backend/availability_settings/api/endpoints/web/availability.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from availability_settings.api.deps import get_schedule_transport
from availability_settings.availability.notifications import ToastCollector
from availability_settings.availability.orchestrator import AvailabilitySettings
from availability_settings.crud.transport import ScheduleTransport
from availability_settings.schemas.options import AvailabilitySettingsOptions
from availability_settings.schemas.view import ActionResponse, SettingsSubmit, SettingsView

router = APIRouter(prefix="/availability-settings", tags=["Availability Settings"])


def _raise_if_rejected(settings_atom: AvailabilitySettings, mutation_name: str) -> None:
    mutation = getattr(settings_atom, f"{mutation_name}_mutation")
    if mutation.is_error:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=mutation.error.model_dump(by_alias=True),
        )


# READ (현재 화면 상태)
@router.get("", response_model=SettingsView)
async def read_settings(
    schedule_id: Optional[int] = None,
    enable_overrides: bool = False,
    allow_delete: Optional[bool] = None,
    allow_set_to_default: Optional[bool] = None,
    disable_editable_heading: bool = False,
    transport: ScheduleTransport = Depends(get_schedule_transport),
):
    options = AvailabilitySettingsOptions(
        enable_overrides=enable_overrides,
        allow_delete=allow_delete,
        allow_set_to_default=allow_set_to_default,
        disable_editable_heading=disable_editable_heading,
    )
    settings_atom = AvailabilitySettings(transport, options, schedule_id=schedule_id)
    await settings_atom.load()
    return settings_atom.view()


# UPDATE
@router.put("", response_model=ActionResponse)
async def submit_settings(
    payload: SettingsSubmit,
    transport: ScheduleTransport = Depends(get_schedule_transport),
):
    toasts = ToastCollector()
    options = AvailabilitySettingsOptions(
        is_dry_run=payload.is_dry_run,
        disable_toasts=payload.disable_toasts,
    )
    settings_atom = AvailabilitySettings(
        transport, options, schedule_id=payload.schedule_id, notifier=toasts
    )
    if not payload.is_dry_run:
        await settings_atom.load()

    outcome = await settings_atom.handle_submit(payload.values)
    _raise_if_rejected(settings_atom, "update")
    return ActionResponse(outcome=outcome, toasts=toasts.messages, data=settings_atom.update_mutation.data)


# DELETE
@router.delete("", response_model=ActionResponse)
async def delete_settings(
    schedule_id: Optional[int] = None,
    is_dry_run: bool = False,
    disable_toasts: bool = False,
    transport: ScheduleTransport = Depends(get_schedule_transport),
):
    toasts = ToastCollector()
    options = AvailabilitySettingsOptions(is_dry_run=is_dry_run, disable_toasts=disable_toasts)
    settings_atom = AvailabilitySettings(transport, options, schedule_id=schedule_id, notifier=toasts)
    if not is_dry_run:
        await settings_atom.load()

    outcome = await settings_atom.handle_delete()
    _raise_if_rejected(settings_atom, "delete")
    return ActionResponse(outcome=outcome, toasts=toasts.messages)
