# 파일 위치: backend/availability_settings/schemas/options.py

from typing import Any, Awaitable, Callable, Dict, Optional, Union

from pydantic import BaseModel, Field

from availability_settings.models.schedule import UpdateScheduleInput


class CustomClassNames(BaseModel):
    """화면 요소별 CSS 클래스 덮어쓰기 (표시 전용, 동작에는 영향 없음)"""
    container_class_name: Optional[str] = None
    ctas_class_name: Optional[str] = None
    editable_heading_class_name: Optional[str] = None
    form_class_name: Optional[str] = None
    timezone_select_class_name: Optional[str] = None
    subtitles_class_name: Optional[str] = None
    schedule_class_names: Dict[str, str] = Field(default_factory=dict)
    overrides_class_names: Dict[str, str] = Field(default_factory=dict)


BeforeUpdateHook = Callable[[UpdateScheduleInput], Union[bool, Awaitable[bool]]]


class AvailabilitySettingsOptions(BaseModel):
    """
    호스트 앱이 오케스트레이터에 넘기는 설정 + 콜백 묶음.
    모든 콜백은 선택 사항이며, 정해진 시점에 한 번씩만 호출됩니다.
    """
    disable_editable_heading: bool = False
    enable_overrides: bool = False
    allow_delete: Optional[bool] = None
    allow_set_to_default: Optional[bool] = None
    disable_toasts: bool = False
    is_dry_run: bool = False

    custom_class_names: CustomClassNames = Field(default_factory=CustomClassNames)
    # 툴팁 문구 등 (표시 전용)
    labels: Dict[str, str] = Field(default_factory=dict)

    # Empty / Loading 상태의 기본 문구를 대체
    no_schedule_children: Optional[Any] = None
    loading_state_children: Optional[Any] = None

    # --- 콜백 ---
    on_update_success: Optional[Callable[..., Any]] = None
    on_update_error: Optional[Callable[..., Any]] = None
    on_delete_success: Optional[Callable[..., Any]] = None
    on_delete_error: Optional[Callable[..., Any]] = None
    on_before_update: Optional[BeforeUpdateHook] = None
    on_form_state_change: Optional[Callable[..., Any]] = None
