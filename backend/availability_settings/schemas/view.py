# 파일 위치: backend/availability_settings/schemas/view.py

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from availability_settings.schemas.availability import AtomSchedule, AvailabilityFormValues
from availability_settings.schemas.options import CustomClassNames

DEFAULT_LOADING_CONTENT = "Loading..."
DEFAULT_NO_SCHEDULE_CONTENT = "No user schedule present"


class DisplayState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


class ActionOutcome(str, Enum):
    """handle_delete / handle_submit 이 실제로 무엇을 했는지"""
    DISPATCHED = "dispatched"  # 원격 호출까지 진행 (성공 여부는 mutation 상태 참고)
    SIMULATED = "simulated"    # dry run: 토스트만
    VETOED = "vetoed"          # on_before_update 가 False
    SKIPPED = "skipped"        # 스케줄 id 없음
    INVALID = "invalid"        # 폼 값 검증 실패 (원격 호출 없음)


class LoadingView(BaseModel):
    state: Literal[DisplayState.LOADING] = DisplayState.LOADING
    content: Any = DEFAULT_LOADING_CONTENT


class EmptyView(BaseModel):
    state: Literal[DisplayState.EMPTY] = DisplayState.EMPTY
    content: Any = DEFAULT_NO_SCHEDULE_CONTENT


class ScheduleView(BaseModel):
    """편집 폼을 그리는 데 필요한 모든 것"""
    state: Literal[DisplayState.POPULATED] = DisplayState.POPULATED
    schedule: AtomSchedule
    week_start: str
    time_format: int
    disable_editable_heading: bool = False
    enable_overrides: bool = False
    allow_delete: Optional[bool] = None
    allow_set_to_default: Optional[bool] = None
    is_deleting: bool = False
    is_saving: bool = False
    is_platform: bool = True
    back_path: str = ""
    custom_class_names: CustomClassNames = Field(default_factory=CustomClassNames)
    labels: Dict[str, str] = Field(default_factory=dict)


SettingsView = Union[LoadingView, EmptyView, ScheduleView]


class ActionResponse(BaseModel):
    """[응답] PUT / DELETE /availability-settings"""
    outcome: ActionOutcome
    toasts: List[str] = Field(default_factory=list)
    data: Optional[Any] = None


class SettingsSubmit(BaseModel):
    """[요청] PUT /availability-settings"""
    schedule_id: Optional[int] = None
    values: AvailabilityFormValues
    is_dry_run: bool = False
    disable_toasts: bool = False
