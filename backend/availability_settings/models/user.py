# 파일 위치: backend/availability_settings/models/user.py
from typing import Optional

from availability_settings.models.schedule import WireModel


class MeOutput(WireModel):
    """
    [응답] GET /v2/me
    스케줄 소유자의 시간 표시 설정을 담고 있습니다.
    필드가 비어 있을 수 있으므로 전부 Optional 입니다. (기본값은 변환 단계에서 채움)
    """
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    time_format: Optional[int] = None  # 12 또는 24
    week_start: Optional[str] = None
    time_zone: Optional[str] = None
    default_schedule_id: Optional[int] = None
