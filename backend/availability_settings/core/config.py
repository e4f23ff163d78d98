from typing import List, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScheduleDefaults(BaseModel):
    """
    사용자/스케줄 데이터에 값이 없을 때 변환 단계에서 한 번만 참조하는 기본값 테이블입니다.
    """
    week_start: str = "Sunday"
    time_format: int = 12
    time_zone: str = "UTC"


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # 원격 스케줄 API
    SCHEDULES_API_URL: str = "http://localhost:5555"
    SCHEDULES_API_TIMEOUT: float = 30.0

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    DEFAULT_WEEK_START: str = "Sunday"
    DEFAULT_TIME_FORMAT: int = 12
    DEFAULT_TIME_ZONE: str = "UTC"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def schedule_defaults(self) -> ScheduleDefaults:
        return ScheduleDefaults(
            week_start=self.DEFAULT_WEEK_START,
            time_format=self.DEFAULT_TIME_FORMAT,
            time_zone=self.DEFAULT_TIME_ZONE,
        )


settings = Settings()


def get_schedule_defaults(overrides: Optional[ScheduleDefaults] = None) -> ScheduleDefaults:
    return overrides or settings.schedule_defaults
