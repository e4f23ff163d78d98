# backend/availability_settings/core/logging.py
import logging

from availability_settings.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    앱 시작 시 한 번 호출합니다. 모듈별 로거는 logging.getLogger(__name__)를 사용합니다.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # httpx 요청 로그는 너무 많아서 WARNING 이상만
    logging.getLogger("httpx").setLevel(logging.WARNING)
