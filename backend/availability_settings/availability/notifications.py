# backend/availability_settings/availability/notifications.py
import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """토스트 출력 창구. 반환값은 사용하지 않습니다."""

    def notify(self, message: str) -> None: ...


class LoggingNotifier:
    def notify(self, message: str) -> None:
        logger.info("toast: %s", message)


class ToastCollector:
    """HTTP 응답에 토스트를 실어 보내기 위해 메시지를 모아둡니다."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
