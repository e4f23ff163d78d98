from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from availability_settings.clients.http import get_http_client
from availability_settings.crud.transport import HttpScheduleTransport, ScheduleTransport

# 토큰 검증은 원격 API가 담당. 여기서는 받은 토큰을 그대로 전달만 합니다.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials.strip() or None


async def get_schedule_transport(
    access_token: Optional[str] = Depends(get_access_token),
) -> ScheduleTransport:
    return HttpScheduleTransport(get_http_client(), access_token)
