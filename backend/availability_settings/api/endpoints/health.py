# backend/availability_settings/api/endpoints/health.py

import httpx
from fastapi import APIRouter

from availability_settings.clients.http import get_http_client

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """
    [운영] 헬스 체크
    - 서버 생존 여부 + 원격 스케줄 API 연결 여부를 빠르게 확인하기 위한 엔드포인트
    """
    api_ok = False
    api_error = None

    try:
        response = await get_http_client().get("/health")
        api_ok = not response.is_server_error
        if not api_ok:
            api_error = f"HTTP {response.status_code}"
    except (httpx.HTTPError, RuntimeError) as e:
        api_error = str(e)

    return {
        "status": "ok" if api_ok else "degraded",
        "schedules_api": api_ok,
        "schedules_api_error": api_error,
    }
