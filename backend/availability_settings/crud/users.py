# backend/availability_settings/crud/users.py
from typing import Dict, Optional

import httpx

from availability_settings.crud.schedules import raise_for_api_error
from availability_settings.models.schedule import ApiResponse
from availability_settings.models.user import MeOutput

ME_PATH = "/v2/me"


async def get_me(
    client: httpx.AsyncClient,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> Optional[MeOutput]:
    response = await client.get(ME_PATH, headers=headers)
    if response.status_code == httpx.codes.NOT_FOUND:
        return None
    raise_for_api_error(response)
    return ApiResponse[MeOutput].model_validate(response.json()).data
