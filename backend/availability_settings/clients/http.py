# backend/availability_settings/clients/http.py
import logging

import httpx

from availability_settings.core.config import settings

logger = logging.getLogger(__name__)

client: httpx.AsyncClient | None = None


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.SCHEDULES_API_URL,
        timeout=settings.SCHEDULES_API_TIMEOUT,
    )


async def connect_to_api():
    global client
    client = create_http_client()
    logger.info("Schedules API client ready (%s)", settings.SCHEDULES_API_URL)


async def close_api_connection():
    global client
    if client:
        await client.aclose()
        client = None
        logger.info("Schedules API client closed")


def get_http_client() -> httpx.AsyncClient:
    if client is None:
        raise RuntimeError("HTTP client not initialized. Did you call connect_to_api()?")
    return client
