# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from availability_settings.api.endpoints import health
from availability_settings.api.endpoints.web import availability
from availability_settings.clients.http import close_api_connection, connect_to_api
from availability_settings.core.config import settings
from availability_settings.core.logging import configure_logging

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)

if not settings.is_production:
    logger.warning("Running in %s mode.", settings.ENVIRONMENT)


# [수명 주기 관리] 원격 API 클라이언트 생성 및 해제
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup 로직
    await connect_to_api()
    yield
    # Shutdown 로직
    await close_api_connection()


app = FastAPI(title="Availability Settings Backend", lifespan=lifespan)

# CORS: 설정 화면을 띄우는 프론트엔드 접근 허용
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def read_root():
    return {"message": "Backend is running!"}


app.include_router(health.router)
app.include_router(availability.router)
