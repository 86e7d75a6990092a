"""
FastAPI 애플리케이션

라우터 등록, 예외 처리 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config.loader import get_settings
from core.constants import Defaults
from core.ledger.errors import InvalidAccount, SourceUnavailable
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web", console_level=get_settings().log_level)

from web.routes import balance, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema

    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    logger.info(
        f"Web 시작: environment={settings.environment.value}, "
        f"db={settings.db_path}, window_days={settings.window_days}"
    )

    yield


app = FastAPI(
    title="Balancebook API",
    description="운송업체 / 제작 공방 계정 잔액 원장 API",
    version=Defaults.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# =========================================================================
# 예외 처리
# =========================================================================


@app.exception_handler(InvalidAccount)
async def invalid_account_handler(request: Request, exc: InvalidAccount) -> JSONResponse:
    """존재하지 않는 계정 → 404"""
    logger.info(f"계정 없음: {request.url.path}")
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(SourceUnavailable)
async def source_unavailable_handler(request: Request, exc: SourceUnavailable) -> JSONResponse:
    """저장소 조회 실패 → 503 (클라이언트가 재시도 결정)"""
    return JSONResponse(status_code=503, content={"error": str(exc)})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(balance.router)
