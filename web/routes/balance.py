"""
계정 잔액 API 라우트

GET /api/carriers/{carrier_id}/balance
GET /api/manufacturers/{manufacturer_id}/balance
"""

from fastapi import APIRouter, Depends, Path, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.constants import Defaults
from web.dependencies import get_app_settings, get_db
from web.models.responses import (
    CarrierBalanceResponse,
    ErrorResponse,
    ManufacturingBalanceResponse,
)
from web.services.balance_service import BalanceService

router = APIRouter(prefix="/api", tags=["Balance"])

_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "계정 없음"},
    503: {"model": ErrorResponse, "description": "저장소 조회 실패"},
}


@router.get(
    "/carriers/{carrier_id}/balance",
    response_model=CarrierBalanceResponse,
    responses=_ERROR_RESPONSES,
)
async def get_carrier_balance(
    carrier_id: int = Path(..., ge=1),
    days: int | None = Query(default=None, ge=1, le=Defaults.MAX_WINDOW_DAYS),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """운송업체 원장 (최근 N일 상세 + 기초 잔액)"""
    service = BalanceService(db)
    return await service.get_carrier_balance(carrier_id, days or settings.window_days)


@router.get(
    "/manufacturers/{manufacturer_id}/balance",
    response_model=ManufacturingBalanceResponse,
    responses=_ERROR_RESPONSES,
)
async def get_manufacturer_balance(
    manufacturer_id: int = Path(..., ge=1),
    days: int | None = Query(default=None, ge=1, le=Defaults.MAX_WINDOW_DAYS),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """제작 공방 원장 (최근 N일 상세 + 기초 잔액 + 미지급 합계)"""
    service = BalanceService(db)
    return await service.get_manufacturer_balance(manufacturer_id, days or settings.window_days)
