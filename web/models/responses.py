"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 통화/로케일 형식 없이 JSON 숫자로 직렬화 (표시 형식은 클라이언트 책임).
"""

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# 내부는 Decimal, JSON 출력은 숫자
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    environment: str = Field(..., description="실행 환경 (production/development)")
    version: str = Field(..., description="API 버전")


class ErrorResponse(BaseModel):
    """오류 응답"""

    error: str = Field(..., description="오류 메시지")


class AccountResponse(BaseModel):
    """원장 계정"""

    id: int = Field(..., description="계정 ID")
    name: str = Field(..., description="계정 이름")
    kind: str = Field(..., description="계정 종류 (carrier/manufacturing)")


class TransactionResponse(BaseModel):
    """원장 행 응답"""

    date: dt.date = Field(..., description="발생일")
    concept: str = Field(..., description="설명")
    debit: Money = Field(..., description="차변 (잔액 증가)")
    credit: Money = Field(..., description="대변 (잔액 감소)")
    balance: Money = Field(..., description="누적 잔액")
    type: str = Field(..., description="행 종류 (charge/payment)")
    source_id: int = Field(..., description="원본 행 ID")
    source_subtype: str | None = Field(default=None, description="원본 행 유형 (배송 유형/주문 상태/지급 수단)")


class CarrierTransactionResponse(TransactionResponse):
    """운송업체 원장 행"""

    delivery_id: int | None = Field(default=None, description="배송 ID (차변)")
    delivery_type: str | None = Field(default=None, description="배송 유형 (차변)")


class ManufacturingTransactionResponse(TransactionResponse):
    """제작 공방 원장 행"""

    order_id: int | None = Field(default=None, description="제작 주문 ID (차변)")


class BalanceResponse(BaseModel):
    """계정 원장 응답 공통"""

    account: AccountResponse = Field(..., description="계정")
    window_start: dt.date = Field(..., description="상세 구간 시작일")
    opening_balance: Money = Field(..., description="구간 이전 누적 잔액")
    total_balance: Money = Field(..., description="현재 잔액 (마지막 행 잔액)")


class CarrierBalanceResponse(BalanceResponse):
    """운송업체 원장 응답"""

    transactions: list[CarrierTransactionResponse] = Field(default_factory=list, description="원장 행")


class ManufacturingBalanceResponse(BalanceResponse):
    """제작 공방 원장 응답"""

    transactions: list[ManufacturingTransactionResponse] = Field(default_factory=list, description="원장 행")
    total_pending: Money = Field(..., description="완료·미지급 주문 합계")
