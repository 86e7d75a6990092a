"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.responses import (
    AccountResponse,
    BalanceResponse,
    CarrierBalanceResponse,
    CarrierTransactionResponse,
    ErrorResponse,
    HealthResponse,
    ManufacturingBalanceResponse,
    ManufacturingTransactionResponse,
    TransactionResponse,
)

__all__ = [
    "AccountResponse",
    "BalanceResponse",
    "CarrierBalanceResponse",
    "CarrierTransactionResponse",
    "ErrorResponse",
    "HealthResponse",
    "ManufacturingBalanceResponse",
    "ManufacturingTransactionResponse",
    "TransactionResponse",
]
