"""
계정 잔액 서비스

LedgerEngine 결과를 API 응답 스키마로 변환
"""

from datetime import date

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Defaults
from core.ledger.engine import LedgerEngine
from core.ledger.types import Ledger, Transaction
from core.storage.manufacturing_source import ManufacturingEventSource
from core.types import AccountKind, TransactionKind
from core.utils.tasks import gather_or_cancel
from web.models.responses import (
    AccountResponse,
    CarrierBalanceResponse,
    CarrierTransactionResponse,
    ManufacturingBalanceResponse,
    ManufacturingTransactionResponse,
)


def _account_response(ledger: Ledger) -> AccountResponse:
    return AccountResponse(
        id=ledger.account.account_id,
        name=ledger.account.name,
        kind=ledger.account.kind.value,
    )


def _carrier_row(tx: Transaction) -> CarrierTransactionResponse:
    is_charge = tx.kind == TransactionKind.CHARGE
    return CarrierTransactionResponse(
        date=tx.date,
        concept=tx.concept,
        debit=tx.debit,
        credit=tx.credit,
        balance=tx.balance,
        type=tx.kind.value,
        source_id=tx.source_id,
        source_subtype=tx.source_subtype,
        delivery_id=tx.delivery_id if is_charge else None,
        delivery_type=tx.source_subtype if is_charge else None,
    )


def _manufacturing_row(tx: Transaction) -> ManufacturingTransactionResponse:
    return ManufacturingTransactionResponse(
        date=tx.date,
        concept=tx.concept,
        debit=tx.debit,
        credit=tx.credit,
        balance=tx.balance,
        type=tx.kind.value,
        source_id=tx.source_id,
        source_subtype=tx.source_subtype,
        order_id=tx.source_id if tx.kind == TransactionKind.CHARGE else None,
    )


class BalanceService:
    """계정 잔액 서비스

    요청마다 생성. 캐시 없음 (기초 잔액은 매 요청 집계).
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def get_carrier_balance(
        self,
        carrier_id: int,
        window_days: int = Defaults.WINDOW_DAYS,
        today: date | None = None,
    ) -> CarrierBalanceResponse:
        """운송업체 원장 조회

        Raises:
            InvalidAccount: 운송업체 없음
            SourceUnavailable: 저장소 조회 실패
        """
        engine = LedgerEngine.for_kind(AccountKind.CARRIER, self.db)
        ledger = await engine.build_ledger(carrier_id, window_days, today)

        return CarrierBalanceResponse(
            account=_account_response(ledger),
            window_start=ledger.window_start,
            opening_balance=ledger.opening_balance,
            total_balance=ledger.closing_balance,
            transactions=[_carrier_row(tx) for tx in ledger.transactions],
        )

    async def get_manufacturer_balance(
        self,
        manufacturer_id: int,
        window_days: int = Defaults.WINDOW_DAYS,
        today: date | None = None,
    ) -> ManufacturingBalanceResponse:
        """제작 공방 원장 조회 (완료·미지급 합계 포함)

        Raises:
            InvalidAccount: 제작 공방 없음
            SourceUnavailable: 저장소 조회 실패
        """
        engine = LedgerEngine.for_kind(AccountKind.MANUFACTURING, self.db)
        pending_source = ManufacturingEventSource(self.db)

        ledger, total_pending = await gather_or_cancel(
            engine.build_ledger(manufacturer_id, window_days, today),
            pending_source.aggregate_pending_sum(manufacturer_id),
        )

        return ManufacturingBalanceResponse(
            account=_account_response(ledger),
            window_start=ledger.window_start,
            opening_balance=ledger.opening_balance,
            total_balance=ledger.closing_balance,
            transactions=[_manufacturing_row(tx) for tx in ledger.transactions],
            total_pending=total_pending,
        )
