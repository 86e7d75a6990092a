"""
원장 출력 타입 정의

UnbalancedTransaction (병합 직후) → Transaction (잔액 스탬프 후) → Ledger
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from core.domain.events import Account, ChargeEvent, PaymentEvent
from core.types import TransactionKind


ZERO = Decimal("0")


@dataclass(frozen=True)
class UnbalancedTransaction:
    """잔액 계산 전 원장 행

    debit/credit 중 하나만 0이 아님 (금액 0 이벤트는 둘 다 0).

    Attributes:
        date: 발생일
        debit: 차변 (잔액 증가)
        credit: 대변 (잔액 감소)
        kind: charge / payment
        source_id: 원본 행 ID
        source_subtype: 원본 행 유형 (배송 유형 등)
        event: 원본 이벤트 (concept 생성용)
        delivery_id: 연결된 배송 ID (차변만)
    """

    date: date
    debit: Decimal
    credit: Decimal
    kind: TransactionKind
    source_id: int
    event: ChargeEvent | PaymentEvent
    source_subtype: str | None = None
    delivery_id: int | None = None


@dataclass(frozen=True)
class Transaction:
    """원장 행 (잔액 포함)

    balance = 직전 행 balance + debit - credit
    """

    date: date
    concept: str
    debit: Decimal
    credit: Decimal
    balance: Decimal
    kind: TransactionKind
    source_id: int
    source_subtype: str | None = None
    delivery_id: int | None = None


@dataclass(frozen=True)
class Ledger:
    """계정 원장

    Attributes:
        account: 계정
        window_start: 상세 구간 시작일 (이 날짜 포함)
        opening_balance: 구간 이전 누적 잔액
        transactions: 날짜순 원장 행
        dropped_events: 형식 오류로 제외된 원본 행 ID (로그/모니터링용)
    """

    account: Account
    window_start: date
    opening_balance: Decimal
    transactions: list[Transaction] = field(default_factory=list)
    dropped_events: list[str] = field(default_factory=list)

    @property
    def closing_balance(self) -> Decimal:
        """마지막 행 잔액 (행이 없으면 기초 잔액)"""
        if not self.transactions:
            return self.opening_balance
        return self.transactions[-1].balance

    @property
    def total_debit(self) -> Decimal:
        return sum((t.debit for t in self.transactions), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((t.credit for t in self.transactions), ZERO)
