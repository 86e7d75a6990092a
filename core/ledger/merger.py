"""
원장 병합기

차변/대변 이벤트를 하나의 날짜순 목록으로 병합.
같은 날짜 내 순서는 입력 순서를 유지 (안정 정렬).
같은 입력 → 항상 같은 출력 순서.
"""

from collections.abc import Iterable

from core.domain.events import ChargeEvent, PaymentEvent
from core.ledger.types import ZERO, UnbalancedTransaction
from core.types import TransactionKind


def charge_to_transaction(charge: ChargeEvent) -> UnbalancedTransaction:
    """차변 이벤트 → 원장 행 (미확정 금액은 0)"""
    return UnbalancedTransaction(
        date=charge.date,
        debit=charge.amount if charge.amount is not None else ZERO,
        credit=ZERO,
        kind=TransactionKind.CHARGE,
        source_id=charge.source_id,
        source_subtype=charge.subtype,
        delivery_id=charge.delivery_id,
        event=charge,
    )


def payment_to_transaction(payment: PaymentEvent) -> UnbalancedTransaction:
    """대변 이벤트 → 원장 행"""
    return UnbalancedTransaction(
        date=payment.date,
        debit=ZERO,
        credit=payment.amount,
        kind=TransactionKind.PAYMENT,
        source_id=payment.source_id,
        source_subtype=payment.method,
        event=payment,
    )


def merge(
    charges: Iterable[ChargeEvent],
    payments: Iterable[PaymentEvent],
) -> list[UnbalancedTransaction]:
    """차변/대변 병합 후 날짜 오름차순 안정 정렬

    Args:
        charges: 차변 이벤트 (정렬 여부 무관)
        payments: 대변 이벤트 (정렬 여부 무관)

    Returns:
        날짜순 원장 행. 같은 날짜는 차변 → 대변, 각각 입력 순서.
    """
    rows = [charge_to_transaction(c) for c in charges]
    rows.extend(payment_to_transaction(p) for p in payments)
    return sorted(rows, key=lambda row: row.date)
