"""
잔액 누적기

병합된 원장 행을 한 번 순회하며 누적 잔액을 기록.
"""

from collections.abc import Callable, Iterable
from decimal import Decimal

from core.ledger.types import Transaction, UnbalancedTransaction


def _no_concept(row: UnbalancedTransaction) -> str:
    return ""


def accumulate(
    opening_balance: Decimal,
    transactions: Iterable[UnbalancedTransaction],
    concept: Callable[[UnbalancedTransaction], str] = _no_concept,
) -> list[Transaction]:
    """누적 잔액 계산

    balance = opening_balance 에서 시작해 행마다 debit - credit 를 더함.
    행 종류에 따른 분기 없음 (종류는 debit/credit 중 어느 쪽이 채워졌는지로만 반영됨).

    Args:
        opening_balance: 기초 잔액
        transactions: 날짜순 원장 행
        concept: 행 설명 생성 함수

    Returns:
        잔액이 기록된 원장 행
    """
    balance = opening_balance
    result: list[Transaction] = []

    for row in transactions:
        balance = balance + row.debit - row.credit
        result.append(
            Transaction(
                date=row.date,
                concept=concept(row),
                debit=row.debit,
                credit=row.credit,
                balance=balance,
                kind=row.kind,
                source_id=row.source_id,
                source_subtype=row.source_subtype,
                delivery_id=row.delivery_id,
            )
        )

    return result
