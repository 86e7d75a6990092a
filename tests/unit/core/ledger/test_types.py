"""
원장 출력 타입 테스트
"""

from datetime import date
from decimal import Decimal

from core.domain.events import Account
from core.ledger.types import Ledger, Transaction
from core.types import AccountKind, TransactionKind


ACCOUNT = Account(account_id=1, name="Norte", kind=AccountKind.CARRIER)


def make_tx(debit: str, credit: str, balance: str) -> Transaction:
    return Transaction(
        date=date(2024, 1, 2),
        concept="x",
        debit=Decimal(debit),
        credit=Decimal(credit),
        balance=Decimal(balance),
        kind=TransactionKind.CHARGE if Decimal(debit) else TransactionKind.PAYMENT,
        source_id=1,
    )


class TestLedger:
    """Ledger 테스트"""

    def test_closing_balance_empty(self) -> None:
        """행 없음 → 기초 잔액"""
        ledger = Ledger(account=ACCOUNT, window_start=date(2024, 1, 1), opening_balance=Decimal("75"))

        assert ledger.closing_balance == Decimal("75")
        assert ledger.total_debit == Decimal("0")
        assert ledger.total_credit == Decimal("0")

    def test_closing_balance_last_row(self) -> None:
        ledger = Ledger(
            account=ACCOUNT,
            window_start=date(2024, 1, 1),
            opening_balance=Decimal("0"),
            transactions=[make_tx("100", "0", "100"), make_tx("0", "40", "60")],
        )

        assert ledger.closing_balance == Decimal("60")
        assert ledger.total_debit == Decimal("100")
        assert ledger.total_credit == Decimal("40")

    def test_default_lists_not_shared(self) -> None:
        a = Ledger(account=ACCOUNT, window_start=date(2024, 1, 1), opening_balance=Decimal("0"))
        b = Ledger(account=ACCOUNT, window_start=date(2024, 1, 1), opening_balance=Decimal("0"))

        assert a.transactions is not b.transactions
