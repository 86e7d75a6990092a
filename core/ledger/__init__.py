"""
계정 잔액 원장 엔진

차변(배송 비용 / 제작 주문)과 대변(지급) 이벤트를 날짜순으로 병합하고
기초 잔액에서 시작하는 누적 잔액을 계산한다.

사용 예시:
```python
from core.ledger import LedgerEngine
from core.types import AccountKind

engine = LedgerEngine.for_kind(AccountKind.CARRIER, db)
ledger = await engine.build_ledger(carrier_id, window_days=30)

for tx in ledger.transactions:
    print(tx.date, tx.concept, tx.debit, tx.credit, tx.balance)
```
"""

from core.ledger.accumulator import accumulate
from core.ledger.concepts import (
    CarrierConceptFormatter,
    ConceptFormatter,
    ManufacturingConceptFormatter,
    get_concept_formatter,
)
from core.ledger.engine import LedgerEngine
from core.ledger.errors import (
    InvalidAccount,
    LedgerError,
    MalformedEvent,
    SourceUnavailable,
)
from core.ledger.merger import merge
from core.ledger.opening_balance import compute_opening_balance
from core.ledger.types import Ledger, Transaction, UnbalancedTransaction

__all__ = [
    # 핵심 클래스
    "LedgerEngine",
    "Ledger",
    "Transaction",
    "UnbalancedTransaction",
    # 단계별 함수
    "compute_opening_balance",
    "merge",
    "accumulate",
    # concept 전략
    "ConceptFormatter",
    "CarrierConceptFormatter",
    "ManufacturingConceptFormatter",
    "get_concept_formatter",
    # 예외
    "LedgerError",
    "InvalidAccount",
    "SourceUnavailable",
    "MalformedEvent",
]
