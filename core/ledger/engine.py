"""
원장 엔진

계정 하나의 원장 생성 흐름:
    계정 확인 → (기초 잔액 집계 ‖ 구간 차변 조회 ‖ 구간 대변 조회)
    → 병합 → 잔액 누적 + concept 생성 → Ledger

사용 예시:
```python
async with SQLiteAdapter(db_path, readonly=True) as db:
    engine = LedgerEngine.for_kind(AccountKind.CARRIER, db)
    ledger = await engine.build_ledger(carrier_id)
    print(ledger.closing_balance)
```
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from core.constants import Defaults
from core.ledger.accumulator import accumulate
from core.ledger.concepts import ConceptFormatter, get_concept_formatter
from core.ledger.errors import InvalidAccount, SourceUnavailable
from core.ledger.merger import merge
from core.ledger.opening_balance import compute_opening_balance
from core.ledger.types import Ledger
from core.types import AccountKind
from core.utils.tasks import gather_or_cancel
from core.utils.timezone import business_today, window_start as compute_window_start

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter
    from adapters.interfaces import IEventSource

logger = logging.getLogger(__name__)


class LedgerEngine:
    """계정 원장 생성기

    계정 종류별 차이는 이벤트 저장소(source)와 concept 전략(formatter)으로만 주입.
    요청마다 새로 계산하며 상태를 보관하지 않는다.

    Args:
        source: 이벤트 저장소
        formatter: concept 생성 전략
        kind: 계정 종류 (오류 메시지용)
    """

    def __init__(
        self,
        source: IEventSource,
        formatter: ConceptFormatter,
        kind: AccountKind,
    ):
        self.source = source
        self.formatter = formatter
        self.kind = kind

    @classmethod
    def for_kind(cls, kind: AccountKind, db: SQLiteAdapter) -> "LedgerEngine":
        """계정 종류에 맞는 저장소/전략으로 엔진 생성"""
        from core.storage import get_event_source

        return cls(
            source=get_event_source(kind, db),
            formatter=get_concept_formatter(kind),
            kind=kind,
        )

    async def build_ledger(
        self,
        account_id: int,
        window_days: int = Defaults.WINDOW_DAYS,
        today: date | None = None,
    ) -> Ledger:
        """원장 생성

        Args:
            account_id: 계정 ID
            window_days: 상세 구간 일수 (today - window_days 부터)
            today: 기준일 (None이면 영업지 기준 오늘)

        Returns:
            Ledger

        Raises:
            ValueError: window_days 가 음수인 경우
            InvalidAccount: 계정이 존재하지 않는 경우
            SourceUnavailable: 집계/조회 중 하나라도 실패한 경우 (부분 원장 없음)
        """
        if today is None:
            today = business_today()
        start = compute_window_start(today, window_days)

        # source.dropped_events 는 누적 목록. 이번 호출 구간만 보고
        dropped_before = len(self.source.dropped_events)

        try:
            account = await self.source.get_account(account_id)
            if account is None:
                raise InvalidAccount(account_id, self.kind)

            opening_balance, charges, payments = await gather_or_cancel(
                compute_opening_balance(self.source, account_id, start),
                self.source.list_charges(account_id, start),
                self.source.list_payments(account_id, start),
            )
        except SourceUnavailable as e:
            logger.error(
                f"원장 생성 실패: {self.kind.value} account={account_id}, "
                f"window_start={start}: {e}",
                exc_info=True,
            )
            raise

        rows = merge(charges, payments)
        transactions = accumulate(opening_balance, rows, self.formatter.format)

        ledger = Ledger(
            account=account,
            window_start=start,
            opening_balance=opening_balance,
            transactions=transactions,
            dropped_events=self.source.dropped_events[dropped_before:],
        )

        logger.info(
            f"원장 생성: {self.kind.value} account={account_id}, "
            f"window_start={start}, rows={len(transactions)}, "
            f"opening={ledger.opening_balance}, closing={ledger.closing_balance}"
        )
        return ledger
