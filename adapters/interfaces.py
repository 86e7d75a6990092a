"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable

from core.domain.events import Account, ChargeEvent, PaymentEvent


@runtime_checkable
class IEventSource(Protocol):
    """원장 이벤트 저장소 인터페이스

    계정 종류(운송업체 / 제작 공방)별로 구현.
    금액은 반드시 Decimal 타입 사용.
    저장소 오류는 SourceUnavailable 로 감싸서 던져야 함.
    형식 오류 행은 제외하고, 제외한 행 ID를 dropped_events 에 기록.
    """

    dropped_events: list[str]

    async def get_account(self, account_id: int) -> Account | None:
        """계정 조회

        Returns:
            계정 또는 None (존재하지 않음)
        """
        ...

    async def list_charges(self, account_id: int, since: date) -> list[ChargeEvent]:
        """since 이후(포함) 차변 이벤트, 날짜 오름차순"""
        ...

    async def list_payments(self, account_id: int, since: date) -> list[PaymentEvent]:
        """since 이후(포함) 대변 이벤트, 날짜 오름차순"""
        ...

    async def aggregate_charge_sum(self, account_id: int, before: date) -> Decimal:
        """before 이전 차변 합계 (미확정 금액은 0)"""
        ...

    async def aggregate_payment_sum(self, account_id: int, before: date) -> Decimal:
        """before 이전 대변 합계"""
        ...
