"""
원장 입력 도메인 모델

저장소에서 조회한 차변(charge)/대변(payment) 이벤트.
모든 금액은 Decimal 타입 사용.
요청마다 새로 조회되는 읽기 전용 스냅샷이므로 모두 불변(frozen).
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from core.types import AccountKind, ChargeKind


@dataclass(frozen=True)
class Account:
    """원장 계정 (운송업체 / 제작 공방)

    Attributes:
        account_id: 계정 ID (저장소 정수 ID)
        name: 표시 이름
        kind: 계정 종류
    """

    account_id: int
    name: str
    kind: AccountKind


@dataclass(frozen=True)
class ChargeEvent:
    """차변 이벤트 (상대방에게 지급할 금액 증가)

    amount가 None이면 비용 미확정. 잔액 계산에서는 0으로 취급하고
    concept에 가격 미정 표시를 붙인다.

    Attributes:
        source_id: 원본 행 ID (배송 작업 ID / 제작 주문 ID)
        date: 발생일
        amount: 금액 (음수 불가, None = 미확정)
        kind: 이벤트 종류
        subtype: 원본 행 자체의 유형 (예: 배송 유형)
        delivery_id: 연결된 배송 ID
        invoice_number: 송장 번호
        customer_name: 고객명
        supplier_name: 공급처명
        product_name: 제작 상품명
        extras: 제작 추가 옵션
        notes: 메모 (맞춤 주문 설명 등)
        is_custom_order: 판매 연결 없는 맞춤 주문 여부
    """

    source_id: int
    date: date
    amount: Decimal | None
    kind: ChargeKind
    subtype: str | None = None
    delivery_id: int | None = None
    invoice_number: str | None = None
    customer_name: str | None = None
    supplier_name: str | None = None
    product_name: str | None = None
    extras: str | None = None
    notes: str | None = None
    is_custom_order: bool = False

    @property
    def is_price_pending(self) -> bool:
        """비용 미확정 여부"""
        return self.amount is None


@dataclass(frozen=True)
class PaymentEvent:
    """대변 이벤트 (지급)

    Attributes:
        source_id: 지급 행 ID
        date: 지급일
        amount: 지급액 (음수 불가)
        method: 지급 수단 (cash, bank_transfer 등 자유 입력)
        notes: 메모
    """

    source_id: int
    date: date
    amount: Decimal
    method: str | None = None
    notes: str | None = None
