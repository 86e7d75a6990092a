"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Environment(str, Enum):
    """실행 환경 (운영 / 개발)"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


class AccountKind(str, Enum):
    """원장 계정 종류

    두 종류 모두 같은 엔진을 사용하며, 이벤트 출처와 concept 표시만 다름.
    """

    CARRIER = "carrier"  # 운송업체 (배송 비용 / 운송비 지급)
    MANUFACTURING = "manufacturing"  # 제작 공방 (제작 주문 / 제작비 지급)


class ChargeKind(str, Enum):
    """차변 이벤트 종류 (잔액 증가)"""

    DELIVERY = "delivery"  # 고객 배송
    SUPPLIER_PICKUP = "supplier_pickup"  # 공급처 픽업
    STORE_MOVEMENT = "store_movement"  # 매장 간 재고 이동
    MANUFACTURING_ORDER = "manufacturing_order"  # 제작 주문 완료


class TransactionKind(str, Enum):
    """원장 행 종류"""

    CHARGE = "charge"
    PAYMENT = "payment"


class ManufacturingStatus(str, Enum):
    """제작 주문 상태 (원장에 반영되는 상태만)"""

    COMPLETED = "completed"  # 제작 완료, 미지급
    PAID = "paid"  # 지급 완료
