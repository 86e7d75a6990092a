"""
core/types.py 테스트

모든 Enum이 문자열 직렬화 가능한지 확인
"""

from core.types import (
    AccountKind,
    ChargeKind,
    Environment,
    ManufacturingStatus,
    TransactionKind,
)


class TestEnvironment:
    def test_from_string(self) -> None:
        assert Environment("production") == Environment.PRODUCTION
        assert Environment("development") == Environment.DEVELOPMENT


class TestAccountKind:
    def test_values(self) -> None:
        assert AccountKind.CARRIER.value == "carrier"
        assert AccountKind.MANUFACTURING.value == "manufacturing"

    def test_string_comparison(self) -> None:
        """Enum은 문자열과 == 비교 가능 (str 상속)"""
        assert AccountKind.CARRIER == "carrier"


class TestChargeKind:
    def test_values(self) -> None:
        assert [k.value for k in ChargeKind] == [
            "delivery",
            "supplier_pickup",
            "store_movement",
            "manufacturing_order",
        ]


class TestTransactionKind:
    def test_values(self) -> None:
        assert TransactionKind.CHARGE.value == "charge"
        assert TransactionKind.PAYMENT.value == "payment"


class TestManufacturingStatus:
    def test_values(self) -> None:
        assert ManufacturingStatus("completed") == ManufacturingStatus.COMPLETED
        assert ManufacturingStatus("paid") == ManufacturingStatus.PAID
