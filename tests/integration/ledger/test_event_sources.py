"""SQLite 이벤트 저장소 통합 테스트"""

from datetime import timedelta
from decimal import Decimal
from pathlib import Path

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IEventSource
from core.ledger.errors import SourceUnavailable
from core.storage import CarrierEventSource, ManufacturingEventSource, get_event_source
from core.types import AccountKind, ChargeKind
from core.utils.timezone import business_today


@pytest.fixture
def window_start():
    return business_today() - timedelta(days=30)


class TestGetEventSource:
    def test_kinds(self, seeded_db: SQLiteAdapter) -> None:
        assert isinstance(get_event_source(AccountKind.CARRIER, seeded_db), CarrierEventSource)
        assert isinstance(
            get_event_source(AccountKind.MANUFACTURING, seeded_db),
            ManufacturingEventSource,
        )

    def test_protocol(self, seeded_db: SQLiteAdapter) -> None:
        assert isinstance(CarrierEventSource(seeded_db), IEventSource)
        assert isinstance(ManufacturingEventSource(seeded_db), IEventSource)


class TestCarrierEventSource:
    """CarrierEventSource 테스트"""

    @pytest.mark.asyncio
    async def test_get_account(self, seeded_db: SQLiteAdapter) -> None:
        source = CarrierEventSource(seeded_db)

        account = await source.get_account(1)

        assert account.name == "Transportes Norte"
        assert account.kind == AccountKind.CARRIER
        assert await source.get_account(999) is None

    @pytest.mark.asyncio
    async def test_list_charges(self, seeded_db: SQLiteAdapter, window_start) -> None:
        """구간 차변: delivery 작업만, 날짜/ID 순, 형식 오류 제외"""
        source = CarrierEventSource(seeded_db)

        charges = await source.list_charges(1, window_start)

        assert [c.source_id for c in charges] == [3, 4, 5, 6]
        assert [c.kind for c in charges] == [
            ChargeKind.SUPPLIER_PICKUP,
            ChargeKind.STORE_MOVEMENT,
            ChargeKind.DELIVERY,
            ChargeKind.DELIVERY,
        ]
        assert charges[0].supplier_name == "Maderera Sur"
        assert charges[1].date == window_start + timedelta(days=4)
        assert charges[2].amount is None
        assert charges[3].delivery_id is None
        assert source.dropped_events == ["delivery_operation:7"]

    @pytest.mark.asyncio
    async def test_list_payments(self, seeded_db: SQLiteAdapter, window_start) -> None:
        """window_start 당일 포함, 금액 형식 오류 제외"""
        source = CarrierEventSource(seeded_db)

        payments = await source.list_payments(1, window_start)

        assert [p.source_id for p in payments] == [2]
        assert payments[0].date == window_start
        assert payments[0].amount == Decimal("100")
        assert payments[0].notes == "marzo"
        assert source.dropped_events == ["carrier_payment:3"]

    @pytest.mark.asyncio
    async def test_aggregates(self, seeded_db: SQLiteAdapter, window_start) -> None:
        """구간 이전 합계 (센트 단위 합산)"""
        source = CarrierEventSource(seeded_db)

        assert await source.aggregate_charge_sum(1, window_start) == Decimal("1000.30")
        assert await source.aggregate_payment_sum(1, window_start) == Decimal("300")

    @pytest.mark.asyncio
    async def test_aggregates_empty_account(self, seeded_db: SQLiteAdapter, window_start) -> None:
        source = CarrierEventSource(seeded_db)

        assert await source.aggregate_charge_sum(2, window_start) == Decimal("0")
        assert await source.aggregate_payment_sum(2, window_start) == Decimal("0")

    @pytest.mark.asyncio
    async def test_missing_table(self, tmp_path: Path, window_start) -> None:
        """스키마 없음 → SourceUnavailable"""
        async with SQLiteAdapter(tmp_path / "empty.db") as db:
            source = CarrierEventSource(db)

            with pytest.raises(SourceUnavailable):
                await source.list_charges(1, window_start)


class TestManufacturingEventSource:
    """ManufacturingEventSource 테스트"""

    @pytest.mark.asyncio
    async def test_list_charges(self, seeded_db: SQLiteAdapter, window_start) -> None:
        """완료/지급 주문만, completed_at 기준"""
        source = ManufacturingEventSource(seeded_db)

        charges = await source.list_charges(1, window_start)

        assert [c.source_id for c in charges] == [2, 3]
        assert charges[0].is_custom_order is True
        assert charges[0].notes == "showroom"
        assert charges[1].is_custom_order is False
        assert charges[1].customer_name == "Ana"
        assert charges[1].extras == "tapizado"
        assert charges[1].amount is None
        assert charges[1].subtype == "completed"

    @pytest.mark.asyncio
    async def test_aggregates(self, seeded_db: SQLiteAdapter, window_start) -> None:
        source = ManufacturingEventSource(seeded_db)

        assert await source.aggregate_charge_sum(1, window_start) == Decimal("620.50")
        assert await source.aggregate_payment_sum(1, window_start) == Decimal("200")

    @pytest.mark.asyncio
    async def test_pending_sum(self, seeded_db: SQLiteAdapter) -> None:
        """완료·미지급 주문 합계 (가격 미정 제외, 대기 주문 제외)"""
        source = ManufacturingEventSource(seeded_db)

        assert await source.aggregate_pending_sum(1) == Decimal("420.50")
