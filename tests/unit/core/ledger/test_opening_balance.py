"""기초 잔액 계산 테스트"""

import asyncio
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.ledger.errors import SourceUnavailable
from core.ledger.opening_balance import compute_opening_balance


START = date(2024, 1, 1)


def make_source(charge_sum, payment_sum) -> MagicMock:
    source = MagicMock()
    source.aggregate_charge_sum = AsyncMock(side_effect=charge_sum)
    source.aggregate_payment_sum = AsyncMock(side_effect=payment_sum)
    return source


class TestComputeOpeningBalance:
    """compute_opening_balance() 테스트"""

    @pytest.mark.asyncio
    async def test_difference_of_aggregates(self) -> None:
        """기초 잔액 = 차변 합계 - 대변 합계"""
        source = make_source([Decimal("1500")], [Decimal("500")])

        result = await compute_opening_balance(source, 1, START)

        assert result == Decimal("1000")
        source.aggregate_charge_sum.assert_awaited_once_with(1, START)
        source.aggregate_payment_sum.assert_awaited_once_with(1, START)

    @pytest.mark.asyncio
    async def test_no_history_is_zero(self) -> None:
        """이력 없음 → 0"""
        source = make_source([Decimal("0")], [Decimal("0")])

        assert await compute_opening_balance(source, 1, START) == Decimal("0")

    @pytest.mark.asyncio
    async def test_overpaid_is_negative(self) -> None:
        """선지급 → 음수 잔액"""
        source = make_source([Decimal("100")], [Decimal("250.75")])

        assert await compute_opening_balance(source, 1, START) == Decimal("-150.75")

    @pytest.mark.asyncio
    async def test_failure_propagates(self) -> None:
        """한쪽 집계 실패 → SourceUnavailable (부분 값 없음)"""
        source = make_source(
            [Decimal("100")],
            SourceUnavailable("aggregate_payment_sum", "database is locked"),
        )

        with pytest.raises(SourceUnavailable):
            await compute_opening_balance(source, 1, START)

    @pytest.mark.asyncio
    async def test_failure_cancels_sibling(self) -> None:
        """실패 시 진행 중인 다른 집계 취소"""
        cancelled = asyncio.Event()

        async def slow_sum(account_id, before):
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return Decimal("0")

        source = MagicMock()
        source.aggregate_charge_sum = slow_sum
        source.aggregate_payment_sum = AsyncMock(
            side_effect=SourceUnavailable("aggregate_payment_sum")
        )

        with pytest.raises(SourceUnavailable):
            await compute_opening_balance(source, 1, START)

        assert cancelled.is_set()
