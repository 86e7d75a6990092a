"""
기초 잔액 계산

구간 시작일 이전의 누적 잔액을 저장소 집계 쿼리로 계산.
과거 이력은 무한히 늘어나므로 행을 조회해서 더하지 않는다.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from core.utils.tasks import gather_or_cancel

if TYPE_CHECKING:
    from adapters.interfaces import IEventSource

logger = logging.getLogger(__name__)


async def compute_opening_balance(
    source: IEventSource,
    account_id: int,
    window_start: date,
) -> Decimal:
    """기초 잔액 = (window_start 이전 차변 합계) - (window_start 이전 대변 합계)

    두 집계는 동시에 실행되며, 하나라도 실패하면 나머지를 취소하고
    SourceUnavailable 을 전파한다 (한쪽만 반영된 값은 반환하지 않음).

    Args:
        source: 이벤트 저장소
        account_id: 계정 ID
        window_start: 구간 시작일 (이 날짜는 구간에 포함, 기초 잔액에서 제외)

    Returns:
        기초 잔액
    """
    charge_sum, payment_sum = await gather_or_cancel(
        source.aggregate_charge_sum(account_id, window_start),
        source.aggregate_payment_sum(account_id, window_start),
    )

    opening = charge_sum - payment_sum
    logger.debug(
        f"기초 잔액 계산: account={account_id}, before={window_start}, "
        f"charges={charge_sum}, payments={payment_sum}, opening={opening}"
    )
    return opening
