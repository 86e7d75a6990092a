"""
SQLite 이벤트 저장소 공통 기능

- 저장소 오류 → SourceUnavailable 변환
- 행 파싱 (날짜/금액), 형식 오류 행 제외 및 1회 로그
- 금액 집계 (센트 단위 정수 합산 후 Decimal 변환)

금액은 소수점 2자리(센타보) 계약. 구간 행과 집계 모두 같은 센트 반올림 식을
사용하므로, 행이 구간 밖으로 밀려나도 금액이 바뀌지 않는다.
"""

import logging
import sqlite3
from collections.abc import Callable, Iterable
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, TypeVar

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.errors import MalformedEvent, SourceUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 금액 정밀도 (센타보 단위, 소수점 2자리)
MONEY_SCALE = 2
MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_SCALE)


def money_cents_sql(column: str) -> str:
    """금액 → 센트 정수 SQL 식"""
    return f"CAST(ROUND({column} * 100) AS INTEGER)"


def money_sum_sql(column: str) -> str:
    """금액 합계 SQL 식

    SQLite NUMERIC 합계는 float 이므로 센트 정수로 반올림해서 합산.
    NULL 및 음수는 제외 (원장 행에서도 제외되는 값).
    """
    return f"COALESCE(SUM(CASE WHEN {column} >= 0 THEN {money_cents_sql(column)} END), 0)"


def valid_date_sql(column: str) -> str:
    """날짜 형식이 올바른 행 조건 (집계용)

    앞 10자리가 실제 달력 날짜(YYYY-MM-DD)인 경우만 참. NULL, 빈 문자열 및
    2024-02-30 같은 값은 거짓 또는 NULL.
    """
    return f"date(substr({column}, 1, 10)) = substr({column}, 1, 10)"


def window_date_sql(column: str) -> str:
    """구간 조회 조건 (파라미터 1개: since)

    날짜가 없거나 형식이 잘못된 행도 함께 조회해서 형식 오류로 보고한다.
    이런 행은 집계(valid_date_sql)에서도 제외된다.
    """
    return f"({column} >= ? OR NOT COALESCE({valid_date_sql(column)}, 0))"


def cents_to_decimal(cents: Any) -> Decimal:
    """센트 정수 → Decimal"""
    return Decimal(int(cents or 0)).scaleb(-MONEY_SCALE)


def parse_date(value: Any, source_id: Any) -> date:
    """저장소 날짜 값 → date

    'YYYY-MM-DD' 또는 ISO 8601 datetime 문자열의 날짜 부분을 사용.
    저장소 범위 조건(문자열 비교)과 같은 기준.

    Raises:
        MalformedEvent: 값이 없거나 해석할 수 없는 경우
    """
    if value is None or value == "":
        raise MalformedEvent(source_id, "날짜 없음")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise MalformedEvent(source_id, f"날짜 형식 오류: {value!r}") from e


def parse_money(
    value: Any,
    source_id: Any,
    nullable: bool = False,
    cents: Any = None,
) -> Decimal | None:
    """저장소 금액 값 → Decimal (소수점 2자리)

    Args:
        value: DB 값 (int / float / str / None)
        source_id: 원본 행 ID (오류 메시지용)
        nullable: None 허용 여부 (차변 미확정 금액)
        cents: 같은 행의 money_cents_sql 값. 있으면 집계와 동일한 센트 값 사용,
            없으면 ROUND_HALF_UP 으로 소수점 2자리 반올림

    Raises:
        MalformedEvent: 금액이 없거나(nullable=False), 해석 불가, 음수인 경우
    """
    if value is None:
        if nullable:
            return None
        raise MalformedEvent(source_id, "금액 없음")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise MalformedEvent(source_id, f"금액 형식 오류: {value!r}") from e
    if not amount.is_finite():
        raise MalformedEvent(source_id, f"금액 형식 오류: {value!r}")
    if amount < 0:
        raise MalformedEvent(source_id, f"음수 금액: {amount}")
    if cents is not None:
        return cents_to_decimal(cents)
    try:
        return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise MalformedEvent(source_id, f"금액 범위 초과: {value!r}") from e


class SQLiteEventSource:
    """SQLite 기반 이벤트 저장소 공통 클래스

    형식 오류로 제외한 행 ID를 dropped_events 에 누적 (호출자가 호출 전후 길이로 구분).

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.dropped_events: list[str] = []

    async def _fetchall(
        self,
        operation: str,
        sql: str,
        parameters: tuple[Any, ...],
    ) -> list[tuple[Any, ...]]:
        try:
            return await self.db.fetchall(sql, parameters)
        except (sqlite3.Error, RuntimeError) as e:
            raise SourceUnavailable(operation, str(e)) from e

    async def _fetchone(
        self,
        operation: str,
        sql: str,
        parameters: tuple[Any, ...],
    ) -> tuple[Any, ...] | None:
        try:
            return await self.db.fetchone(sql, parameters)
        except (sqlite3.Error, RuntimeError) as e:
            raise SourceUnavailable(operation, str(e)) from e

    async def _fetch_money_sum(
        self,
        operation: str,
        sql: str,
        parameters: tuple[Any, ...],
    ) -> Decimal:
        row = await self._fetchone(operation, sql, parameters)
        return cents_to_decimal(row[0] if row else 0)

    def _parse_rows(
        self,
        label: str,
        rows: Iterable[tuple[Any, ...]],
        parser: Callable[[tuple[Any, ...]], T],
    ) -> list[T]:
        """행 목록 파싱 (형식 오류 행은 제외)

        제외된 행은 조회 1회당 WARNING 1건으로 모아서 기록.
        """
        events: list[T] = []
        errors: list[MalformedEvent] = []

        for row in rows:
            try:
                events.append(parser(row))
            except MalformedEvent as e:
                errors.append(e)

        if errors:
            dropped = [f"{label}:{e.source_id}" for e in errors]
            self.dropped_events.extend(dropped)
            logger.warning(
                f"형식 오류 {label} {len(errors)}건 제외: "
                + ", ".join(f"{e.source_id} ({e.reason})" for e in errors)
            )

        return events
