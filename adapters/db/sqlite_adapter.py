"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
원장 조회(읽기 전용)와 스키마 초기화/데이터 적재(쓰기)가 동시에 접근 가능하도록 설정.

주의: SQLite alias로 time, count 사용 금지 (예약어)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부

    Returns:
        aiosqlite 연결 객체
    """
    db_path_str = str(db_path)

    if readonly:
        # 읽기 전용 모드 (WAL 설정은 쓰기 연결에서 이미 영구 적용됨)
        conn = await aiosqlite.connect(f"file:{db_path_str}?mode=ro", uri=True)
    else:
        # 디렉토리가 없으면 생성
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(db_path_str)
        await conn.execute("PRAGMA journal_mode=WAL")

    # 동시 접근 설정
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

    # 외래 키 제약 활성화
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.debug(
        "SQLite 연결 생성",
        extra={"db_path": db_path_str, "readonly": readonly},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    WAL 모드로 SQLite 연결 관리.
    트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (Web 조회용)

    사용 예시:
    ```python
    adapter = SQLiteAdapter(db_path)
    await adapter.connect()

    async with adapter.transaction() as conn:
        await conn.execute("INSERT INTO ...")

    await adapter.close()
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self._conn is not None:
            return

        self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.debug("SQLite 연결 종료")

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        if parameters:
            return await self._conn.execute(sql, parameters)
        return await self._conn.execute(sql)

    async def executemany(
        self,
        sql: str,
        parameters: list[tuple[Any, ...]],
    ) -> aiosqlite.Cursor:
        """SQL 다중 실행"""
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        return await self._conn.executemany(sql, parameters)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchall()

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        """롤백"""
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 예외 시 자동 롤백.
        """
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        try:
            yield self._conn
            await self._conn.commit()
        except Exception:
            await self._conn.rollback()
            raise

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


SCHEMA_STATEMENTS: list[str] = [
    # 운송업체 / 제작 공방 (원장 계정)
    """
    CREATE TABLE IF NOT EXISTS carriers (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        name             TEXT NOT NULL,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS manufacturers (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        name             TEXT NOT NULL,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 배송 참조 정보 (concept 표시용)
    """
    CREATE TABLE IF NOT EXISTS customers (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        name             TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS suppliers (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        name             TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS deliveries (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        type             TEXT NOT NULL DEFAULT 'home_delivery',
        invoice_number   TEXT,
        customer_id      INTEGER REFERENCES customers(id),
        supplier_id      INTEGER REFERENCES suppliers(id),
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 운송업체 차변: 배송 작업 비용 (cost NULL = 미확정)
    """
    CREATE TABLE IF NOT EXISTS delivery_operations (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        carrier_id       INTEGER REFERENCES carriers(id),
        delivery_id      INTEGER REFERENCES deliveries(id),
        operation_type   TEXT NOT NULL DEFAULT 'delivery',
        operation_date   TEXT NOT NULL,
        cost             NUMERIC,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 운송업체 대변
    """
    CREATE TABLE IF NOT EXISTS carrier_payments (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        carrier_id       INTEGER NOT NULL REFERENCES carriers(id),
        payment_date     TEXT NOT NULL,
        amount           NUMERIC NOT NULL,
        payment_method   TEXT NOT NULL,
        notes            TEXT,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 제작 공방 차변: 완료된 제작 주문 (price NULL = 가격 미정)
    """
    CREATE TABLE IF NOT EXISTS manufacturing_orders (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        manufacturer_id  INTEGER NOT NULL REFERENCES manufacturers(id),
        delivery_id      INTEGER REFERENCES deliveries(id),
        product_name     TEXT NOT NULL,
        extras           TEXT,
        notes            TEXT,
        status           TEXT NOT NULL DEFAULT 'pending',
        price            NUMERIC,
        completed_at     TEXT,
        paid_at          TEXT,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 제작 공방 대변
    """
    CREATE TABLE IF NOT EXISTS manufacturing_payments (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        manufacturer_id  INTEGER NOT NULL REFERENCES manufacturers(id),
        payment_date     TEXT NOT NULL,
        amount           NUMERIC NOT NULL,
        payment_method   TEXT NOT NULL,
        notes            TEXT,
        created_at       TEXT NOT NULL DEFAULT (datetime('now'))
    )
    """,
    # 인덱스 (계정 + 날짜 범위 조회/집계)
    """
    CREATE INDEX IF NOT EXISTS ix_delivery_operations_carrier_date
    ON delivery_operations(carrier_id, operation_date)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_carrier_payments_carrier_date
    ON carrier_payments(carrier_id, payment_date)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_manufacturing_orders_manufacturer_date
    ON manufacturing_orders(manufacturer_id, completed_at)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_manufacturing_payments_manufacturer_date
    ON manufacturing_payments(manufacturer_id, payment_date)
    """,
]


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter (쓰기 가능)

    주의: Web 시작 시(lifespan) 및 테스트 fixture에서 호출.
    """
    for statement in SCHEMA_STATEMENTS:
        await adapter.execute(statement)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
