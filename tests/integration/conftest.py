"""
통합 테스트 공통 fixture

임시 SQLite DB에 스키마를 만들고 운송업체 / 제작 공방 원장 데이터를 적재.
날짜는 기준일(today)로부터의 상대 일수로 기록한다.

기준 데이터 (window_days=30):
- 운송업체 1: 기초 잔액 700.30, 최종 잔액 1000.30, 형식 오류 2건
- 운송업체 2: 이력 없음
- 제작 공방 1: 기초 잔액 420.50, 최종 잔액 620.50, 미지급 합계 420.50
"""

from datetime import date, timedelta
from pathlib import Path

import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.utils.timezone import business_today


async def seed_ledger_data(db: SQLiteAdapter, today: date) -> None:
    """원장 테스트 데이터 적재"""

    def d(days_ago: int) -> str:
        return (today - timedelta(days=days_ago)).isoformat()

    await db.executemany(
        "INSERT INTO carriers (id, name) VALUES (?, ?)",
        [(1, "Transportes Norte"), (2, "Fletes Vacíos")],
    )
    await db.execute("INSERT INTO manufacturers (id, name) VALUES (1, 'Taller Sur')")
    await db.execute("INSERT INTO customers (id, name) VALUES (1, 'Ana')")
    await db.execute("INSERT INTO suppliers (id, name) VALUES (1, 'Maderera Sur')")
    await db.executemany(
        "INSERT INTO deliveries (id, type, invoice_number, customer_id, supplier_id) "
        "VALUES (?, ?, ?, ?, ?)",
        [
            (1, "home_delivery", "F-001", 1, None),
            (2, "supplier_pickup", None, None, 1),
            (3, "store_movement", None, None, None),
            (4, "home_delivery", None, 1, None),
        ],
    )

    await db.executemany(
        "INSERT INTO delivery_operations "
        "(id, carrier_id, delivery_id, operation_type, operation_date, cost) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, 1, 1, "delivery", d(50), 1000),
            (2, 1, 1, "pickup", d(26), 999),
            (3, 1, 2, "delivery", d(26), 200),
            (4, 1, 3, "delivery", d(26) + "T10:00:00", 150),
            (5, 1, 4, "delivery", d(21), None),
            (6, 1, None, "delivery", d(19), 50),
            (7, 1, 1, "delivery", d(16), -20),
            (8, 1, 1, "delivery", d(40), 0.1),
            (9, 1, 1, "delivery", d(39), 0.2),
        ],
    )
    await db.executemany(
        "INSERT INTO carrier_payments "
        "(id, carrier_id, payment_date, amount, payment_method, notes) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, 1, d(45), 300, "cash", None),
            (2, 1, d(30), 100, "transferencia", "marzo"),
            (3, 1, d(11), "abc", "cash", None),
        ],
    )

    await db.executemany(
        "INSERT INTO manufacturing_orders "
        "(id, manufacturer_id, delivery_id, product_name, extras, notes, status, price, completed_at) "
        "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
        [
            (1, 1, 1, "Mesa", None, None, "paid", 500, d(60)),
            (2, 1, None, "Estante", None, "showroom", "completed", 300, d(28)),
            (3, 1, 1, "Silla", "tapizado", None, "completed", None, d(27)),
            (4, 1, 1, "Banco", None, None, "pending", 80, None),
            (5, 1, 1, "Mesa", None, None, "completed", 120.50, d(75)),
        ],
    )
    await db.executemany(
        "INSERT INTO manufacturing_payments "
        "(id, manufacturer_id, payment_date, amount, payment_method, notes) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, 1, d(50), 200, "cash", None),
            (2, 1, d(21), 100, "bank_transfer", None),
        ],
    )
    await db.commit()


@pytest_asyncio.fixture
async def db_path(tmp_path: Path) -> Path:
    """스키마 + 기준 데이터가 적재된 DB 파일 (기준일: 영업지 오늘)"""
    path = tmp_path / "ledger.db"
    async with SQLiteAdapter(path) as db:
        await init_schema(db)
        await seed_ledger_data(db, business_today())
    return path


@pytest_asyncio.fixture
async def seeded_db(db_path: Path) -> SQLiteAdapter:
    """기준 데이터 DB 읽기 전용 연결"""
    async with SQLiteAdapter(db_path, readonly=True) as db:
        yield db
