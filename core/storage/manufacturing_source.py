"""
제작 공방 이벤트 저장소

- 차변: manufacturing_orders (status = completed / paid) 의 price, 기준일 completed_at
- 대변: manufacturing_payments 의 amount
"""

from datetime import date
from decimal import Decimal
from typing import Any

from core.domain.events import Account, ChargeEvent, PaymentEvent
from core.storage.base import (
    SQLiteEventSource,
    money_cents_sql,
    money_sum_sql,
    parse_date,
    parse_money,
    valid_date_sql,
    window_date_sql,
)
from core.types import AccountKind, ChargeKind, ManufacturingStatus

# 원장에 반영되는 주문 상태 (완료 이후)
LEDGER_STATUSES: tuple[str, str] = (
    ManufacturingStatus.COMPLETED.value,
    ManufacturingStatus.PAID.value,
)


class ManufacturingEventSource(SQLiteEventSource):
    """제작 공방 원장 이벤트 저장소"""

    async def get_account(self, account_id: int) -> Account | None:
        row = await self._fetchone(
            "manufacturer",
            "SELECT id, name FROM manufacturers WHERE id = ?",
            (account_id,),
        )
        if row is None:
            return None
        return Account(account_id=row[0], name=row[1], kind=AccountKind.MANUFACTURING)

    async def list_charges(self, account_id: int, since: date) -> list[ChargeEvent]:
        rows = await self._fetchall(
            "manufacturing_charges",
            f"""
            SELECT
                o.id,
                o.completed_at,
                o.price,
                {money_cents_sql("o.price")},
                o.status,
                o.product_name,
                o.extras,
                o.notes,
                d.id,
                d.invoice_number,
                c.name
            FROM manufacturing_orders o
            LEFT JOIN deliveries d ON d.id = o.delivery_id
            LEFT JOIN customers c ON c.id = d.customer_id
            WHERE o.manufacturer_id = ?
              AND o.status IN (?, ?)
              AND {window_date_sql("o.completed_at")}
            ORDER BY o.completed_at, o.id
            """,
            (account_id, *LEDGER_STATUSES, since.isoformat()),
        )
        return self._parse_rows("manufacturing_order", rows, _parse_charge)

    async def list_payments(self, account_id: int, since: date) -> list[PaymentEvent]:
        rows = await self._fetchall(
            "manufacturing_payments",
            f"""
            SELECT id, payment_date, amount, {money_cents_sql("amount")}, payment_method, notes
            FROM manufacturing_payments
            WHERE manufacturer_id = ? AND {window_date_sql("payment_date")}
            ORDER BY payment_date, id
            """,
            (account_id, since.isoformat()),
        )
        return self._parse_rows("manufacturing_payment", rows, _parse_payment)

    async def aggregate_charge_sum(self, account_id: int, before: date) -> Decimal:
        return await self._fetch_money_sum(
            "manufacturing_charge_sum",
            f"""
            SELECT {money_sum_sql("price")}
            FROM manufacturing_orders
            WHERE manufacturer_id = ?
              AND status IN (?, ?)
              AND {valid_date_sql("completed_at")}
              AND completed_at < ?
            """,
            (account_id, *LEDGER_STATUSES, before.isoformat()),
        )

    async def aggregate_payment_sum(self, account_id: int, before: date) -> Decimal:
        return await self._fetch_money_sum(
            "manufacturing_payment_sum",
            f"""
            SELECT {money_sum_sql("amount")}
            FROM manufacturing_payments
            WHERE manufacturer_id = ?
              AND {valid_date_sql("payment_date")}
              AND payment_date < ?
            """,
            (account_id, before.isoformat()),
        )

    async def aggregate_pending_sum(self, account_id: int) -> Decimal:
        """완료되었지만 아직 지급되지 않은 주문 금액 합계 (전체 기간)

        완료일이 없거나 잘못된 주문은 원장과 같이 제외.
        """
        return await self._fetch_money_sum(
            "manufacturing_pending_sum",
            f"""
            SELECT {money_sum_sql("price")}
            FROM manufacturing_orders
            WHERE manufacturer_id = ?
              AND status = ?
              AND {valid_date_sql("completed_at")}
            """,
            (account_id, ManufacturingStatus.COMPLETED.value),
        )


def _parse_charge(row: tuple[Any, ...]) -> ChargeEvent:
    (
        order_id,
        completed_at,
        price,
        price_cents,
        status,
        product_name,
        extras,
        notes,
        delivery_id,
        invoice,
        customer,
    ) = row
    return ChargeEvent(
        source_id=order_id,
        date=parse_date(completed_at, order_id),
        amount=parse_money(price, order_id, nullable=True, cents=price_cents),
        kind=ChargeKind.MANUFACTURING_ORDER,
        subtype=status,
        delivery_id=delivery_id,
        invoice_number=invoice,
        customer_name=customer,
        product_name=product_name,
        extras=extras,
        notes=notes,
        is_custom_order=delivery_id is None,
    )


def _parse_payment(row: tuple[Any, ...]) -> PaymentEvent:
    payment_id, payment_date, amount, amount_cents, method, notes = row
    return PaymentEvent(
        source_id=payment_id,
        date=parse_date(payment_date, payment_id),
        amount=parse_money(amount, payment_id, cents=amount_cents),
        method=method,
        notes=notes,
    )
