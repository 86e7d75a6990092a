"""
운송업체 이벤트 저장소

- 차변: delivery_operations (operation_type = 'delivery') 의 cost
- 대변: carrier_payments 의 amount
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
from core.types import AccountKind, ChargeKind

# 원장에 반영되는 작업 유형 (그 외 작업은 재고 기록용)
LEDGER_OPERATION_TYPE = "delivery"

# deliveries.type → 차변 종류 (그 외 값은 모두 고객 배송)
_DELIVERY_TYPE_TO_KIND: dict[str, ChargeKind] = {
    "supplier_pickup": ChargeKind.SUPPLIER_PICKUP,
    "store_movement": ChargeKind.STORE_MOVEMENT,
}


class CarrierEventSource(SQLiteEventSource):
    """운송업체 원장 이벤트 저장소"""

    async def get_account(self, account_id: int) -> Account | None:
        row = await self._fetchone(
            "carrier",
            "SELECT id, name FROM carriers WHERE id = ?",
            (account_id,),
        )
        if row is None:
            return None
        return Account(account_id=row[0], name=row[1], kind=AccountKind.CARRIER)

    async def list_charges(self, account_id: int, since: date) -> list[ChargeEvent]:
        rows = await self._fetchall(
            "carrier_charges",
            f"""
            SELECT
                o.id,
                o.operation_date,
                o.cost,
                {money_cents_sql("o.cost")},
                d.id,
                d.type,
                d.invoice_number,
                c.name,
                s.name
            FROM delivery_operations o
            LEFT JOIN deliveries d ON d.id = o.delivery_id
            LEFT JOIN customers c ON c.id = d.customer_id
            LEFT JOIN suppliers s ON s.id = d.supplier_id
            WHERE o.carrier_id = ?
              AND o.operation_type = ?
              AND {window_date_sql("o.operation_date")}
            ORDER BY o.operation_date, o.id
            """,
            (account_id, LEDGER_OPERATION_TYPE, since.isoformat()),
        )
        return self._parse_rows("delivery_operation", rows, _parse_charge)

    async def list_payments(self, account_id: int, since: date) -> list[PaymentEvent]:
        rows = await self._fetchall(
            "carrier_payments",
            f"""
            SELECT id, payment_date, amount, {money_cents_sql("amount")}, payment_method, notes
            FROM carrier_payments
            WHERE carrier_id = ? AND {window_date_sql("payment_date")}
            ORDER BY payment_date, id
            """,
            (account_id, since.isoformat()),
        )
        return self._parse_rows("carrier_payment", rows, _parse_payment)

    async def aggregate_charge_sum(self, account_id: int, before: date) -> Decimal:
        return await self._fetch_money_sum(
            "carrier_charge_sum",
            f"""
            SELECT {money_sum_sql("cost")}
            FROM delivery_operations
            WHERE carrier_id = ?
              AND operation_type = ?
              AND {valid_date_sql("operation_date")}
              AND operation_date < ?
            """,
            (account_id, LEDGER_OPERATION_TYPE, before.isoformat()),
        )

    async def aggregate_payment_sum(self, account_id: int, before: date) -> Decimal:
        return await self._fetch_money_sum(
            "carrier_payment_sum",
            f"""
            SELECT {money_sum_sql("amount")}
            FROM carrier_payments
            WHERE carrier_id = ?
              AND {valid_date_sql("payment_date")}
              AND payment_date < ?
            """,
            (account_id, before.isoformat()),
        )


def _parse_charge(row: tuple[Any, ...]) -> ChargeEvent:
    (
        op_id,
        op_date,
        cost,
        cost_cents,
        delivery_id,
        delivery_type,
        invoice,
        customer,
        supplier,
    ) = row
    return ChargeEvent(
        source_id=op_id,
        date=parse_date(op_date, op_id),
        amount=parse_money(cost, op_id, nullable=True, cents=cost_cents),
        kind=_DELIVERY_TYPE_TO_KIND.get(delivery_type or "", ChargeKind.DELIVERY),
        subtype=delivery_type,
        delivery_id=delivery_id,
        invoice_number=invoice,
        customer_name=customer,
        supplier_name=supplier,
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
