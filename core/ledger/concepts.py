"""
원장 행 설명(concept) 생성

계정 종류별 전략 객체. 모든 format 은 순수 함수이며 예외를 던지지 않고
항상 비어 있지 않은 문자열을 반환한다 (참조 필드가 없으면 기본 문구 사용).
"""

from typing import Protocol

from core.constants import ConceptLabels
from core.domain.events import ChargeEvent, PaymentEvent
from core.ledger.types import UnbalancedTransaction
from core.types import AccountKind, ChargeKind


def _clean(value: str | None) -> str | None:
    """공백 문자열은 None 으로 취급"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _with_notes(label: str, notes: str | None) -> str:
    notes = _clean(notes)
    return f"{label} - {notes}" if notes else label


def _with_pending_price(label: str, charge: ChargeEvent) -> str:
    if charge.is_price_pending:
        return f"{label} {ConceptLabels.PENDING_PRICE}"
    return label


class ConceptFormatter(Protocol):
    """concept 생성 전략 인터페이스"""

    def format(self, row: UnbalancedTransaction) -> str:
        ...


class CarrierConceptFormatter:
    """운송업체 원장 concept

    - delivery: "{송장} - {고객}" / 송장 없으면 "Sin factura"
    - supplier_pickup: "Retiro en {공급처}"
    - store_movement: "Movimiento de Mercadería"
    - payment: "Pago - {수단}[ - {메모}]"
    """

    def format(self, row: UnbalancedTransaction) -> str:
        event = row.event
        if isinstance(event, PaymentEvent):
            return self.format_payment(event)
        if isinstance(event, ChargeEvent):
            return _with_pending_price(self.format_charge(event), event)
        return ConceptLabels.NO_REFERENCE

    def format_charge(self, charge: ChargeEvent) -> str:
        if charge.kind == ChargeKind.STORE_MOVEMENT:
            return ConceptLabels.STORE_MOVEMENT

        if charge.kind == ChargeKind.SUPPLIER_PICKUP:
            supplier = _clean(charge.supplier_name) or ConceptLabels.NO_SUPPLIER
            return f"{ConceptLabels.PICKUP_PREFIX} {supplier}"

        if charge.kind == ChargeKind.DELIVERY:
            # 배송 행 자체가 연결되지 않은 작업
            if charge.delivery_id is None:
                return ConceptLabels.NO_REFERENCE
            invoice = _clean(charge.invoice_number)
            if invoice is None:
                return ConceptLabels.NO_INVOICE
            customer = _clean(charge.customer_name) or ConceptLabels.NO_CUSTOMER
            return f"{invoice} - {customer}"

        return ConceptLabels.NO_REFERENCE

    def format_payment(self, payment: PaymentEvent) -> str:
        method = _clean(payment.method)
        label = f"{ConceptLabels.PAYMENT} - {method}" if method else ConceptLabels.PAYMENT
        return _with_notes(label, payment.notes)


class ManufacturingConceptFormatter:
    """제작 공방 원장 concept

    - order: "{상품}[ + {추가옵션}] - {고객}" 또는 "... - (Pedido personalizado)[ {메모}]"
    - payment: cash/bank_transfer 는 스페인어 표시명으로 변환
    """

    def format(self, row: UnbalancedTransaction) -> str:
        event = row.event
        if isinstance(event, PaymentEvent):
            return self.format_payment(event)
        if isinstance(event, ChargeEvent):
            return _with_pending_price(self.format_charge(event), event)
        return ConceptLabels.NO_REFERENCE

    def format_charge(self, charge: ChargeEvent) -> str:
        label = _clean(charge.product_name) or ConceptLabels.NO_PRODUCT

        extras = _clean(charge.extras)
        if extras:
            label += f" + {extras}"

        customer = _clean(charge.customer_name)
        if charge.is_custom_order or customer is None:
            label += f" - {ConceptLabels.CUSTOM_ORDER}"
            notes = _clean(charge.notes)
            if notes:
                label += f" {notes}"
        else:
            label += f" - {customer}"

        return label

    def format_payment(self, payment: PaymentEvent) -> str:
        method = _clean(payment.method)
        if method:
            method = ConceptLabels.PAYMENT_METHODS.get(method, method)
            label = f"{ConceptLabels.PAYMENT} - {method}"
        else:
            label = ConceptLabels.PAYMENT
        return _with_notes(label, payment.notes)


_FORMATTERS: dict[AccountKind, type] = {
    AccountKind.CARRIER: CarrierConceptFormatter,
    AccountKind.MANUFACTURING: ManufacturingConceptFormatter,
}


def get_concept_formatter(kind: AccountKind) -> ConceptFormatter:
    """계정 종류에 맞는 concept 전략 반환"""
    return _FORMATTERS[kind]()
