"""
스토리지 모듈

계정 종류별 원장 이벤트 저장소 (SQLite 구현) 제공
"""

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.base import SQLiteEventSource
from core.storage.carrier_source import CarrierEventSource
from core.storage.manufacturing_source import ManufacturingEventSource
from core.types import AccountKind

_SOURCES: dict[AccountKind, type[SQLiteEventSource]] = {
    AccountKind.CARRIER: CarrierEventSource,
    AccountKind.MANUFACTURING: ManufacturingEventSource,
}


def get_event_source(kind: AccountKind, db: SQLiteAdapter) -> SQLiteEventSource:
    """계정 종류에 맞는 이벤트 저장소 생성 (요청마다 새 인스턴스)"""
    return _SOURCES[kind](db)


__all__ = [
    "SQLiteEventSource",
    "CarrierEventSource",
    "ManufacturingEventSource",
    "get_event_source",
]
