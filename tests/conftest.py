"""
pytest 공통 fixture 정의

- 임시 디렉토리 / 설정 파일
- 원장 이벤트 생성 헬퍼
"""

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from core.domain.events import ChargeEvent, PaymentEvent
from core.types import ChargeKind


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    content = """# 테스트용 settings.yaml
environment: production

db_path: data/test.db

ledger:
  window_days: 45

web:
  host: 0.0.0.0
  port: 9000

log_level: debug
"""
    path = temp_dir / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_charge() -> Callable[..., ChargeEvent]:
    """ChargeEvent 생성 헬퍼 (기본: 고객 배송)"""
    counter = iter(range(1, 10_000))

    def _make(
        day: date,
        amount: str | None = "100",
        kind: ChargeKind = ChargeKind.DELIVERY,
        **kwargs,
    ) -> ChargeEvent:
        kwargs.setdefault("source_id", next(counter))
        return ChargeEvent(
            date=day,
            amount=Decimal(amount) if amount is not None else None,
            kind=kind,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_payment() -> Callable[..., PaymentEvent]:
    """PaymentEvent 생성 헬퍼"""
    counter = iter(range(1, 10_000))

    def _make(
        day: date,
        amount: str = "100",
        method: str | None = "cash",
        **kwargs,
    ) -> PaymentEvent:
        kwargs.setdefault("source_id", next(counter))
        return PaymentEvent(
            date=day,
            amount=Decimal(amount),
            method=method,
            **kwargs,
        )

    return _make
