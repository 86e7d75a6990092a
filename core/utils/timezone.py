"""
타임존 유틸리티

저장소 날짜는 영업지(아르헨티나, UTC-3) 기준 달력 날짜로 해석.
원장 구간 시작일 계산 시 서버 로컬 시간이 아닌 영업지 날짜를 사용한다.
"""

from datetime import date, datetime, timedelta, timezone

# ART 타임존 (UTC-3, 서머타임 없음)
ART = timezone(timedelta(hours=-3))


def to_art(dt: datetime) -> datetime:
    """datetime을 ART로 변환

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        ART 타임존의 datetime

    Example:
        >>> utc_dt = datetime(2026, 2, 20, 1, 0, 0, tzinfo=timezone.utc)
        >>> to_art(utc_dt).day
        19  # 전날 22:00
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(ART)


def business_today(now: datetime | None = None) -> date:
    """영업지 기준 오늘 날짜

    Args:
        now: 기준 시각 (None이면 현재 UTC)

    Returns:
        ART 기준 date
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return to_art(now).date()


def window_start(today: date, window_days: int) -> date:
    """원장 상세 구간 시작일 (today - window_days)

    Raises:
        ValueError: window_days가 음수인 경우
    """
    if window_days < 0:
        raise ValueError(f"window_days는 0 이상이어야 합니다: {window_days}")
    return today - timedelta(days=window_days)
