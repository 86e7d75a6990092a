"""
유틸리티 모듈

날짜/타임존, 비동기 태스크 헬퍼
"""

from core.utils.tasks import gather_or_cancel
from core.utils.timezone import ART, business_today, to_art, window_start

__all__ = [
    "ART",
    "business_today",
    "gather_or_cancel",
    "to_art",
    "window_start",
]
