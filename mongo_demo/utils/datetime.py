"""
DateTime Utility Module
UTC 타임존 처리를 위한 유틸리티 함수들

MongoDB 는 datetime 을 UTC 로 저장하지만 기본 설정의 pymongo 는 naive datetime 을
돌려주므로, 화면 출력 전에 ensure_utc 로 타임존을 붙입니다.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """
    UTC 타임존이 포함된 현재 시간을 반환

    Example:
        >>> now = utc_now()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    datetime을 UTC 타임존으로 변환
    naive datetime인 경우 UTC로 간주하여 타임존 추가

    Example:
        >>> naive_dt = datetime(2025, 1, 1, 12, 0, 0)
        >>> ensure_utc(naive_dt).tzinfo == timezone.utc
        True
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        logger.debug(f"Converting {dt.tzinfo} to UTC: {dt}")
        return dt.astimezone(timezone.utc)
    return dt


def to_display_string(dt: Optional[datetime]) -> str:
    """화면 표시용 'YYYY-MM-DD HH:MM UTC' 문자열 (None 이면 빈 문자열)"""
    if dt is None:
        return ""
    return ensure_utc(dt).strftime("%Y-%m-%d %H:%M UTC")


__all__ = [
    'utc_now',
    'ensure_utc',
    'to_display_string',
]
