from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """現在時刻（UTC）"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """タイムゾーンなしの datetime を UTC とみなして返す"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
