from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from dateutil import parser as dtparser
from django.conf import settings

from .exceptions import InvalidInput
from .serializers import INT_MAX, INT_MIN


def local_tz() -> ZoneInfo:
    return ZoneInfo(getattr(settings, "SENSORLOG_TIME_ZONE", "Asia/Jakarta"))


def iso_local(dt: Optional[datetime]) -> Optional[str]:
    """aware datetime → 서비스 고정 타임존 ISO8601 (+07:00 등 오프셋 포함)"""
    if dt is None:
        return None
    return dt.astimezone(local_tz()).isoformat()


def parse_ts(s: str) -> datetime:
    # "....Z" / 오프셋 없는 값은 UTC로 간주
    dt = dtparser.isoparse(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_id(raw, name: str = "indicator_id") -> int:
    try:
        value = int(str(raw))
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be an integer")
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidInput(f"{name} out of range")
    return value


def serialize_reading_row(r) -> Dict[str, Any]:
    """query() 결과 dict 또는 모델 인스턴스 → 응답 dict"""
    get = r.get if isinstance(r, dict) else (lambda k: getattr(r, k, None))
    return {
        "id": get("id"),
        "sample": get("sample"),
        "I": get("i"),
        "timestamp": iso_local(get("timestamp")),
        "identifier": get("identifier"),
        "indicator_id": get("indicator_id"),
    }


def serialize_batch(b) -> Dict[str, Any]:
    return {"id": b.identifier, "timestamp": iso_local(b.timestamp)}


def serialize_indicator(ind) -> Dict[str, Any]:
    return {
        "indicator_id": ind.indicator_id,
        "value": ind.value,
        "motor": ind.motor or None,
        "updated_at": iso_local(ind.updated_at),
    }


__all__ = [
    "local_tz", "iso_local", "parse_ts", "parse_id",
    "serialize_reading_row", "serialize_batch", "serialize_indicator",
]
