# currentlog/batching.py
from __future__ import annotations
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Any, Iterable, List, Optional, Sequence

DEFAULT_THRESHOLD = 400.0


@dataclass(frozen=True)
class Sample:
    sample: int
    value: float


@dataclass(frozen=True)
class Reading:
    """저장 전 한 행. 한 배치의 모든 Reading은 같은 identifier를 공유."""
    sample: int
    value: float
    timestamp: datetime
    identifier: str
    indicator_id: Optional[int] = None


@dataclass(frozen=True)
class BatchSummary:
    identifier: str
    timestamp: datetime


def capture_instant(tz: tzinfo) -> datetime:
    return datetime.now(tz)


def new_batch_id() -> str:
    return str(uuid.uuid4())


def synthesize(
    samples: Sequence[Sample],
    now: datetime,
    indicator_id: Optional[int] = None,
    batch_id: Optional[str] = None,
) -> List[Reading]:
    """
    samples[k] → now - (N-1-k)초.
    마지막 샘플이 now, 앞쪽은 1초씩 과거로. 빈 입력이면 id도 만들지 않음.
    """
    n = len(samples)
    if n == 0:
        return []
    ident = batch_id or new_batch_id()
    return [
        Reading(
            sample=s.sample,
            value=s.value,
            timestamp=now - timedelta(seconds=n - 1 - k),
            identifier=ident,
            indicator_id=indicator_id,
        )
        for k, s in enumerate(samples)
    ]


def passes_threshold(samples: Iterable[Sample], threshold: float = DEFAULT_THRESHOLD) -> bool:
    # 하나라도 넘으면 배치 전체 통과 (걸러내지 않음)
    return any(s.value >= threshold for s in samples)


def _field(row: Any, name: str):
    if isinstance(row, dict):
        return row[name]
    return getattr(row, name)


def earliest_per_batch(rows: Iterable[Any]) -> List[BatchSummary]:
    """identifier 별로 묶고 최소 timestamp만 남김. 최신 배치가 앞."""
    earliest: dict = {}
    for r in rows:
        ident = _field(r, "identifier")
        ts = _field(r, "timestamp")
        cur = earliest.get(ident)
        if cur is None or ts < cur:
            earliest[ident] = ts
    out = [BatchSummary(identifier=k, timestamp=v) for k, v in earliest.items()]
    out.sort(key=lambda b: (b.timestamp, b.identifier), reverse=True)
    return out


__all__ = [
    "Sample", "Reading", "BatchSummary", "DEFAULT_THRESHOLD",
    "capture_instant", "new_batch_id", "synthesize", "passes_threshold", "earliest_per_batch",
]
