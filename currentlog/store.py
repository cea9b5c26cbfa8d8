from __future__ import annotations
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from django.conf import settings
from django.db import DatabaseError, transaction

from .batching import BatchSummary, Reading, earliest_per_batch
from .exceptions import StoreFailure
from .models import Indicator
from .partitions import Partition, model_for

logger = logging.getLogger(__name__)

ROW_FIELDS = ("id", "sample", "i", "timestamp", "identifier", "indicator_id")


def _threshold() -> float:
    return float(getattr(settings, "SENSORLOG_THRESHOLD", 400))


def _row_limit() -> int:
    return int(getattr(settings, "SENSORLOG_ROW_LIMIT", 100))


class LogStore:
    """
    DB 접근 창구. 앱 시작 시(CurrentLogConfig.ready) 한 번 만들어 뷰에 주입.
    모든 DatabaseError 는 StoreFailure 로 바뀜.
    """

    def __init__(self, using: str = "default"):
        self.using = using

    @contextmanager
    def _guard(self, op: str):
        try:
            yield
        except DatabaseError as e:
            logger.exception("[store] %s failed (db=%s)", op, self.using)
            raise StoreFailure() from e

    # ---- log tables ----
    def bulk_insert(self, partition: Partition, readings: Sequence[Reading]) -> int:
        if not readings:
            return 0
        model = model_for(partition)
        objs = [
            model(
                sample=r.sample,
                i=r.value,
                timestamp=r.timestamp,
                identifier=r.identifier,
                indicator_id=r.indicator_id,
            )
            for r in readings
        ]
        with self._guard(f"bulk_insert({partition.value})"):
            # 전부 아니면 전무
            with transaction.atomic(using=self.using):
                model.objects.using(self.using).bulk_create(objs)
        logger.info("[store] %s +%d rows identifier=%s", partition.value, len(objs), readings[0].identifier)
        return len(objs)

    def _queryset(
        self,
        partition: Partition,
        identifier: Optional[str] = None,
        indicator_id: Optional[int] = None,
        since: Optional[datetime] = None,
        above: bool = False,
    ):
        qs = model_for(partition).objects.using(self.using).all()
        if identifier is not None:
            qs = qs.filter(identifier=identifier)
        if indicator_id is not None:
            qs = qs.filter(indicator_id=indicator_id)
        if since is not None:
            qs = qs.filter(timestamp__gte=since)
        if above:
            hot = qs.filter(i__gte=_threshold()).values("identifier")
            qs = qs.filter(identifier__in=hot)
        return qs

    def query(
        self,
        partition: Partition,
        *,
        identifier: Optional[str] = None,
        indicator_id: Optional[int] = None,
        since: Optional[datetime] = None,
        above: bool = False,
        order_by: Sequence[str] = ("timestamp", "sample", "id"),
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        qs = self._queryset(partition, identifier, indicator_id, since, above).order_by(*order_by).values(*ROW_FIELDS)
        if limit is not None:
            qs = qs[:limit]
        with self._guard(f"query({partition.value})"):
            return list(qs)

    def batches(
        self,
        partition: Partition,
        *,
        indicator_id: Optional[int] = None,
        since: Optional[datetime] = None,
        above: bool = False,
    ) -> List[BatchSummary]:
        # 최근 N행만 스캔한 뒤 identifier 별 최소 timestamp
        rows = self.query(
            partition,
            indicator_id=indicator_id,
            since=since,
            above=above,
            order_by=("-timestamp", "-id"),
            limit=_row_limit(),
        )
        return earliest_per_batch(rows)

    # ---- indicator ----
    def upsert_indicator(
        self,
        indicator_id: int,
        value: float,
        updated_at: datetime,
        motor: Optional[str] = None,
    ) -> Indicator:
        defaults = {"value": value, "updated_at": updated_at}
        if motor is not None:
            defaults["motor"] = motor
        with self._guard(f"upsert_indicator({indicator_id})"):
            obj, created = Indicator.objects.using(self.using).update_or_create(
                indicator_id=indicator_id, defaults=defaults,
            )
        logger.info("[store] indicator %s %s value=%s", indicator_id, "created" if created else "updated", value)
        return obj

    def indicators(self, indicator_id: Optional[int] = None) -> List[Indicator]:
        qs = Indicator.objects.using(self.using).order_by("indicator_id")
        if indicator_id is not None:
            qs = qs.filter(indicator_id=indicator_id)
        with self._guard("indicators"):
            return list(qs)
