from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter

from django.apps import apps
from django.conf import settings
from django.views.decorators.csrf import csrf_exempt
from django.utils.decorators import method_decorator

import logging

from .batching import Sample, capture_instant, passes_threshold, synthesize
from .exceptions import InvalidInput, NotFound
from .partitions import resolve_partition
from .serializers import (
    SampleSerializer,
    IngestResponseSerializer,
    IndicatorEntrySerializer,
    BatchListResponseSerializer,
    ReadingListResponseSerializer,
    IndicatorListResponseSerializer,
    IndicatorItemSerializer,
)
from .utils import (
    local_tz,
    parse_id,
    parse_ts,
    serialize_batch,
    serialize_indicator,
    serialize_reading_row,
)

access_log = logging.getLogger("django.request")

EXPECTED_ARRAY = "Invalid format, expected an array."


def _truthy(v) -> bool:
    return str(v).lower() in ("1", "true", "yes", "on")


class StoreMixin:
    # as_view(store=...) 로 주입 가능, 없으면 앱 설정에서 만든 것을 사용
    store = None

    def get_store(self):
        return self.store or apps.get_app_config("currentlog").store


def _require_array(data):
    if not isinstance(data, list):
        raise InvalidInput(EXPECTED_ARRAY)
    return data


@method_decorator(csrf_exempt, name="dispatch")
class LogCollectionView(StoreMixin, APIView):
    """
    POST: 샘플 배열 수신 → 1초 간격 timestamp 부여 후 일괄 저장
    GET : identifier 별 가장 이른 timestamp 목록 + indicator 상태
    indicator_id 가 경로에 있으면 해당 디바이스로 한정.
    """
    authentication_classes = []

    @extend_schema(
        tags=["collect"],
        summary="샘플 배열 수신 (sample, I)",
        request=SampleSerializer(many=True),
        responses={201: IngestResponseSerializer, 200: IngestResponseSerializer},
    )
    def post(self, request, partition, indicator_id=None):
        part = resolve_partition(partition)
        ind = parse_id(indicator_id) if indicator_id is not None else None
        data = _require_array(request.data)

        ser = SampleSerializer(data=data, many=True)
        if not ser.is_valid():
            raise InvalidInput(ser.errors)
        samples = [Sample(sample=d["sample"], value=d["I"]) for d in ser.validated_data]

        access_log.info(f"[ingest] table={part.value} indicator_id={ind} n={len(samples)}")

        if not samples:
            return Response(
                {"ok": True, "message": "No data to store", "identifier": None, "stored": 0},
                status=status.HTTP_200_OK,
            )

        threshold = float(getattr(settings, "SENSORLOG_THRESHOLD", 400))
        if getattr(settings, "SENSORLOG_THRESHOLD_GATE", True) and not passes_threshold(samples, threshold):
            access_log.info(f"[ingest] table={part.value} below threshold={threshold}, skipped")
            return Response(
                {"ok": True, "message": f"No value above {threshold:g}, data not stored", "identifier": None, "stored": 0},
                status=status.HTTP_200_OK,
            )

        readings = synthesize(samples, capture_instant(local_tz()), indicator_id=ind)
        stored = self.get_store().bulk_insert(part, readings)

        return Response(
            {"ok": True, "message": "Data received successfully", "identifier": readings[0].identifier, "stored": stored},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        parameters=[
            OpenApiParameter(name="above", type=bool, required=False, description="임계값 이상 샘플이 있는 배치만"),
            OpenApiParameter(name="since", type=str, required=False, description="ISO8601, 이후 데이터만"),
        ],
        tags=["dashboard"],
        summary="배치 목록 (identifier, 가장 이른 timestamp)",
        responses=BatchListResponseSerializer,
        request=None,
    )
    def get(self, request, partition, indicator_id=None):
        part = resolve_partition(partition)
        ind = parse_id(indicator_id) if indicator_id is not None else None

        since = request.GET.get("since")
        if since:
            try:
                since = parse_ts(since)
            except (ValueError, OverflowError):
                raise InvalidInput("since must be valid ISO8601 string (e.g. 2025-10-13T12:34:56+07:00)")
        else:
            since = None

        store = self.get_store()
        batches = store.batches(part, indicator_id=ind, since=since, above=_truthy(request.GET.get("above", "")))
        indicators = store.indicators(ind)

        return Response({
            "status": [serialize_indicator(x) for x in indicators],
            "arus": [serialize_batch(b) for b in batches],
        })


@method_decorator(csrf_exempt, name="dispatch")
class LogRecentView(StoreMixin, APIView):
    authentication_classes = []
    DEFAULT_ITEMS = 100
    MAX_ITEMS = 500

    @extend_schema(
        parameters=[
            OpenApiParameter(name="limit", type=int, required=False, description="최근 N개 (기본 100, 최대 500)"),
        ],
        tags=["dashboard"],
        summary="최근 원본 행 (최신순)",
        responses=ReadingListResponseSerializer,
        request=None,
    )
    def get(self, request, partition):
        part = resolve_partition(partition)
        # limit 안전 처리
        try:
            limit = int(request.GET.get("limit", self.DEFAULT_ITEMS))
        except ValueError:
            limit = self.DEFAULT_ITEMS
        limit = max(1, min(limit, self.MAX_ITEMS))

        rows = self.get_store().query(part, order_by=("-timestamp", "-id"), limit=limit)
        resp = Response({"ok": True, "items": [serialize_reading_row(r) for r in rows]})
        resp["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        return resp


@method_decorator(csrf_exempt, name="dispatch")
class LogBatchView(StoreMixin, APIView):
    authentication_classes = []

    @extend_schema(
        tags=["dashboard"],
        summary="배치 하나의 전체 행 (timestamp 오름차순)",
        responses=ReadingListResponseSerializer,
        request=None,
    )
    def get(self, request, partition, identifier, indicator_id=None):
        part = resolve_partition(partition)
        ind = parse_id(indicator_id) if indicator_id is not None else None

        rows = self.get_store().query(part, identifier=identifier, indicator_id=ind)
        if not rows:
            raise NotFound(f"No data for identifier {identifier}")
        return Response({"ok": True, "identifier": identifier, "items": [serialize_reading_row(r) for r in rows]})


@method_decorator(csrf_exempt, name="dispatch")
class IndicatorView(StoreMixin, APIView):
    authentication_classes = []

    @extend_schema(
        tags=["indicator"],
        summary="indicator 값/모터 라벨 upsert",
        request=IndicatorEntrySerializer(many=True),
        responses=IndicatorListResponseSerializer,
    )
    def post(self, request):
        data = _require_array(request.data)
        ser = IndicatorEntrySerializer(data=data, many=True)
        if not ser.is_valid():
            raise InvalidInput(ser.errors)

        now = capture_instant(local_tz())
        store = self.get_store()
        # 항목별 개별 upsert, 모두 같은 updated_at
        items = [
            store.upsert_indicator(e["indicator_id"], e["value"], now, motor=e.get("motor"))
            for e in ser.validated_data
        ]
        access_log.info(f"[indicator] upserted {[x.indicator_id for x in items]}")
        return Response({"ok": True, "items": [serialize_indicator(x) for x in items]})

    @extend_schema(
        tags=["indicator"],
        summary="전체 indicator 조회",
        responses=IndicatorListResponseSerializer,
        request=None,
    )
    def get(self, request):
        items = self.get_store().indicators()
        return Response({"ok": True, "items": [serialize_indicator(x) for x in items]})


@method_decorator(csrf_exempt, name="dispatch")
class IndicatorDetailView(StoreMixin, APIView):
    authentication_classes = []

    @extend_schema(
        tags=["indicator"],
        summary="indicator 하나 조회",
        responses=IndicatorItemSerializer,
        request=None,
    )
    def get(self, request, indicator_id):
        ind = parse_id(indicator_id)
        found = self.get_store().indicators(ind)
        if not found:
            raise NotFound(f"Indicator {ind} not found")
        return Response(serialize_indicator(found[0]))
