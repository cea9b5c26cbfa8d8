from rest_framework import serializers

# models.IntegerField 범위 (32bit)
INT_MIN, INT_MAX = -2**31, 2**31 - 1

# Ingest (요청 아이템): [{"sample": 0, "I": 401.2}, ...]
class SampleSerializer(serializers.Serializer):
    sample = serializers.IntegerField(min_value=INT_MIN, max_value=INT_MAX)
    I      = serializers.FloatField()

# Ingest (응답)
class IngestResponseSerializer(serializers.Serializer):
    ok         = serializers.BooleanField()
    message    = serializers.CharField()
    identifier = serializers.CharField(required=False, allow_null=True)
    stored     = serializers.IntegerField()


# Records (응답 아이템)
class ReadingItemSerializer(serializers.Serializer):
    id           = serializers.IntegerField()
    sample       = serializers.IntegerField()
    I            = serializers.FloatField()
    timestamp    = serializers.CharField()
    identifier   = serializers.CharField()
    indicator_id = serializers.IntegerField(allow_null=True)


class BatchItemSerializer(serializers.Serializer):
    id        = serializers.CharField(help_text="배치 identifier")
    timestamp = serializers.CharField(help_text="배치의 가장 이른 timestamp (ISO8601)")


# Indicator
class IndicatorEntrySerializer(serializers.Serializer):
    indicator_id = serializers.IntegerField(min_value=INT_MIN, max_value=INT_MAX)
    value        = serializers.FloatField()
    motor        = serializers.CharField(max_length=64, required=False, allow_blank=True)


class IndicatorItemSerializer(serializers.Serializer):
    indicator_id = serializers.IntegerField()
    value        = serializers.FloatField()
    motor        = serializers.CharField(allow_null=True)
    updated_at   = serializers.CharField()


# 컨테이너
class BatchListResponseSerializer(serializers.Serializer):
    status = IndicatorItemSerializer(many=True)
    arus   = BatchItemSerializer(many=True)


class ReadingListResponseSerializer(serializers.Serializer):
    ok    = serializers.BooleanField()
    items = ReadingItemSerializer(many=True)


class IndicatorListResponseSerializer(serializers.Serializer):
    ok    = serializers.BooleanField()
    items = IndicatorItemSerializer(many=True)
